"""Application wiring and the server entry point."""

from __future__ import annotations

import argparse
import logging

from flask import Flask
from sqlalchemy.engine import Engine

from .config import DBConfig, get_server_port, load
from .database import close_db, init_db
from .handlers import measures_blueprint, products_blueprint, universal_blueprint
from .repository import UnifiedRepository
from .services import MeasureService, ProductService, UniversalService

log = logging.getLogger(__name__)


def create_app(engine: Engine | None) -> Flask:
    """Build the Flask application with every route bound to ``engine``."""
    if engine is None:
        raise RuntimeError("DB connection is nil")
    repo = UnifiedRepository(engine)
    flask_app = Flask(__name__)

    flask_app.register_blueprint(universal_blueprint(UniversalService(repo)))
    log.info("Universal routes initialized successfully")
    log.info("Initializing products routes...")
    flask_app.register_blueprint(products_blueprint(ProductService(repo.product)))
    log.info("Initializing measures routes...")
    flask_app.register_blueprint(measures_blueprint(MeasureService(repo.measure)))
    log.info("All routes initialized successfully")
    return flask_app


class App:
    """A configured application: settings, database engine and router."""

    def __init__(self, config: DBConfig, engine: Engine) -> None:
        self.config = config
        self.engine = engine
        self.router = create_app(engine)

    def close(self) -> None:
        try:
            close_db()
        except Exception as exc:
            log.error("Error closing database: %s", exc)


def initialize(config: DBConfig | None = None) -> App:
    """Connect to the database described by ``config`` and build the application."""
    cfg = config if config is not None else load()
    engine = init_db(cfg.url())
    return App(cfg, engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stockapi", description="Serve the products and measures HTTP API."
    )
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        app = initialize()
    except Exception as exc:
        log.critical("Failed to connect to database: %s", exc)
        return 1

    try:
        port = get_server_port()
        log.info("Starting server on port %s", port)
        app.router.run(host="0.0.0.0", port=int(port))
    except (OSError, ValueError) as exc:
        log.critical("Failed to start server: %s", exc)
        return 1
    finally:
        app.close()
    return 0