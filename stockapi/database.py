"""Process-wide database engine."""

from __future__ import annotations

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine

log = logging.getLogger(__name__)

_engine: Engine | None = None


def init_db(url: str | URL) -> Engine:
    """Open the database at ``url``, check it answers, and keep it as the current engine."""
    global _engine
    engine = create_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise
    if _engine is not None:
        _engine.dispose()
    _engine = engine
    log.info("Successfully connected to database!")
    return engine


def get_db() -> Engine | None:
    """Return the current engine, or None when no database is open."""
    return _engine


def close_db() -> None:
    """Close the current engine, if any."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None