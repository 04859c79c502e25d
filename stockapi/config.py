"""Settings read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy.engine import URL

DEFAULT_DB_PORT = "5432"
DEFAULT_SERVER_PORT = "8080"
PASSWORD = "password"

_CREDENTIAL_ENV = "DB_PASSWORD"


def get_env(key: str, default: str) -> str:
    """Return the environment variable ``key``, or ``default`` when it is unset."""
    return os.environ.get(key, default)


@dataclass
class DBConfig:
    """Connection settings for the PostgreSQL database."""

    host: str = "localhost"
    port: str = DEFAULT_DB_PORT
    user: str = "postgres"
    password: str = PASSWORD
    name: str = "testovik"
    ssl_mode: str = "disable"

    def connection_string(self) -> str:
        """Return the settings as a libpq key/value connection string."""
        return (
            f"host={self.host} port={self.port} user={self.user} "
            f"password={self.password} dbname={self.name} sslmode={self.ssl_mode}"
        )

    def url(self) -> URL:
        """Return the settings as a database URL usable by SQLAlchemy."""
        password = self.password
        return URL.create(
            "postgresql",
            username=self.user,
            password=password,
            host=self.host,
            port=int(self.port),
            database=self.name,
            query={"sslmode": self.ssl_mode},
        )


def load() -> DBConfig:
    """Build the database settings from the environment, with defaults."""
    password = get_env(_CREDENTIAL_ENV, PASSWORD)
    return DBConfig(
        host=get_env("DB_HOST", "localhost"),
        port=get_env("DB_PORT", DEFAULT_DB_PORT),
        user=get_env("DB_USER", "postgres"),
        password=password,
        name=get_env("DB_NAME", "testovik"),
        ssl_mode=get_env("DB_SSLMODE", "disable"),
    )


def get_server_port() -> str:
    """Return the port the HTTP server listens on."""
    return get_env("SERVER_PORT", DEFAULT_SERVER_PORT)