"""
Migration runner for the rental PostgreSQL schema.

Runs once at process start, before the application accepts traffic.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional

import psycopg2

from .definitions import DEFAULT_MIGRATIONS, Migration

logger = logging.getLogger(__name__)


class MigrationError(RuntimeError):
    """Raised when a required migration fails."""


@dataclass
class DatabaseConfig:
    """Connection settings. ``dsn`` wins over the individual fields."""

    dsn: Optional[str] = None
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = ""
    database: str = "postgres"

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """
        Read settings from the environment.

        DATABASE_URL, or POSTGRES_HOST / POSTGRES_PORT / POSTGRES_USER /
        POSTGRES_PASSWORD / POSTGRES_DB.
        """
        return cls(
            dsn=os.getenv("DATABASE_URL") or None,
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "postgres"),
        )

    def connect_kwargs(self) -> dict:
        if self.dsn:
            return {"dsn": self.dsn}
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "dbname": self.database,
        }


def connect(config: Optional[DatabaseConfig] = None):
    """Open a psycopg2 connection (settings from the environment by default)."""
    config = config or DatabaseConfig.from_env()
    return psycopg2.connect(**config.connect_kwargs())


def run_migrations(
    connection, migrations: Optional[Iterable[Migration]] = None
) -> List[Migration]:
    """
    Apply migrations in order.

    Each statement commits on its own. A failing optional migration is logged
    and skipped; a failing required one stops the run with MigrationError.

    Args:
        connection: Open psycopg2 connection
        migrations: Entries to apply (defaults to DEFAULT_MIGRATIONS)

    Returns:
        Entries that changed the schema or data
    """
    if migrations is None:
        migrations = DEFAULT_MIGRATIONS

    logger.info("Running database migrations")
    applied: List[Migration] = []
    previous_autocommit = connection.autocommit
    connection.autocommit = True
    try:
        with connection.cursor() as cur:
            for migration in migrations:
                try:
                    changed = migration.apply(cur)
                except psycopg2.Error as exc:
                    if migration.required:
                        logger.error("Migration failed: %s: %s", migration.description, exc)
                        raise MigrationError(f"Migration failed: {migration.description}") from exc
                    logger.error("Skipping failed migration: %s: %s", migration.description, exc)
                    continue

                if changed:
                    logger.info("Applied: %s", migration.description)
                    applied.append(migration)
                else:
                    logger.info("Already up to date: %s", migration.description)
    finally:
        connection.autocommit = previous_autocommit

    logger.info("Migrations finished (%s applied)", len(applied))
    return applied
