"""Idempotent "add column if missing" schema migrations."""

from .definitions import (
    COLUMN_EXISTS_QUERY,
    DEFAULT_MIGRATIONS,
    AddColumn,
    AlterStatement,
    Migration,
    column_exists,
)
from .runner import DatabaseConfig, MigrationError, connect, run_migrations

__all__ = [
    "AddColumn",
    "AlterStatement",
    "Migration",
    "DEFAULT_MIGRATIONS",
    "COLUMN_EXISTS_QUERY",
    "column_exists",
    "DatabaseConfig",
    "MigrationError",
    "connect",
    "run_migrations",
]
