"""
Declarative schema migrations.

Each entry knows how to apply itself with a DB-API cursor; the runner decides
ordering and what happens on failure.
"""

from dataclasses import dataclass
from typing import List, Union

from psycopg2 import sql

COLUMN_EXISTS_QUERY = """
    SELECT 1
    FROM information_schema.columns
    WHERE table_schema = current_schema()
      AND table_name = %s
      AND column_name = %s
"""


def column_exists(cursor, table: str, column: str) -> bool:
    """Check the schema catalog for ``table.column``."""
    cursor.execute(COLUMN_EXISTS_QUERY, (table, column))
    return cursor.fetchone() is not None


@dataclass(frozen=True)
class AddColumn:
    """Add ``column`` to ``table`` with ``definition`` unless it already exists."""

    table: str
    column: str
    definition: str
    required: bool = True

    @property
    def description(self) -> str:
        return f"add column {self.table}.{self.column}"

    def statement(self) -> sql.Composed:
        return sql.SQL("ALTER TABLE {} ADD COLUMN IF NOT EXISTS {} {}").format(
            sql.Identifier(self.table),
            sql.Identifier(self.column),
            sql.SQL(self.definition),
        )

    def apply(self, cursor) -> bool:
        """Return True when the column was added, False when already present."""
        if column_exists(cursor, self.table, self.column):
            return False
        cursor.execute(self.statement())
        return True


@dataclass(frozen=True)
class AlterStatement:
    """Free-form statement, safe to run repeatedly. Failures are tolerated by default."""

    description: str
    sql_text: str
    required: bool = False

    def statement(self) -> sql.SQL:
        return sql.SQL(self.sql_text)

    def apply(self, cursor) -> bool:
        cursor.execute(self.statement())
        return True


Migration = Union[AddColumn, AlterStatement]


DEFAULT_MIGRATIONS: List[Migration] = [
    AddColumn("payments", "is_restored", "BOOLEAN NOT NULL DEFAULT FALSE"),
    AddColumn("deleted_payments", "was_restored", "BOOLEAN NOT NULL DEFAULT FALSE"),
    AddColumn("payments", "installment_number", "INTEGER NOT NULL DEFAULT 0"),
    AddColumn("deleted_payments", "installment_number", "INTEGER NOT NULL DEFAULT 0"),
    AddColumn("contracts", "first_payment_date", "DATE"),
    AddColumn("contract_templates", "type", "TEXT NOT NULL DEFAULT 'residential'"),
    AddColumn("owners", "rg", "TEXT"),
    AlterStatement(
        "drop NOT NULL from contracts.payment_day",
        "ALTER TABLE contracts ALTER COLUMN payment_day DROP NOT NULL",
    ),
    AlterStatement(
        "classify commercial contract templates",
        """
        UPDATE contract_templates
        SET type = 'commercial'
        WHERE content ILIKE '%CONTRATO DE LOCAÇÃO COMERCIAL%'
           OR content ILIKE '%IMÓVEL COMERCIAL%'
        """,
    ),
]
