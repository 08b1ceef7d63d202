"""Rental Contract Administration Toolkit.

This package provides the date-safe helpers behind a rental administration
application: calendar-date normalization, contract and installment date
arithmetic, display formatting and idempotent schema migrations.

Key modules:
- dates: Calendar-date parsing, formatting and month arithmetic
- schema: Enumerations and record types
- formatting: Currency, enum label and address formatting
- payments: Installment schedules and overdue checks
- contracts: Renewal terms and contract dashboard counts
- migrations: "Add column if missing" schema migrations
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "dates",
    "schema",
    "formatting",
    "payments",
    "contracts",
    "migrations",
]
