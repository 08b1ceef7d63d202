from .currency import format_cents, format_currency
from .display import (
    format_contract_status,
    format_property_address,
    format_property_type,
)

__all__ = [
    "format_currency",
    "format_cents",
    "format_property_type",
    "format_contract_status",
    "format_property_address",
]
