"""Contract creation, renewal and dashboard counts."""

from .dashboard import ContractSummary, contract_summary
from .lifecycle import DEFAULT_ADJUSTMENT_INDEX, create_contract, renew_contract

__all__ = [
    "create_contract",
    "renew_contract",
    "DEFAULT_ADJUSTMENT_INDEX",
    "ContractSummary",
    "contract_summary",
]
