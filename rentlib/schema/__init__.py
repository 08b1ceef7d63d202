from .entities import Address, Contract, ContractRenewal, Payment
from .enums import ContractStatus, PropertyType

__all__ = [
    "PropertyType",
    "ContractStatus",
    "Address",
    "Contract",
    "Payment",
    "ContractRenewal",
]
