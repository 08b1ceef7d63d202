"""Plain record types shared by the formatting, payment and contract helpers."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from .enums import ContractStatus


@dataclass
class Address:
    street: Optional[str] = None
    number: Optional[str] = None
    complement: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


@dataclass
class Contract:
    """Rental contract. Money amounts are in cents."""

    start_date: date
    end_date: date
    duration: int
    rent_value: int
    first_payment_date: date
    status: ContractStatus = ContractStatus.ATIVO
    id: Optional[int] = None
    is_renewal: bool = False
    original_contract_id: Optional[int] = None
    observations: Optional[str] = None


@dataclass
class Payment:
    """Single installment of a contract. Money amounts are in cents."""

    contract_id: Optional[int]
    due_date: date
    value: int
    is_paid: bool = False
    installment_number: int = 0
    payment_date: Optional[date] = None
    interest_amount: int = 0
    late_payment_fee: int = 0
    observations: Optional[str] = None

    @property
    def total_due(self) -> int:
        """Value plus interest and late fee, in cents."""
        return self.value + self.interest_amount + self.late_payment_fee


@dataclass
class ContractRenewal:
    """Result of renewing a contract: the new contract and its terms."""

    original_contract: Contract
    contract: Contract
    renewal_date: date
    new_rent_value: int
    adjustment_index: str = "IGP-M"
    payments: List[Payment] = field(default_factory=list)
