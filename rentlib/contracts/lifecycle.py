"""
Contract creation and renewal.

Renewing a contract never mutates the original record: the original is
returned as a copy with status ``renovado`` next to the new contract and its
installments.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from rentlib.dates import Clock, DateLike, add_months, resolve_clock, to_date
from rentlib.payments.schedule import generate_installments
from rentlib.schema.entities import Contract, ContractRenewal
from rentlib.schema.enums import ContractStatus

logger = logging.getLogger(__name__)

DEFAULT_ADJUSTMENT_INDEX = "IGP-M"


def _validate_terms(duration: int, rent_value: int) -> None:
    if duration < 1:
        raise ValueError("Contract duration must be at least 1 month")
    if rent_value <= 0:
        raise ValueError("Rent value must be positive")


def create_contract(
    start_date: DateLike,
    duration: int,
    rent_value: int,
    first_payment_date: Optional[DateLike] = None,
    contract_id: Optional[int] = None,
    clock: Optional[Clock] = None,
) -> Contract:
    """
    Build a contract with its derived dates.

    Args:
        start_date: First day of the contract
        duration: Length in months
        rent_value: Monthly rent in cents
        first_payment_date: Due date of the first installment (defaults to start)
        contract_id: Identifier, when already known
        clock: Time source deciding whether the contract starts in the future

    Returns:
        Contract ending ``duration`` months after the start, ``pendente`` when
        it starts after today and ``ativo`` otherwise
    """
    _validate_terms(duration, rent_value)
    start = to_date(start_date)
    first_payment = to_date(first_payment_date) if first_payment_date is not None else start
    today = resolve_clock(clock).today()
    status = ContractStatus.PENDENTE if start > today else ContractStatus.ATIVO

    return Contract(
        id=contract_id,
        start_date=start,
        end_date=add_months(start, duration),
        duration=int(duration),
        rent_value=int(rent_value),
        first_payment_date=first_payment,
        status=status,
    )


def renew_contract(
    original: Contract,
    start_date: DateLike,
    duration: int,
    new_rent_value: int,
    adjustment_index: str = DEFAULT_ADJUSTMENT_INDEX,
    renewal_date: Optional[DateLike] = None,
    first_payment_date: Optional[DateLike] = None,
    clock: Optional[Clock] = None,
) -> ContractRenewal:
    """Renew ``original`` into a new active contract with fresh installments."""
    _validate_terms(duration, new_rent_value)
    if not adjustment_index or not adjustment_index.strip():
        raise ValueError("Adjustment index is required")

    start = to_date(start_date)
    first_payment = to_date(first_payment_date) if first_payment_date is not None else start
    signed_on = (
        to_date(renewal_date) if renewal_date is not None else resolve_clock(clock).today()
    )

    renewed = Contract(
        start_date=start,
        end_date=add_months(start, duration),
        duration=int(duration),
        rent_value=int(new_rent_value),
        first_payment_date=first_payment,
        status=ContractStatus.ATIVO,
        is_renewal=True,
        original_contract_id=original.id,
    )
    payments = generate_installments(
        renewed.id, first_payment, renewed.duration, renewed.rent_value, renewal=True
    )
    logger.info(
        "Renewed contract %s: %s to %s, %s installments",
        original.id,
        renewed.start_date,
        renewed.end_date,
        len(payments),
    )

    return ContractRenewal(
        original_contract=dataclasses.replace(original, status=ContractStatus.RENOVADO),
        contract=renewed,
        renewal_date=signed_on,
        new_rent_value=renewed.rent_value,
        adjustment_index=adjustment_index.strip(),
        payments=payments,
    )
