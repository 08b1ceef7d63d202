"""Monthly installment schedule helpers."""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from rentlib.dates import DateLike, add_months, to_date
from rentlib.schema.entities import Payment

logger = logging.getLogger(__name__)

RENEWAL_SUFFIX = " (Contrato Renovado)"


def installment_due_date(first_payment_date: DateLike, months_ahead: int) -> date:
    """Due date ``months_ahead`` months after the first payment.

    Keeps the first payment's day of month, clamped to the end of shorter months.
    Always computed from the first date so a clamped month does not drift later ones.
    """
    if months_ahead < 0:
        raise ValueError("months_ahead must be non-negative")
    return add_months(first_payment_date, months_ahead)


def installment_schedule(first_payment_date: DateLike, duration: int) -> List[date]:
    """Return the ``duration`` monthly due dates starting at the first payment."""
    if duration < 1:
        raise ValueError("duration must be at least 1 month")
    first = to_date(first_payment_date)
    return [installment_due_date(first, i) for i in range(duration)]


def generate_installments(
    contract_id: Optional[int],
    first_payment_date: DateLike,
    duration: int,
    value: int,
    renewal: bool = False,
) -> List[Payment]:
    """
    Build the unpaid installments of a contract.

    Args:
        contract_id: Contract the payments belong to
        first_payment_date: Due date of installment 1
        duration: Number of monthly installments (contract duration in months)
        value: Installment value in cents
        renewal: Whether the contract is a renewal (changes the observations)

    Returns:
        Payments numbered from 1 to ``duration``
    """
    if value < 0:
        raise ValueError("Installment value must be non-negative")

    suffix = RENEWAL_SUFFIX if renewal else ""
    payments = [
        Payment(
            contract_id=contract_id,
            due_date=due,
            value=int(value),
            installment_number=number,
            observations=f"Parcela {number}/{duration}{suffix}",
        )
        for number, due in enumerate(installment_schedule(first_payment_date, duration), start=1)
    ]
    logger.info("Generated %s installments for contract %s", len(payments), contract_id)
    return payments
