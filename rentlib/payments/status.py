"""
Payment due-state checks.

All comparisons are made between calendar dates; "today" comes from an
injected :class:`~rentlib.dates.Clock`.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from rentlib.dates import Clock, DateLike, resolve_clock, to_date
from rentlib.schema.entities import Payment


def is_payment_overdue(
    due_date: DateLike, is_paid: Optional[bool], clock: Optional[Clock] = None
) -> bool:
    """True when an unpaid payment's due date is strictly before today."""
    if is_paid:
        return False
    today = resolve_clock(clock).today()
    return to_date(due_date) < today


@dataclass(frozen=True)
class PaymentSummary:
    """Unpaid payment counts for the dashboard."""

    pending: int
    overdue: int

    @property
    def unpaid(self) -> int:
        return self.pending + self.overdue


def payment_summary(
    payments: Iterable[Payment], clock: Optional[Clock] = None
) -> PaymentSummary:
    """Count unpaid payments due today or later (pending) and before today (overdue)."""
    today = resolve_clock(clock).today()
    pending = overdue = 0
    for payment in payments:
        if payment.is_paid:
            continue
        if to_date(payment.due_date) < today:
            overdue += 1
        else:
            pending += 1
    return PaymentSummary(pending=pending, overdue=overdue)
