"""Contract counts shown on the dashboard."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional

from rentlib.dates import Clock, resolve_clock, to_date
from rentlib.schema.entities import Contract
from rentlib.schema.enums import ContractStatus

DEFAULT_EXPIRY_WINDOW_DAYS = 30


@dataclass(frozen=True)
class ContractSummary:
    expired: int
    expiring: int
    active: int


def contract_summary(
    contracts: Iterable[Contract],
    clock: Optional[Clock] = None,
    window_days: int = DEFAULT_EXPIRY_WINDOW_DAYS,
) -> ContractSummary:
    """
    Count expired, expiring and active contracts.

    Only active (``ativo``) contracts are expired or expiring. Expired: ended
    before today. Expiring: ends between today and ``window_days`` from now,
    inclusive.
    """
    if window_days < 0:
        raise ValueError("window_days must be non-negative")

    today = resolve_clock(clock).today()
    horizon = today + timedelta(days=window_days)
    expired = expiring = active = 0
    for contract in contracts:
        status = ContractStatus.parse(contract.status)
        if status != ContractStatus.ATIVO:
            continue
        active += 1
        end = to_date(contract.end_date)
        if end < today:
            expired += 1
        elif end <= horizon:
            expiring += 1
    return ContractSummary(expired=expired, expiring=expiring, active=active)
