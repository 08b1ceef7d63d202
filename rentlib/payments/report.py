"""Tabular payment report built with pandas."""

from typing import Iterable, Optional

import pandas as pd

from rentlib.dates import Clock, format_date_to_iso, resolve_clock, to_date
from rentlib.schema.entities import Payment

REPORT_COLUMNS = [
    "contract_id",
    "installment_number",
    "due_date",
    "value",
    "total_due",
    "is_paid",
    "overdue",
    "status",
]

STATUS_PAID = "Pago"
STATUS_OVERDUE = "Em atraso"
STATUS_PENDING = "Pendente"


def payments_frame(
    payments: Iterable[Payment], clock: Optional[Clock] = None
) -> pd.DataFrame:
    """
    Build a report table of payments.

    ``due_date`` is the ISO string; ``overdue`` and ``status`` are evaluated
    against the clock's today. Rows are ordered by due date then installment.
    """
    today = resolve_clock(clock).today()
    rows = []
    for payment in payments:
        due = to_date(payment.due_date)
        paid = bool(payment.is_paid)
        overdue = not paid and due < today
        if paid:
            status = STATUS_PAID
        elif overdue:
            status = STATUS_OVERDUE
        else:
            status = STATUS_PENDING
        rows.append(
            {
                "contract_id": payment.contract_id,
                "installment_number": payment.installment_number,
                "due_date": format_date_to_iso(due),
                "value": payment.value,
                "total_due": payment.total_due,
                "is_paid": paid,
                "overdue": overdue,
                "status": status,
            }
        )

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    if df.empty:
        return df
    return df.sort_values(["due_date", "installment_number"], kind="stable").reset_index(drop=True)
