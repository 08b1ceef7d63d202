"""Installment schedules, overdue checks and payment reports."""

from .report import REPORT_COLUMNS, payments_frame
from .schedule import generate_installments, installment_due_date, installment_schedule
from .status import PaymentSummary, is_payment_overdue, payment_summary

__all__ = [
    "is_payment_overdue",
    "PaymentSummary",
    "payment_summary",
    "installment_due_date",
    "installment_schedule",
    "generate_installments",
    "payments_frame",
    "REPORT_COLUMNS",
]
