"""Brazilian Real (BRL) currency formatting."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

Number = Union[int, float, Decimal]

CURRENCY_SYMBOL = "R$"
_CENT = Decimal("0.01")
_MIN_PRECISION = 28
# en-US grouping -> pt-BR grouping
_PT_BR_SEPARATORS = str.maketrans({",": ".", ".": ","})


def _to_decimal(value: Number) -> Decimal:
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: {value!r}")
    return amount


def _precision_for(amount: Decimal) -> int:
    # Integer digits plus two decimals, with room for the rounding carry
    return max(_MIN_PRECISION, amount.adjusted() + 4)


def _format_amount(amount: Decimal, shift: int = 0) -> str:
    with localcontext() as ctx:
        ctx.prec = _precision_for(amount)
        if shift:
            amount = amount.scaleb(shift)
        amount = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        sign = "-" if amount < 0 else ""
        digits = f"{abs(amount):,.2f}".translate(_PT_BR_SEPARATORS)
    return f"{sign}{CURRENCY_SYMBOL} {digits}"


def format_currency(value: Number) -> str:
    """Format an amount as pt-BR currency, e.g. 1234.5 -> 'R$ 1.234,50'."""
    return _format_amount(_to_decimal(value))


def format_cents(value_cents: int) -> str:
    """Format an amount stored in cents."""
    return _format_amount(_to_decimal(value_cents), shift=-2)
