from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

Amount = Union[Decimal, int, float, str]

_QUANT = Decimal("0.01")
ZERO = Decimal("0.00")


def parse_amount(value: Amount) -> Decimal:
    """
    Convert an amount to an exact, unrounded Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion. Sign and balance checks run on this
    value, before any rounding.
    """
    if isinstance(value, bool):
        raise TypeError("Amount must be a number, not a bool")
    if isinstance(value, float):
        value = str(value)
    if isinstance(value, str):
        raw = value.strip()
        if raw == "":
            raise ValueError("Amount cannot be empty")
        try:
            value = Decimal(raw)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal amount: {raw!r}") from exc
    elif isinstance(value, int):
        value = Decimal(value)
    elif not isinstance(value, Decimal):
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")

    if not value.is_finite():
        raise ValueError(f"Amount must be finite: {value}")
    return value


def quantize_money(value: Decimal) -> Decimal:
    """Round half-up to cents; a zero result is always ``0.00``, never ``-0.00``."""
    try:
        rounded = value.quantize(_QUANT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {value}") from exc
    if rounded.is_zero():
        return ZERO
    return rounded
