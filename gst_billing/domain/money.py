# gst_billing/domain/money.py
"""
Decimal helpers shared by the tax calculators.

Computation always runs on unrounded ``Decimal`` values; ``round2`` is only
applied when a figure is reported.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from gst_billing.domain.errors import InvalidAmountError

ZERO = Decimal("0")
HUNDRED = Decimal("100")
PAISE = Decimal("0.01")
RUPEE = Decimal("1")


def to_decimal(value: Any) -> Decimal:
    """Convert an optional numeric value to Decimal; missing values become 0."""
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return ZERO


def _quantize(value: Decimal, exp: Decimal) -> Decimal:
    try:
        return value.quantize(exp, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount out of range: {value}") from exc


def round2(value: Decimal) -> Decimal:
    """Round half-up to paise."""
    return _quantize(value, PAISE)


def round_rupee(value: Decimal) -> Decimal:
    """Round half-up to the whole rupee, keeping two decimal places."""
    return _quantize(_quantize(value, RUPEE), PAISE)
