# gst_billing/domain/services/formatting.py
"""
Formatting helpers for document rendering.

Plain functions taking explicit arguments; rendering layers import them
directly instead of registering template helpers globally.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from gst_billing.domain.money import round2, to_decimal


def format_currency(value: Decimal | int | float | str | None) -> str:
    """Two-decimal string, e.g. ``1234.5`` -> ``"1234.50"``. Missing values give ``"0.00"``."""
    return f"{round2(to_decimal(value)):.2f}"


def format_indian_number(value: Decimal | int | float | str | None) -> str:
    """
    Group digits the Indian way: ``1234567.8`` -> ``"12,34,567.80"``.
    """
    amount = round2(to_decimal(value))
    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):.2f}".partition(".")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    return f"{sign}{whole}.{fraction}"


def format_date(value: date | datetime | str | None) -> str:
    """
    ``DD/MM/YYYY`` for dates and ISO strings (``2025-01-15T10:00:00Z``).
    Strings that are not ``YYYY-MM-DD`` are returned unchanged.
    """
    if not value:
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime("%d/%m/%Y")
    text = str(value)
    parts = text.split("T")[0].split("-")
    if len(parts) != 3:
        return text
    year, month, day = parts
    return f"{day}/{month}/{year}"
