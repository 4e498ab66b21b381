# gst_billing/domain/services/amount_in_words.py
"""
Rupee amounts in words, Indian numbering system.

    amount_in_words(Decimal("100000"))    -> "One Lakh Rupees Only"
    amount_in_words(Decimal("1234.50"))   -> "One Thousand Two Hundred Thirty Four Rupees and Fifty Paise Only"
"""

from __future__ import annotations

from decimal import Decimal

from gst_billing.domain.errors import InvalidAmountError
from gst_billing.domain.money import round2, to_decimal

_ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
_TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000


def _below_thousand(n: int) -> str:
    """Words for 0 <= n < 1000; empty string for 0."""
    if n == 0:
        return ""
    if n < 10:
        return _ONES[n]
    if n < 20:
        return _TEENS[n - 10]
    if n < 100:
        tens, ones = divmod(n, 10)
        return _TENS[tens] + (f" {_ONES[ones]}" if ones else "")
    hundreds, rest = divmod(n, 100)
    words = f"{_ONES[hundreds]} Hundred"
    return f"{words} {_below_thousand(rest)}" if rest else words


def number_to_words(n: int) -> str:
    """Words for a non-negative integer using crore / lakh / thousand groups."""
    if n == 0:
        return "Zero"

    crore, n = divmod(n, CRORE)
    lakh, n = divmod(n, LAKH)
    thousand, units = divmod(n, THOUSAND)

    parts = []
    if crore:
        # Beyond 999 crore the crore count is itself spelled in groups
        parts.append(f"{number_to_words(crore)} Crore")
    if lakh:
        parts.append(f"{_below_thousand(lakh)} Lakh")
    if thousand:
        parts.append(f"{_below_thousand(thousand)} Thousand")
    if units:
        parts.append(_below_thousand(units))
    return " ".join(parts)


def amount_in_words(amount: Decimal | int | float | str) -> str:
    """
    "<rupees> Rupees and <paise> Paise Only"; the paise clause is dropped
    when paise is zero. Negative amounts are rejected.
    """
    value = round2(to_decimal(amount))
    if value < 0:
        raise InvalidAmountError(f"Cannot convert a negative amount to words: {amount}")
    if value == 0:
        return "Zero Rupees Only"

    rupees = int(value)
    paise = int((value - rupees) * 100)

    words = f"{number_to_words(rupees)} Rupees"
    if paise:
        words += f" and {number_to_words(paise)} Paise"
    return f"{words} Only"
