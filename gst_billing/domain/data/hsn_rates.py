# gst_billing/domain/data/hsn_rates.py
"""
HSN/SAC codes with their GST rate (%).

Read-only reference backing the HSN rate lookup endpoint. Chapter-level
(2-digit) entries act as defaults for longer codes that are not listed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class HsnRate:
    code: str
    description: str
    gst_rate: Decimal

    def to_dict(self) -> dict:
        return {"code": self.code, "description": self.description, "gst_rate": self.gst_rate}


_HSN_ROWS: list[tuple[str, str, str]] = [
    ("84", "Nuclear reactors, boilers, machinery", "18"),
    ("8471", "Computers and data processing machines", "18"),
    ("85", "Electrical machinery and equipment", "18"),
    ("8517", "Telephones and communication equipment", "18"),
    ("04", "Dairy produce; birds eggs; natural honey", "0"),
    ("0402", "Milk and cream", "0"),
    ("04029990", "Other milk and cream", "0"),
    ("10", "Cereals", "0"),
    ("9983", "Information technology support services", "18"),
    ("99831", "Information technology support and management", "18"),
    ("998313", "IT infrastructure and network management", "18"),
    ("9997", "Other professional, technical and business services", "18"),
    ("9971", "Rental or leasing services", "18"),
    ("9965", "Goods transport services", "18"),
    ("9985", "Support services", "18"),
    ("25", "Salt; sulphur; earths and stone", "5"),
    ("28", "Inorganic chemicals", "18"),
    ("39", "Plastics and articles thereof", "18"),
    ("48", "Paper and paperboard", "12"),
    ("49", "Printed books, newspapers", "0"),
    ("72", "Iron and steel", "18"),
    ("73", "Articles of iron or steel", "18"),
    ("94", "Furniture; bedding; lamps", "18"),
]

HSN_RATES: dict[str, HsnRate] = {
    code: HsnRate(code=code, description=desc, gst_rate=Decimal(rate))
    for code, desc, rate in _HSN_ROWS
}

MIN_CODE_LENGTH = 2


def get_hsn_rate(code: str | None) -> HsnRate | None:
    """
    Look up an HSN/SAC code.

    Exact match first, then progressively shorter prefixes down to two
    characters (``84713010`` -> ``8471``). Returns None if nothing matches.
    """
    if not code or not isinstance(code, str):
        return None
    normalized = code.strip()
    if len(normalized) < MIN_CODE_LENGTH:
        return None
    for length in range(len(normalized), MIN_CODE_LENGTH - 1, -1):
        row = HSN_RATES.get(normalized[:length])
        if row:
            return row
    return None
