# gst_billing/domain/data/gst_states.py
"""
GST state codes (CBIC) and state names.

Read-only reference used for place of supply, state-from-GSTIN and GSTIN
validation. Tables are built once at import and never mutated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class GstState:
    code: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "name": self.name}


GST_STATE_CODES: dict[str, str] = {
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "25": "Daman and Diu",
    "26": "Dadra and Nagar Haveli and Daman and Diu",
    "27": "Maharashtra",
    "28": "Andhra Pradesh (Before Division)",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh",
    "38": "Ladakh",
    "97": "Other Territory",
}

# Older or informal spellings seen on invoices
_NAME_ALIASES: dict[str, str] = {
    "orissa": "21",
    "pondicherry": "34",
    "new delhi": "07",
    "nct of delhi": "07",
    "uttaranchal": "05",
    "dadra and nagar haveli": "26",
    "andaman and nicobar": "35",
}

_CODE_RE = re.compile(r"^\d{1,2}$")
# "27-Maharashtra", "27 - Maharashtra", "27 Maharashtra"
_CODE_PREFIX_RE = re.compile(r"^(\d{1,2})\s*[-–:]?\s*(.*)$")


def _normalize_name(name: str) -> str:
    name = name.replace("&", " and ").lower()
    return " ".join(name.split())


_STATES_BY_CODE: dict[str, GstState] = {
    code: GstState(code=code, name=name) for code, name in GST_STATE_CODES.items()
}
_CODE_BY_NAME: dict[str, str] = {
    _normalize_name(name): code for code, name in GST_STATE_CODES.items()
}
_CODE_BY_NAME.update(_NAME_ALIASES)


def normalize_state_code(value: str | int | None) -> str | None:
    """Return a zero-padded two-digit code for ``7``, ``"7"``, ``"07"``; otherwise None."""
    if value is None:
        return None
    s = str(value).strip()
    if not _CODE_RE.match(s):
        return None
    return s.zfill(2)


def get_state_by_code(code: str | int | None) -> GstState | None:
    normalized = normalize_state_code(code)
    if normalized is None:
        return None
    return _STATES_BY_CODE.get(normalized)


def get_state_by_name(name: str | None) -> GstState | None:
    if not name or not isinstance(name, str):
        return None
    code = _CODE_BY_NAME.get(_normalize_name(name))
    return _STATES_BY_CODE.get(code) if code else None


def get_state_by_gstin(gstin: str | None) -> GstState | None:
    """State encoded in the first two characters of a GSTIN, if registered."""
    if not gstin or not isinstance(gstin, str):
        return None
    gstin = gstin.strip()
    if len(gstin) < 2 or not gstin[:2].isdigit():
        return None
    return _STATES_BY_CODE.get(gstin[:2])


def resolve_state(value: str | int | None) -> GstState | None:
    """
    Resolve free-form user input to a state.

    Accepts a code (``"27"``, ``"7"``), a name (case and ``&``/``and``
    insensitive) or the ``"27-Maharashtra"`` form printed on invoices.
    In that form the name must match the code's state, so addresses such as
    ``"2nd Cross"`` do not resolve. Returns None when nothing matches.
    """
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    if _CODE_RE.match(s):
        return get_state_by_code(s)
    state = get_state_by_name(s)
    if state:
        return state
    m = _CODE_PREFIX_RE.match(s)
    if m is None:
        return None
    by_code = get_state_by_code(m.group(1))
    rest = m.group(2).strip()
    if by_code is None or not rest:
        return by_code
    return by_code if get_state_by_name(rest) == by_code else None


def is_valid_state_code(code: str | int | None) -> bool:
    return get_state_by_code(code) is not None


def list_states() -> list[GstState]:
    """All registered states sorted by code."""
    return sorted(_STATES_BY_CODE.values(), key=lambda s: s.code)
