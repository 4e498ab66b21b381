# gst_billing/domain/services/gstin_validation.py

import re

from gst_billing.domain.data.gst_states import GstState, get_state_by_gstin

PAN_REGEX = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
GSTIN_REGEX = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")
GSTIN_LENGTH = 15


def is_valid_pan(pan: str | None) -> bool:
    if not pan:
        return False
    pan = pan.strip().upper()
    return bool(PAN_REGEX.match(pan))


def is_valid_gstin(gstin: str | None) -> bool:
    """Format check plus a registered state code in the first two digits."""
    if not gstin:
        return False
    gstin = gstin.strip().upper()
    if not GSTIN_REGEX.match(gstin):
        return False
    if get_state_by_gstin(gstin) is None:
        return False

    # PAN part inside GSTIN, chars 3-12
    return is_valid_pan(gstin[2:12])


def state_from_gstin(gstin: str | None) -> GstState | None:
    """
    State for a 15-character GSTIN.

    Only the length and the state prefix are checked, so partially
    malformed GSTINs still yield their state.
    """
    if not gstin:
        return None
    gstin = gstin.strip()
    if len(gstin) != GSTIN_LENGTH:
        return None
    return get_state_by_gstin(gstin)
