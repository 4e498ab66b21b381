# gst_billing/domain/services/place_of_supply.py
"""
Place-of-supply resolution.

Priority (highest first):
1. Explicit shipping-state override (name or code), if non-blank.
2. State code in the first two characters of the buyer GSTIN, if registered.
3. Billing state of the buyer (name or code), for unregistered buyers.
4. The seller's own state.

A tier whose input does not resolve to a registered state is skipped, so
resolution always ends on a valid code as long as the seller state is valid.
The result is decided once per document; an explicit override is never
re-derived from the buyer afterwards.
"""

from __future__ import annotations

import logging

from gst_billing.domain.data.gst_states import (
    GstState,
    get_state_by_code,
    get_state_by_gstin,
    resolve_state,
)
from gst_billing.domain.errors import PlaceOfSupplyError
from gst_billing.domain.models.documents import SupplyContext, SupplyType
from gst_billing.domain.models.totals import PlaceOfSupply, PlaceOfSupplySource

logger = logging.getLogger("place_of_supply")


def classify_supply(context: SupplyContext) -> PlaceOfSupply:
    """Resolve the place of supply and decide intrastate vs interstate."""
    seller = get_state_by_code(context.seller_state_code)
    if seller is None:
        raise PlaceOfSupplyError(
            f"Seller state code {context.seller_state_code!r} is not a registered GST state code"
        )

    state, source = _resolve_place(context, seller)
    supply_type = (
        SupplyType.INTRASTATE if state.code == seller.code else SupplyType.INTERSTATE
    )
    logger.debug(
        "Place of supply %s (%s) via %s: %s",
        state.code, state.name, source.value, supply_type.value,
    )
    return PlaceOfSupply(
        state_code=state.code,
        state_name=state.name,
        supply_type=supply_type,
        source=source,
    )


def _resolve_place(context: SupplyContext, seller: GstState) -> tuple[GstState, PlaceOfSupplySource]:
    override = (context.shipping_state or "").strip()
    if override:
        state = resolve_state(override)
        if state:
            return state, PlaceOfSupplySource.SHIPPING_OVERRIDE
        logger.warning("Unrecognised shipping state %r, ignoring override", override)

    gstin = (context.buyer_gstin or "").strip()
    if gstin:
        state = get_state_by_gstin(gstin)
        if state:
            return state, PlaceOfSupplySource.BUYER_GSTIN
        logger.info("Buyer GSTIN prefix %r is not a registered state code", gstin[:2])

    buyer_state = (context.buyer_state or "").strip()
    if buyer_state:
        state = resolve_state(buyer_state)
        if state:
            return state, PlaceOfSupplySource.BUYER_STATE

    return seller, PlaceOfSupplySource.SELLER_DEFAULT


def resolve_seller_state(
    state_code: str | None = None,
    state_name: str | None = None,
    gstin: str | None = None,
) -> GstState | None:
    """Seller state from an explicit code, else a name, else the seller GSTIN."""
    return (
        get_state_by_code(state_code)
        or resolve_state(state_name)
        or get_state_by_gstin(gstin)
    )


def supply_context_from_parties(
    *,
    seller_state_code: str | None = None,
    seller_state_name: str | None = None,
    seller_gstin: str | None = None,
    buyer_gstin: str | None = None,
    buyer_state_code: str | None = None,
    buyer_state_name: str | None = None,
    shipping_state_code: str | None = None,
    shipping_state_name: str | None = None,
) -> SupplyContext:
    """
    Build a SupplyContext from loosely specified party details, as received
    over the API.

    Raises PlaceOfSupplyError if the seller state cannot be determined.
    """
    seller = resolve_seller_state(seller_state_code, seller_state_name, seller_gstin)
    if seller is None:
        raise PlaceOfSupplyError(
            "Could not determine seller state. Provide sellerStateCode, "
            "sellerStateName or sellerGstin."
        )

    # A usable shipping code wins over a shipping name
    shipping = shipping_state_name
    if get_state_by_code(shipping_state_code):
        shipping = shipping_state_code
    elif not (shipping_state_name or "").strip():
        shipping = shipping_state_code

    buyer_state = buyer_state_name
    if get_state_by_code(buyer_state_code):
        buyer_state = buyer_state_code

    return SupplyContext(
        seller_state_code=seller.code,
        buyer_gstin=buyer_gstin,
        shipping_state=shipping,
        buyer_state=buyer_state,
    )


def classify_from_parties(**parties: str | None) -> PlaceOfSupply:
    """Shortcut for ``classify_supply(supply_context_from_parties(...))``."""
    return classify_supply(supply_context_from_parties(**parties))
