# gst_billing/api/v1/routes/gst.py
"""
GST reference endpoints: place of supply, state from GSTIN, GSTIN
validation, HSN rate lookup and the state master list.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from gst_billing.api.v1.envelope import ok
from gst_billing.api.v1.schemas.gst import (
    GstinStateResponse,
    GstinValidationResponse,
    HsnRateResponse,
    PlaceOfSupplyRequest,
    PlaceOfSupplyResponse,
    StateOut,
)
from gst_billing.domain.data.gst_states import list_states
from gst_billing.domain.data.hsn_rates import MIN_CODE_LENGTH, get_hsn_rate
from gst_billing.domain.errors import PlaceOfSupplyError
from gst_billing.domain.services.gstin_validation import is_valid_gstin, state_from_gstin
from gst_billing.domain.services.place_of_supply import classify_from_parties

logger = logging.getLogger("api.v1.gst")

router = APIRouter(prefix="/gst", tags=["GST"])
master_router = APIRouter(prefix="/master", tags=["Master Data"])


@router.post("/place-of-supply", response_model=dict)
async def place_of_supply(body: PlaceOfSupplyRequest):
    """Resolve the place of supply and whether the supply is intra- or interstate."""
    try:
        place = classify_from_parties(**body.model_dump())
    except PlaceOfSupplyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return ok(
        data=PlaceOfSupplyResponse(
            place_of_supply_state_code=place.state_code,
            place_of_supply_state_name=place.state_name,
            supply_type_display=place.supply_type_display,
        ).model_dump(by_alias=True)
    )


@router.get("/state-from-gstin", response_model=dict)
async def get_state_from_gstin(gstin: str = Query(default="", description="15-character GSTIN")):
    """State encoded in a GSTIN's first two digits."""
    state = state_from_gstin(gstin)
    if state is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid GSTIN")
    return ok(
        data=GstinStateResponse(state_code=state.code, state_name=state.name).model_dump(by_alias=True)
    )


@router.get("/validate-gstin", response_model=dict)
async def validate_gstin(gstin: str = Query(default="", description="15-character GSTIN")):
    """
    Check a GSTIN's length and state prefix. Always 200; ``valid`` carries
    the verdict, ``formatValid`` the full PAN/checksum-position pattern check.
    """
    state = state_from_gstin(gstin)
    if state is None:
        result = GstinValidationResponse(valid=False, message="Invalid GSTIN format")
    else:
        result = GstinValidationResponse(
            valid=True,
            format_valid=is_valid_gstin(gstin),
            state_code=state.code,
            state_name=state.name,
            message="Valid",
        )
    return ok(data=result.model_dump(by_alias=True))


@router.get("/hsn-rate", response_model=dict)
async def hsn_rate(code: str = Query(default="", description="HSN or SAC code")):
    """GST rate for an HSN/SAC code, falling back to its shorter prefixes."""
    code = code.strip()
    if len(code) < MIN_CODE_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Code is required (min {MIN_CODE_LENGTH} characters)",
        )
    row = get_hsn_rate(code)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="HSN/SAC code not found")
    return ok(
        data=HsnRateResponse.model_validate(row.to_dict()).model_dump(by_alias=True)
    )


@master_router.get("/states", response_model=dict)
async def states():
    """All GST states sorted by code."""
    return ok(data=[StateOut.model_validate(s.to_dict()).model_dump() for s in list_states()])
