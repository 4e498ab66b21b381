# gst_billing/api/v1/schemas/gst.py
"""Request and response schemas for GST reference endpoints."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Place of supply
# ---------------------------------------------------------------------------

class PlaceOfSupplyRequest(CamelModel):
    """
    Seller, buyer and shipping details.

    At least one seller field must identify a registered state. Buyer and
    shipping fields are optional; see the place-of-supply priority rules.
    """

    seller_state_code: str | None = Field(default=None, max_length=2)
    seller_state_name: str | None = Field(default=None, max_length=100)
    seller_gstin: str | None = Field(default=None, max_length=15)

    buyer_gstin: str | None = Field(default=None, max_length=15)
    buyer_state_code: str | None = Field(default=None, max_length=2)
    buyer_state_name: str | None = Field(default=None, max_length=100)

    shipping_state_code: str | None = Field(default=None, max_length=2)
    shipping_state_name: str | None = Field(default=None, max_length=100)


class PlaceOfSupplyResponse(CamelModel):
    place_of_supply_state_code: str
    place_of_supply_state_name: str
    supply_type_display: str


# ---------------------------------------------------------------------------
# States / GSTIN / HSN
# ---------------------------------------------------------------------------

class StateOut(CamelModel):
    code: str
    name: str


class GstinStateResponse(CamelModel):
    state_code: str
    state_name: str


class GstinValidationResponse(CamelModel):
    valid: bool
    format_valid: bool = False
    state_code: str | None = None
    state_name: str | None = None
    message: str


class HsnRateResponse(CamelModel):
    code: str
    description: str
    gst_rate: Decimal
