# gst_billing/api/v1/schemas/documents.py
"""
Request schemas for document totals.

Field names follow the invoice JSON used by the document handlers
(``unitPrice``, ``gstPercent``, ``discountType`` ...). Validation happens
here, once; ``to_domain()`` hands the engine enum-typed dataclasses.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator, model_validator

from gst_billing.api.v1.schemas.gst import CamelModel
from gst_billing.config.settings import settings
from gst_billing.domain.models.documents import (
    AdditionalCharge,
    Cess,
    CessType,
    Discount,
    DiscountType,
    DocumentType,
    GlobalDiscount,
    LineItem,
    SupplyContext,
    TaxDocument,
    TcsBasis,
    TcsInfo,
)

MAX_PERCENT = Decimal("100")
# Bounds keep every computed figure within the default 28-digit decimal context.
MAX_QUANTITY = Decimal("1000000000")
MAX_AMOUNT = Decimal("1000000000000")


class LineItemIn(CamelModel):
    item_id: str | None = None
    item_name: str = ""
    hsn_sac: str = ""
    quantity: Decimal = Field(ge=0, le=MAX_QUANTITY)
    unit: str = "Nos"
    unit_price: Decimal = Field(ge=0, le=MAX_AMOUNT)

    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    discount_percent: Decimal | None = Field(default=None, ge=0, le=100)

    gst_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    tax_inclusive: bool = False

    cess_type: CessType = CessType.PERCENTAGE
    cess_value: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)

    @field_validator("discount_type", mode="before")
    @classmethod
    def _parse_discount_type(cls, v):
        return DiscountType.parse(v)

    @field_validator("cess_type", mode="before")
    @classmethod
    def _parse_cess_type(cls, v):
        return CessType.parse(v)

    @property
    def effective_discount(self) -> Decimal:
        if self.discount_type is DiscountType.PERCENTAGE:
            return self.discount_percent or self.discount_value
        return self.discount_value

    @model_validator(mode="after")
    def _check_percentage_discount(self):
        if self.discount_type is DiscountType.PERCENTAGE and self.effective_discount > MAX_PERCENT:
            raise ValueError("Percentage discount cannot exceed 100")
        return self

    def to_domain(self) -> LineItem:
        return LineItem(
            quantity=self.quantity,
            unit_price=self.unit_price,
            discount=Discount(type=self.discount_type, value=self.effective_discount),
            gst_rate=self.gst_percent,
            tax_inclusive=self.tax_inclusive,
            cess=Cess(type=self.cess_type, value=self.cess_value),
            name=self.item_name,
            hsn_sac=self.hsn_sac,
            unit=self.unit,
        )


class AdditionalChargeIn(CamelModel):
    name: str = ""
    amount: Decimal = Field(ge=0, le=MAX_AMOUNT)
    gst_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    hsn_sac: str | None = None
    is_tax_inclusive: bool = False
    cess_type: CessType = CessType.PERCENTAGE
    cess_value: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)

    @field_validator("cess_type", mode="before")
    @classmethod
    def _parse_cess_type(cls, v):
        return CessType.parse(v)

    def to_domain(self) -> AdditionalCharge:
        return AdditionalCharge(
            name=self.name,
            amount=self.amount,
            gst_rate=self.gst_percent,
            tax_inclusive=self.is_tax_inclusive,
            hsn_sac=self.hsn_sac or None,
            cess=Cess(type=self.cess_type, value=self.cess_value),
        )


class TcsInfoIn(CamelModel):
    percentage: Decimal = Field(ge=0, le=100)
    basis: TcsBasis = TcsBasis.FINAL_AMOUNT

    def to_domain(self) -> TcsInfo:
        return TcsInfo(percentage=self.percentage, basis=self.basis)


class DocumentTotalsRequest(CamelModel):
    """A document payload (invoice, quotation, delivery challan, sales debit note)."""

    document_type: DocumentType = DocumentType.INVOICE

    seller_state_code: str | None = Field(default=None, max_length=2)
    seller_state_name: str | None = Field(default=None, max_length=100)
    seller_gstin: str | None = Field(default=None, max_length=15)
    buyer_gstin: str | None = Field(default=None, max_length=15)
    buyer_state_code: str | None = Field(default=None, max_length=2)
    buyer_state_name: str | None = Field(default=None, max_length=100)
    shipping_state_code: str | None = Field(default=None, max_length=2)
    shipping_state_name: str | None = Field(default=None, max_length=100)

    items: list[LineItemIn] = Field(default_factory=list)
    additional_charges: list[AdditionalChargeIn] = Field(default_factory=list)

    global_discount_type: DiscountType = DiscountType.PERCENTAGE
    global_discount_value: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    tcs_info: TcsInfoIn | None = None
    round_off: bool | None = Field(
        default=None,
        description="Round the grand total to the rupee (defaults to AUTO_ROUND_OFF)",
    )

    @field_validator("global_discount_type", mode="before")
    @classmethod
    def _parse_discount_type(cls, v):
        return DiscountType.parse(v)

    @model_validator(mode="after")
    def _check_global_discount(self):
        if (
            self.global_discount_type is DiscountType.PERCENTAGE
            and self.global_discount_value > MAX_PERCENT
        ):
            raise ValueError("Global percentage discount cannot exceed 100")
        return self

    def party_fields(self) -> dict[str, str | None]:
        return {
            "seller_state_code": self.seller_state_code,
            "seller_state_name": self.seller_state_name,
            "seller_gstin": self.seller_gstin,
            "buyer_gstin": self.buyer_gstin,
            "buyer_state_code": self.buyer_state_code,
            "buyer_state_name": self.buyer_state_name,
            "shipping_state_code": self.shipping_state_code,
            "shipping_state_name": self.shipping_state_name,
        }

    def to_domain(self, supply: SupplyContext) -> TaxDocument:
        round_off = settings.AUTO_ROUND_OFF if self.round_off is None else self.round_off
        return TaxDocument(
            supply=supply,
            items=tuple(i.to_domain() for i in self.items),
            additional_charges=tuple(c.to_domain() for c in self.additional_charges),
            global_discount=GlobalDiscount(
                type=self.global_discount_type, value=self.global_discount_value
            ),
            tcs=self.tcs_info.to_domain() if self.tcs_info else None,
            round_off=round_off,
            document_type=self.document_type,
        )


class AmountInWordsRequest(CamelModel):
    amount: Decimal = Field(ge=0, le=MAX_AMOUNT)
