# gst_billing/domain/models/documents.py
"""
Input dataclasses for the tax engine.

LineItem / AdditionalCharge: priced rows of a document.
GlobalDiscount / TcsInfo: document-level adjustments.
SupplyContext: everything the place-of-supply classifier looks at.
TaxDocument: one invoice, quotation, delivery challan or sales debit note.

String tags coming from API payloads are parsed into enums once
(``DiscountType.parse`` etc.); computation only ever matches enum members.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from gst_billing.domain.money import ZERO


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FLAT = "flat"

    @classmethod
    def parse(cls, raw: str | None) -> "DiscountType":
        if isinstance(raw, cls):
            return raw
        value = (raw or "").strip().lower()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown discount type: {raw!r}")


class CessType(str, Enum):
    PERCENTAGE = "Percentage"
    FIXED = "Fixed"

    @classmethod
    def parse(cls, raw: str | None) -> "CessType":
        if isinstance(raw, cls):
            return raw
        value = (raw or "percentage").strip().lower()
        if value == "percentage":
            return cls.PERCENTAGE
        # "Per Unit" is the older spelling of a fixed per-unit cess
        if value in ("fixed", "per unit", "per_unit"):
            return cls.FIXED
        raise ValueError(f"Unknown cess type: {raw!r}")


class SupplyType(str, Enum):
    INTRASTATE = "intrastate"
    INTERSTATE = "interstate"


class TcsBasis(str, Enum):
    TAXABLE_AMOUNT = "taxableAmount"
    FINAL_AMOUNT = "finalAmount"


class DocumentType(str, Enum):
    INVOICE = "invoice"
    QUOTATION = "quotation"
    DELIVERY_CHALLAN = "deliveryChallan"
    SALES_DEBIT_NOTE = "salesDebitNote"


@dataclass(frozen=True)
class Discount:
    type: DiscountType = DiscountType.PERCENTAGE
    value: Decimal = ZERO


@dataclass(frozen=True)
class Cess:
    type: CessType = CessType.PERCENTAGE
    value: Decimal = ZERO


@dataclass(frozen=True)
class LineItem:
    """One priced row. ``unit_price`` includes GST when ``tax_inclusive``."""

    quantity: Decimal = ZERO
    unit_price: Decimal = ZERO
    discount: Discount = field(default_factory=Discount)
    gst_rate: Decimal = ZERO
    tax_inclusive: bool = False
    cess: Cess = field(default_factory=Cess)

    # Descriptive only
    name: str = ""
    hsn_sac: str = ""
    unit: str = "Nos"


@dataclass(frozen=True)
class AdditionalCharge:
    """Non-item charge such as freight or packing."""

    name: str = ""
    amount: Decimal = ZERO
    gst_rate: Decimal = ZERO
    tax_inclusive: bool = False
    hsn_sac: str | None = None
    cess: Cess = field(default_factory=Cess)


@dataclass(frozen=True)
class GlobalDiscount:
    type: DiscountType = DiscountType.PERCENTAGE
    value: Decimal = ZERO


@dataclass(frozen=True)
class TcsInfo:
    """Tax collected at source on the document value."""

    percentage: Decimal = ZERO
    basis: TcsBasis = TcsBasis.FINAL_AMOUNT


@dataclass(frozen=True)
class SupplyContext:
    """
    Inputs to place-of-supply resolution.

    ``shipping_state`` is an explicit user choice (state name or code) and
    outranks anything inferred from the buyer. ``buyer_state`` is the billing
    address state of an unregistered buyer.
    """

    seller_state_code: str
    buyer_gstin: str | None = None
    shipping_state: str | None = None
    buyer_state: str | None = None


@dataclass(frozen=True)
class TaxDocument:
    """Everything needed to compute a document's totals."""

    supply: SupplyContext
    items: tuple[LineItem, ...] = ()
    additional_charges: tuple[AdditionalCharge, ...] = ()
    global_discount: GlobalDiscount = field(default_factory=GlobalDiscount)
    tcs: TcsInfo | None = None
    round_off: bool = True
    document_type: DocumentType = DocumentType.INVOICE
