# gst_billing/domain/models/totals.py
"""
Result dataclasses produced by the tax engine.

Amount fields hold values rounded to paise (what gets printed and stored).
The unrounded figures travel alongside in ``ExactAmounts`` so that document
totals are summed without compounding per-line rounding.

Results are frozen: when the source document changes, a new TotalsResult is
computed and replaces the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from gst_billing.domain.models.documents import SupplyType
from gst_billing.domain.money import ZERO, round2


@dataclass(frozen=True)
class ExactAmounts:
    """Unrounded figures for one line or charge. Charges leave gross and discount at 0."""

    taxable: Decimal = ZERO
    gst: Decimal = ZERO
    cess: Decimal = ZERO
    gross: Decimal = ZERO
    discount: Decimal = ZERO

    @property
    def total(self) -> Decimal:
        return self.taxable + self.gst + self.cess


@dataclass(frozen=True)
class LineTotals:
    base_amount: Decimal
    discount_amount: Decimal
    taxable_amount: Decimal
    gst_rate: Decimal
    gst_amount: Decimal
    cess_amount: Decimal
    line_total: Decimal
    quantity: Decimal = ZERO
    exact: ExactAmounts = field(default_factory=ExactAmounts, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_amount": self.base_amount,
            "discount_amount": self.discount_amount,
            "taxable_amount": self.taxable_amount,
            "gst_rate": self.gst_rate,
            "gst_amount": self.gst_amount,
            "cess_amount": self.cess_amount,
            "line_total": self.line_total,
        }


@dataclass(frozen=True)
class ChargeTotals:
    name: str
    taxable_amount: Decimal
    gst_rate: Decimal
    gst_amount: Decimal
    cess_amount: Decimal
    total: Decimal
    exact: ExactAmounts = field(default_factory=ExactAmounts, repr=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "taxable_amount": self.taxable_amount,
            "gst_rate": self.gst_rate,
            "gst_amount": self.gst_amount,
            "cess_amount": self.cess_amount,
            "total": self.total,
        }


# ---------------------------------------------------------------------------
# Tax split
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IntrastateSplit:
    cgst: Decimal
    sgst: Decimal

    @property
    def supply_type(self) -> SupplyType:
        return SupplyType.INTRASTATE

    @property
    def total(self) -> Decimal:
        return self.cgst + self.sgst

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.supply_type.value, "cgst": self.cgst, "sgst": self.sgst}


@dataclass(frozen=True)
class InterstateSplit:
    igst: Decimal

    @property
    def supply_type(self) -> SupplyType:
        return SupplyType.INTERSTATE

    @property
    def total(self) -> Decimal:
        return self.igst

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.supply_type.value, "igst": self.igst}


TaxSplit = Union[IntrastateSplit, InterstateSplit]


def make_tax_split(tax_amount: Decimal, supply_type: SupplyType) -> TaxSplit:
    """
    Split a (paise-rounded) tax amount for the given supply type.

    Intrastate: CGST takes half rounded to paise, SGST the remainder, so the
    two always add back to ``tax_amount``.
    """
    tax_amount = round2(tax_amount)
    if supply_type is SupplyType.INTRASTATE:
        cgst = round2(tax_amount / 2)
        return IntrastateSplit(cgst=cgst, sgst=tax_amount - cgst)
    return InterstateSplit(igst=tax_amount)


# ---------------------------------------------------------------------------
# Place of supply
# ---------------------------------------------------------------------------

class PlaceOfSupplySource(str, Enum):
    """Which priority tier decided the place of supply."""

    SHIPPING_OVERRIDE = "shipping_override"
    BUYER_GSTIN = "buyer_gstin"
    BUYER_STATE = "buyer_state"
    SELLER_DEFAULT = "seller_default"


@dataclass(frozen=True)
class PlaceOfSupply:
    state_code: str
    state_name: str
    supply_type: SupplyType
    source: PlaceOfSupplySource

    @property
    def supply_type_display(self) -> str:
        return self.supply_type.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "place_of_supply_state_code": self.state_code,
            "place_of_supply_state_name": self.state_name,
            "supply_type_display": self.supply_type_display,
        }


# ---------------------------------------------------------------------------
# Document totals
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TotalsSummary:
    taxable_amount: Decimal
    tax_amount: Decimal
    cess_amount: Decimal
    round_off: Decimal
    grand_total: Decimal
    tax_split: TaxSplit
    amount_in_words: str

    subtotal_taxable: Decimal = ZERO
    global_discount_amount: Decimal = ZERO
    tcs_amount: Decimal = ZERO
    total_before_round_off: Decimal = ZERO

    total_quantity: Decimal = ZERO
    total_item_base: Decimal = ZERO
    total_item_discount: Decimal = ZERO
    total_item_taxable: Decimal = ZERO
    total_item_gst: Decimal = ZERO
    total_item_amount: Decimal = ZERO
    total_charge_taxable: Decimal = ZERO
    total_charge_gst: Decimal = ZERO
    total_charge_amount: Decimal = ZERO
    table_total: Decimal = ZERO

    @property
    def balance_due(self) -> Decimal:
        return self.grand_total

    def to_dict(self) -> dict[str, Any]:
        return {
            "taxable_amount": self.taxable_amount,
            "tax_amount": self.tax_amount,
            "cess_amount": self.cess_amount,
            "tcs_amount": self.tcs_amount,
            "subtotal_taxable": self.subtotal_taxable,
            "global_discount_amount": self.global_discount_amount,
            "total_before_round_off": self.total_before_round_off,
            "round_off": self.round_off,
            "grand_total": self.grand_total,
            "balance_due": self.balance_due,
            "tax_split": self.tax_split.to_dict(),
            "amount_in_words": self.amount_in_words,
            "total_quantity": self.total_quantity,
            "total_item_base": self.total_item_base,
            "total_item_discount": self.total_item_discount,
            "total_item_taxable": self.total_item_taxable,
            "total_item_gst": self.total_item_gst,
            "total_item_amount": self.total_item_amount,
            "total_charge_taxable": self.total_charge_taxable,
            "total_charge_gst": self.total_charge_gst,
            "total_charge_amount": self.total_charge_amount,
            "table_total": self.table_total,
        }


@dataclass(frozen=True)
class TotalsResult:
    place_of_supply: PlaceOfSupply
    items: tuple[LineTotals, ...]
    additional_charges: tuple[ChargeTotals, ...]
    summary: TotalsSummary

    def to_dict(self) -> dict[str, Any]:
        supply_type = self.place_of_supply.supply_type
        items = []
        for line in self.items:
            row = line.to_dict()
            row["tax_split"] = make_tax_split(line.gst_amount, supply_type).to_dict()
            items.append(row)
        return {
            "place_of_supply": self.place_of_supply.to_dict(),
            "items": items,
            "additional_charges": [c.to_dict() for c in self.additional_charges],
            "summary": self.summary.to_dict(),
        }
