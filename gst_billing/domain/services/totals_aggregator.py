# gst_billing/domain/services/totals_aggregator.py
"""
Document-level totals.

Aggregates line and charge results into the document summary:

1. Subtotal taxable = sum of line and charge taxable amounts (unrounded).
2. Tax = sum of line and charge GST. Cess is summed on its own and never
   split into CGST / SGST / IGST.
3. The global discount reduces the taxable base only. Line GST already
   computed is not restated; this order of operations is a product policy
   and must be kept as is.
4. Grand total = adjusted taxable + tax + cess (+ TCS when configured).
5. Round-off to the nearest rupee, applied to the paise-rounded grand total.
6. Tax split by supply type: CGST + SGST, or IGST.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Sequence

from gst_billing.domain.models.documents import (
    DiscountType,
    GlobalDiscount,
    SupplyType,
    TaxDocument,
    TcsBasis,
    TcsInfo,
)
from gst_billing.domain.models.totals import (
    ChargeTotals,
    LineTotals,
    TotalsResult,
    TotalsSummary,
    make_tax_split,
)
from gst_billing.domain.money import HUNDRED, ZERO, round2, round_rupee, to_decimal
from gst_billing.domain.services.amount_in_words import amount_in_words
from gst_billing.domain.services.charge_calculator import calculate_additional_charge
from gst_billing.domain.services.line_item_calculator import calculate_line_item
from gst_billing.domain.services.place_of_supply import classify_supply

logger = logging.getLogger("totals_aggregator")


def global_discount_amount(subtotal_taxable: Decimal, discount: GlobalDiscount | None) -> Decimal:
    """Global discount on the taxable subtotal, capped at the subtotal."""
    if discount is None:
        return ZERO
    value = to_decimal(discount.value)
    if discount.type is DiscountType.PERCENTAGE:
        amount = subtotal_taxable * value / HUNDRED
    elif discount.type is DiscountType.FLAT:
        amount = value
    else:
        raise ValueError(f"Unsupported discount type: {discount.type!r}")
    return max(ZERO, min(amount, subtotal_taxable))


def tcs_amount(taxable: Decimal, tax: Decimal, tcs: TcsInfo | None) -> Decimal:
    """TCS on the (discounted) taxable amount or on taxable + tax."""
    if tcs is None:
        return ZERO
    base = taxable if tcs.basis is TcsBasis.TAXABLE_AMOUNT else taxable + tax
    return base * to_decimal(tcs.percentage) / HUNDRED


def _sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def aggregate_totals(
    lines: Sequence[LineTotals],
    charges: Sequence[ChargeTotals],
    global_discount: GlobalDiscount | None,
    supply_type: SupplyType,
    *,
    tcs: TcsInfo | None = None,
    round_off: bool = True,
) -> TotalsSummary:
    """Combine per-line and per-charge results into the document summary."""
    item_taxable = _sum(line.exact.taxable for line in lines)
    item_gst = _sum(line.exact.gst for line in lines)
    item_cess = _sum(line.exact.cess for line in lines)
    charge_taxable = _sum(c.exact.taxable for c in charges)
    charge_gst = _sum(c.exact.gst for c in charges)
    charge_cess = _sum(c.exact.cess for c in charges)

    subtotal_taxable = item_taxable + charge_taxable
    tax = item_gst + charge_gst
    cess = item_cess + charge_cess

    discount = global_discount_amount(subtotal_taxable, global_discount)
    taxable = subtotal_taxable - discount
    tcs_value = tcs_amount(taxable, tax, tcs)

    total_before_round_off = round2(taxable + tax + cess + tcs_value)
    if round_off:
        grand_total = round_rupee(total_before_round_off)
    else:
        grand_total = total_before_round_off
    round_off_amount = grand_total - total_before_round_off

    tax_amount = round2(tax)
    logger.debug(
        "Totals: taxable=%s tax=%s cess=%s discount=%s round_off=%s grand_total=%s",
        taxable, tax, cess, discount, round_off_amount, grand_total,
    )
    return TotalsSummary(
        taxable_amount=round2(taxable),
        tax_amount=tax_amount,
        cess_amount=round2(cess),
        round_off=round_off_amount,
        grand_total=grand_total,
        tax_split=make_tax_split(tax_amount, supply_type),
        amount_in_words=amount_in_words(grand_total),
        subtotal_taxable=round2(subtotal_taxable),
        global_discount_amount=round2(discount),
        tcs_amount=round2(tcs_value),
        total_before_round_off=total_before_round_off,
        total_quantity=_sum(line.quantity for line in lines),
        total_item_base=round2(_sum(line.exact.gross for line in lines)),
        total_item_discount=round2(_sum(line.exact.discount for line in lines)),
        total_item_taxable=round2(item_taxable),
        total_item_gst=round2(item_gst),
        total_item_amount=round2(item_taxable + item_gst + item_cess),
        total_charge_taxable=round2(charge_taxable),
        total_charge_gst=round2(charge_gst),
        total_charge_amount=round2(charge_taxable + charge_gst + charge_cess),
        table_total=round2(subtotal_taxable + tax + cess),
    )


def compute_document_totals(document: TaxDocument, *, round_off: bool | None = None) -> TotalsResult:
    """
    Full computation for one document: place of supply, line and charge
    results, and the summary. Pure; the same document always yields an equal
    result.

    ``round_off`` overrides the document's own round-off setting.
    """
    place = classify_supply(document.supply)
    lines = tuple(calculate_line_item(item) for item in document.items)
    charges = tuple(calculate_additional_charge(c) for c in document.additional_charges)

    if round_off is None:
        round_off = document.round_off

    summary = aggregate_totals(
        lines,
        charges,
        document.global_discount,
        place.supply_type,
        tcs=document.tcs,
        round_off=round_off,
    )
    logger.info(
        "Computed %s totals: %d items, %d charges, grand total %s (%s)",
        document.document_type.value, len(lines), len(charges),
        summary.grand_total, place.supply_type.value,
    )
    return TotalsResult(
        place_of_supply=place,
        items=lines,
        additional_charges=charges,
        summary=summary,
    )
