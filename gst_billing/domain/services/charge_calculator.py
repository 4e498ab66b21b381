# gst_billing/domain/services/charge_calculator.py
"""Tax computation for additional (non-item) charges such as freight or packing."""

from __future__ import annotations

from decimal import Decimal

from gst_billing.domain.models.documents import AdditionalCharge, CessType
from gst_billing.domain.models.totals import ChargeTotals, ExactAmounts
from gst_billing.domain.money import HUNDRED, ZERO, round2, to_decimal
from gst_billing.domain.services.line_item_calculator import split_inclusive


def calculate_additional_charge(charge: AdditionalCharge) -> ChargeTotals:
    """
    Same shape as a line item with quantity fixed at 1: the charge amount is
    the gross amount. A fixed cess is added once, not per unit.
    """
    amount = to_decimal(charge.amount)
    gst_rate = to_decimal(charge.gst_rate)

    taxable, gst = split_inclusive(amount, gst_rate, charge.tax_inclusive)
    cess = _charge_cess(taxable, charge)

    reported_taxable = round2(taxable)
    reported_gst = round2(gst)
    reported_cess = round2(cess)
    return ChargeTotals(
        name=charge.name,
        taxable_amount=reported_taxable,
        gst_rate=gst_rate,
        gst_amount=reported_gst,
        cess_amount=reported_cess,
        total=reported_taxable + reported_gst + reported_cess,
        exact=ExactAmounts(taxable=taxable, gst=gst, cess=cess),
    )


def _charge_cess(taxable: Decimal, charge: AdditionalCharge) -> Decimal:
    if charge.cess is None:
        return ZERO
    value = to_decimal(charge.cess.value)
    if charge.cess.type is CessType.FIXED:
        return value
    return taxable * value / HUNDRED
