# gst_billing/domain/services/line_item_calculator.py
"""
Per-line tax computation.

Steps for one line item:
1. gross    = quantity x unit price
2. discount = percentage of gross, or a flat amount; never more than gross
3. net      = gross - discount
4. tax-inclusive: taxable = net x 100 / (100 + rate), GST = net - taxable
   tax-exclusive: taxable = net,                       GST = taxable x rate / 100
5. cess     = percentage of taxable, or a fixed amount per unit
6. total    = taxable + GST + cess

Nothing is rounded between steps. Reported figures are rounded to paise and
the reported line total is the sum of the reported components.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from gst_billing.domain.models.documents import (
    Cess,
    CessType,
    Discount,
    DiscountType,
    LineItem,
)
from gst_billing.domain.models.totals import ExactAmounts, LineTotals
from gst_billing.domain.money import HUNDRED, ZERO, round2, to_decimal

logger = logging.getLogger("line_item_calculator")


def discount_amount(gross: Decimal, discount: Discount | None) -> Decimal:
    """Discount on ``gross``, capped so the discounted amount is never negative."""
    if discount is None:
        return ZERO
    value = to_decimal(discount.value)
    if discount.type is DiscountType.PERCENTAGE:
        amount = gross * value / HUNDRED
    elif discount.type is DiscountType.FLAT:
        amount = value
    else:
        raise ValueError(f"Unsupported discount type: {discount.type!r}")
    return max(ZERO, min(amount, gross))


def split_inclusive(net: Decimal, gst_rate: Decimal, tax_inclusive: bool) -> tuple[Decimal, Decimal]:
    """Return ``(taxable, gst)`` for a net amount at ``gst_rate`` percent."""
    if gst_rate <= ZERO:
        return net, ZERO
    if tax_inclusive:
        taxable = net * HUNDRED / (HUNDRED + gst_rate)
        return taxable, net - taxable
    return net, net * gst_rate / HUNDRED


def cess_amount(taxable: Decimal, cess: Cess | None, quantity: Decimal) -> Decimal:
    """Cess as a percentage of taxable, or ``value x quantity`` when fixed."""
    if cess is None:
        return ZERO
    value = to_decimal(cess.value)
    if cess.type is CessType.PERCENTAGE:
        return taxable * value / HUNDRED
    if cess.type is CessType.FIXED:
        return value * quantity
    raise ValueError(f"Unsupported cess type: {cess.type!r}")


def calculate_line_item(item: LineItem) -> LineTotals:
    """Compute taxable amount, discount, GST, cess and line total for one item."""
    quantity = to_decimal(item.quantity)
    unit_price = to_decimal(item.unit_price)
    gst_rate = to_decimal(item.gst_rate)

    gross = quantity * unit_price
    discount = discount_amount(gross, item.discount)
    net = gross - discount

    taxable, gst = split_inclusive(net, gst_rate, item.tax_inclusive)
    cess = cess_amount(taxable, item.cess, quantity)

    exact = ExactAmounts(taxable=taxable, gst=gst, cess=cess, gross=gross, discount=discount)
    reported_taxable = round2(taxable)
    reported_gst = round2(gst)
    reported_cess = round2(cess)

    logger.debug(
        "Line %r: gross=%s discount=%s taxable=%s gst=%s cess=%s",
        item.name, gross, discount, taxable, gst, cess,
    )
    return LineTotals(
        base_amount=round2(gross),
        discount_amount=round2(discount),
        taxable_amount=reported_taxable,
        gst_rate=gst_rate,
        gst_amount=reported_gst,
        cess_amount=reported_cess,
        line_total=reported_taxable + reported_gst + reported_cess,
        quantity=quantity,
        exact=exact,
    )
