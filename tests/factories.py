"""Builders for engine inputs used across the test suite."""

from decimal import Decimal

from gst_billing.domain.models.documents import (
    AdditionalCharge,
    Cess,
    CessType,
    Discount,
    DiscountType,
    LineItem,
)

# First two digits decide the state: 27 Maharashtra, 29 Karnataka, 20 Jharkhand
SELLER_GSTIN = "27AAPFU0939F1ZV"
KARNATAKA_GSTIN = "29AABCU9603R1ZM"
JHARKHAND_GSTIN = "20ABCDE1234F1Z5"


def make_item(**overrides) -> LineItem:
    defaults = {
        "quantity": Decimal("1"),
        "unit_price": Decimal("100"),
        "discount": Discount(DiscountType.PERCENTAGE, Decimal("0")),
        "gst_rate": Decimal("18"),
        "tax_inclusive": False,
        "cess": Cess(CessType.PERCENTAGE, Decimal("0")),
        "name": "Widget",
    }
    defaults.update(overrides)
    return LineItem(**defaults)


def make_charge(**overrides) -> AdditionalCharge:
    defaults = {
        "name": "Freight",
        "amount": Decimal("100"),
        "gst_rate": Decimal("18"),
        "tax_inclusive": False,
    }
    defaults.update(overrides)
    return AdditionalCharge(**defaults)
