"""Shared test fixtures for the GST billing test suite."""

import pytest
from fastapi.testclient import TestClient

from gst_billing.main import app

from factories import SELLER_GSTIN


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def sample_invoice_payload() -> dict:
    """Invoice JSON as sent by the document handlers."""
    return {
        "documentType": "invoice",
        "sellerGstin": SELLER_GSTIN,
        "buyerGstin": SELLER_GSTIN,
        "items": [
            {
                "itemId": "itm-1",
                "itemName": "Steel bolts",
                "hsnSac": "7318",
                "quantity": 100,
                "unit": "Nos",
                "unitPrice": 25,
                "discountType": "percentage",
                "discountValue": 2.5,
                "discountPercent": 2.5,
                "gstPercent": 5,
                "taxInclusive": False,
                "cessType": "Percentage",
                "cessValue": 0,
            }
        ],
        "additionalCharges": [],
        "globalDiscountType": "percentage",
        "globalDiscountValue": 0,
    }
