"""Tests for the v1 HTTP surface."""

from decimal import Decimal

import pytest

from factories import JHARKHAND_GSTIN, KARNATAKA_GSTIN, SELLER_GSTIN


def _d(value) -> Decimal:
    """Money fields may serialize as strings or numbers."""
    return Decimal(str(value))


# ---------------------------------------------------------------------------
# Place of supply
# ---------------------------------------------------------------------------

def test_place_of_supply_from_gstin(client):
    resp = client.post(
        "/api/v1/gst/place-of-supply",
        json={"sellerStateCode": "27", "buyerGstin": JHARKHAND_GSTIN},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["data"] == {
        "placeOfSupplyStateCode": "20",
        "placeOfSupplyStateName": "Jharkhand",
        "supplyTypeDisplay": "interstate",
    }


def test_place_of_supply_override_wins(client):
    resp = client.post(
        "/api/v1/gst/place-of-supply",
        json={
            "sellerStateCode": "27",
            "buyerGstin": KARNATAKA_GSTIN,
            "shippingStateName": "Maharashtra",
        },
    )
    data = resp.json()["data"]
    assert data["placeOfSupplyStateCode"] == "27"
    assert data["supplyTypeDisplay"] == "intrastate"


def test_place_of_supply_seller_by_name(client):
    resp = client.post(
        "/api/v1/gst/place-of-supply",
        json={"sellerStateName": "Karnataka", "shippingStateCode": "29"},
    )
    assert resp.json()["data"]["supplyTypeDisplay"] == "intrastate"


def test_place_of_supply_without_seller(client):
    resp = client.post("/api/v1/gst/place-of-supply", json={"buyerGstin": KARNATAKA_GSTIN})
    assert resp.status_code == 400


# ---------------------------------------------------------------------------
# GSTIN / HSN / states
# ---------------------------------------------------------------------------

def test_state_from_gstin(client):
    resp = client.get("/api/v1/gst/state-from-gstin", params={"gstin": SELLER_GSTIN})
    assert resp.status_code == 200
    assert resp.json()["data"] == {"stateCode": "27", "stateName": "Maharashtra"}


def test_state_from_gstin_invalid(client):
    resp = client.get("/api/v1/gst/state-from-gstin", params={"gstin": "27ABC"})
    assert resp.status_code == 400


def test_validate_gstin(client):
    valid = client.get("/api/v1/gst/validate-gstin", params={"gstin": SELLER_GSTIN}).json()["data"]
    assert valid["valid"] is True
    assert valid["formatValid"] is True
    assert valid["stateName"] == "Maharashtra"

    invalid = client.get("/api/v1/gst/validate-gstin", params={"gstin": "bad"})
    assert invalid.status_code == 200
    assert invalid.json()["data"]["valid"] is False
    assert invalid.json()["data"]["stateCode"] is None


def test_hsn_rate(client):
    resp = client.get("/api/v1/gst/hsn-rate", params={"code": "84713010"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["code"] == "8471"
    assert _d(data["gstRate"]) == Decimal("18")


def test_hsn_rate_errors(client):
    assert client.get("/api/v1/gst/hsn-rate", params={"code": "8"}).status_code == 400
    assert client.get("/api/v1/gst/hsn-rate", params={"code": "1234"}).status_code == 404


def test_master_states(client):
    data = client.get("/api/v1/master/states").json()["data"]
    assert data[0] == {"code": "01", "name": "Jammu and Kashmir"}
    assert {"code": "27", "name": "Maharashtra"} in data


# ---------------------------------------------------------------------------
# Document totals
# ---------------------------------------------------------------------------

def test_document_totals(client, sample_invoice_payload):
    resp = client.post("/api/v1/documents/totals", json=sample_invoice_payload)
    assert resp.status_code == 200
    data = resp.json()["data"]

    item = data["items"][0]
    assert _d(item["taxableAmount"]) == Decimal("2437.50")
    assert _d(item["gstAmount"]) == Decimal("121.88")
    assert _d(item["lineTotal"]) == Decimal("2559.38")

    summary = data["summary"]
    assert _d(summary["taxableAmount"]) == Decimal("2437.50")
    assert _d(summary["taxAmount"]) == Decimal("121.88")
    assert _d(summary["roundOff"]) == Decimal("-0.38")
    assert _d(summary["grandTotal"]) == Decimal("2559")
    assert summary["taxSplit"]["type"] == "intrastate"
    assert _d(summary["taxSplit"]["cgst"]) == Decimal("60.94")
    assert summary["amountInWords"] == "Two Thousand Five Hundred Fifty Nine Rupees Only"
    assert data["placeOfSupply"]["supplyTypeDisplay"] == "intrastate"


def test_document_totals_interstate_with_charge(client, sample_invoice_payload):
    sample_invoice_payload["buyerGstin"] = KARNATAKA_GSTIN
    sample_invoice_payload["additionalCharges"] = [
        {"name": "Packing", "amount": 118, "gstPercent": 18, "isTaxInclusive": True}
    ]
    data = client.post("/api/v1/documents/totals", json=sample_invoice_payload).json()["data"]
    assert _d(data["additionalCharges"][0]["taxableAmount"]) == Decimal("100")
    assert data["summary"]["taxSplit"]["type"] == "interstate"
    assert _d(data["summary"]["taxSplit"]["igst"]) == Decimal("139.88")


def test_document_totals_round_off_disabled(client, sample_invoice_payload):
    sample_invoice_payload["roundOff"] = False
    summary = client.post("/api/v1/documents/totals", json=sample_invoice_payload).json()["data"]["summary"]
    assert _d(summary["grandTotal"]) == Decimal("2559.38")
    assert _d(summary["roundOff"]) == 0


def test_per_unit_cess_spelling_accepted(client, sample_invoice_payload):
    sample_invoice_payload["items"][0]["cessType"] = "Per Unit"
    sample_invoice_payload["items"][0]["cessValue"] = 1
    data = client.post("/api/v1/documents/totals", json=sample_invoice_payload).json()["data"]
    assert _d(data["items"][0]["cessAmount"]) == Decimal("100")


def test_percentage_discount_over_100_rejected(client, sample_invoice_payload):
    sample_invoice_payload["items"][0]["discountPercent"] = None
    sample_invoice_payload["items"][0]["discountValue"] = 150
    resp = client.post("/api/v1/documents/totals", json=sample_invoice_payload)
    assert resp.status_code == 422


def test_unknown_discount_type_rejected(client, sample_invoice_payload):
    sample_invoice_payload["items"][0]["discountType"] = "bogus"
    resp = client.post("/api/v1/documents/totals", json=sample_invoice_payload)
    assert resp.status_code == 422


def test_negative_price_rejected(client, sample_invoice_payload):
    sample_invoice_payload["items"][0]["unitPrice"] = -5
    resp = client.post("/api/v1/documents/totals", json=sample_invoice_payload)
    assert resp.status_code == 422


def test_document_totals_unknown_seller(client, sample_invoice_payload):
    sample_invoice_payload["sellerGstin"] = "99AAPFU0939F1ZV"
    resp = client.post("/api/v1/documents/totals", json=sample_invoice_payload)
    assert resp.status_code == 400


@pytest.mark.parametrize("amount", ["1e27", "1000000000000.01"])
def test_amount_in_words_too_large_rejected(client, amount):
    resp = client.post("/api/v1/documents/amount-in-words", json={"amount": amount})
    assert resp.status_code == 422


def test_oversized_line_item_rejected(client, sample_invoice_payload):
    sample_invoice_payload["items"][0]["quantity"] = "1e20"
    sample_invoice_payload["items"][0]["unitPrice"] = "1e20"
    resp = client.post("/api/v1/documents/totals", json=sample_invoice_payload)
    assert resp.status_code == 422


def test_amount_in_words_endpoint(client):
    resp = client.post("/api/v1/documents/amount-in-words", json={"amount": 100000})
    assert resp.json()["data"] == {"amountInWords": "One Lakh Rupees Only"}


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
