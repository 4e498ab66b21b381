"""Tests for place-of-supply resolution."""

import pytest

from gst_billing.domain.errors import PlaceOfSupplyError
from gst_billing.domain.models.documents import SupplyContext, SupplyType
from gst_billing.domain.models.totals import PlaceOfSupplySource
from gst_billing.domain.services.place_of_supply import (
    classify_from_parties,
    classify_supply,
    resolve_seller_state,
)

from factories import JHARKHAND_GSTIN, KARNATAKA_GSTIN, SELLER_GSTIN


class TestPriority:

    def test_buyer_gstin_decides_without_override(self):
        place = classify_supply(SupplyContext(seller_state_code="27", buyer_gstin=JHARKHAND_GSTIN))
        assert place.state_code == "20"
        assert place.state_name == "Jharkhand"
        assert place.supply_type_display == "interstate"
        assert place.source is PlaceOfSupplySource.BUYER_GSTIN

    def test_override_wins_over_gstin(self):
        place = classify_supply(
            SupplyContext(
                seller_state_code="27",
                buyer_gstin=KARNATAKA_GSTIN,
                shipping_state="Maharashtra",
            )
        )
        assert place.state_code == "27"
        assert place.supply_type is SupplyType.INTRASTATE
        assert place.source is PlaceOfSupplySource.SHIPPING_OVERRIDE

    @pytest.mark.parametrize("gstin", [None, "", SELLER_GSTIN, KARNATAKA_GSTIN, "07AAACD1234E1Z2", "XX"])
    def test_override_independent_of_gstin(self, gstin):
        place = classify_supply(
            SupplyContext(seller_state_code="27", buyer_gstin=gstin, shipping_state="Goa")
        )
        assert place.state_code == "30"
        assert place.supply_type is SupplyType.INTERSTATE

    def test_override_by_code(self):
        place = classify_supply(SupplyContext(seller_state_code="27", shipping_state="7"))
        assert place.state_code == "07"
        assert place.state_name == "Delhi"

    def test_override_in_printed_form(self):
        place = classify_supply(
            SupplyContext(seller_state_code="29", buyer_gstin=KARNATAKA_GSTIN, shipping_state="27-Maharashtra")
        )
        assert place.state_code == "27"
        assert place.supply_type is SupplyType.INTERSTATE

    def test_blank_override_is_ignored(self):
        place = classify_supply(
            SupplyContext(seller_state_code="27", buyer_gstin=KARNATAKA_GSTIN, shipping_state="   ")
        )
        assert place.state_code == "29"
        assert place.source is PlaceOfSupplySource.BUYER_GSTIN

    def test_unknown_override_falls_through(self):
        place = classify_supply(
            SupplyContext(seller_state_code="27", buyer_gstin=KARNATAKA_GSTIN, shipping_state="Atlantis")
        )
        assert place.state_code == "29"

    @pytest.mark.parametrize("shipping", ["2nd Cross", "1st Floor", "27-Goa"])
    def test_address_like_override_falls_through(self, shipping):
        place = classify_supply(
            SupplyContext(seller_state_code="27", buyer_gstin=KARNATAKA_GSTIN, shipping_state=shipping)
        )
        assert place.state_code == "29"
        assert place.supply_type is SupplyType.INTERSTATE
        assert place.source is PlaceOfSupplySource.BUYER_GSTIN

    def test_unregistered_gstin_prefix_is_no_signal(self):
        place = classify_supply(SupplyContext(seller_state_code="27", buyer_gstin="99AAPFU0939F1ZV"))
        assert place.state_code == "27"
        assert place.supply_type is SupplyType.INTRASTATE
        assert place.source is PlaceOfSupplySource.SELLER_DEFAULT

    def test_no_buyer_signal_defaults_to_seller(self):
        place = classify_supply(SupplyContext(seller_state_code="33"))
        assert place.state_code == "33"
        assert place.state_name == "Tamil Nadu"
        assert place.supply_type_display == "intrastate"

    def test_buyer_state_for_unregistered_buyer(self):
        place = classify_supply(SupplyContext(seller_state_code="27", buyer_state="Kerala"))
        assert place.state_code == "32"
        assert place.source is PlaceOfSupplySource.BUYER_STATE

    def test_gstin_outranks_buyer_state(self):
        place = classify_supply(
            SupplyContext(seller_state_code="27", buyer_gstin=KARNATAKA_GSTIN, buyer_state="Kerala")
        )
        assert place.state_code == "29"

    def test_unknown_seller_state(self):
        with pytest.raises(PlaceOfSupplyError):
            classify_supply(SupplyContext(seller_state_code="99"))

    def test_to_dict(self):
        place = classify_supply(SupplyContext(seller_state_code="27", buyer_gstin=JHARKHAND_GSTIN))
        assert place.to_dict() == {
            "place_of_supply_state_code": "20",
            "place_of_supply_state_name": "Jharkhand",
            "supply_type_display": "interstate",
        }


class TestFromParties:

    def test_seller_by_name(self):
        place = classify_from_parties(seller_state_name="Maharashtra", shipping_state_code="29")
        assert place.state_code == "29"
        assert place.supply_type is SupplyType.INTERSTATE

    def test_seller_by_gstin(self):
        place = classify_from_parties(seller_gstin=SELLER_GSTIN)
        assert place.state_code == "27"
        assert place.supply_type is SupplyType.INTRASTATE

    def test_invalid_shipping_code_uses_name(self):
        place = classify_from_parties(
            seller_state_code="27", shipping_state_code="99", shipping_state_name="Goa"
        )
        assert place.state_code == "30"

    def test_buyer_state_code(self):
        place = classify_from_parties(seller_state_code="27", buyer_state_code="24")
        assert place.state_name == "Gujarat"

    def test_missing_seller(self):
        with pytest.raises(PlaceOfSupplyError):
            classify_from_parties(buyer_gstin=KARNATAKA_GSTIN)


def test_resolve_seller_state_prefers_code():
    state = resolve_seller_state("29", "Maharashtra", SELLER_GSTIN)
    assert state.code == "29"
