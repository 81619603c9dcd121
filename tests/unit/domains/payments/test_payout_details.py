"""
Unit tests for payout details and the seller profile entity.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from marketplace.core.domain import Percentage, ValidationException
from marketplace.domains.payments.domain import (
    BankTransferPayout,
    SellerProfile,
    UpiPayout,
    parse_payout_details,
)

BANK = {
    "kind": "bank_transfer",
    "account_holder_name": "Asha Rao",
    "bank_name": "State Bank",
    "account_number": "123456789012",
    "ifsc_code": "SBIN0001234",
}


@pytest.mark.unit
class TestPayoutDetails:
    def test_bank_transfer_round_trips_through_json_form(self):
        payout = parse_payout_details(BANK)

        assert isinstance(payout, BankTransferPayout)
        assert payout.to_dict() == BANK

    def test_upi(self):
        payout = parse_payout_details({"kind": "upi", "upi_id": "asha.rao@okbank"})

        assert isinstance(payout, UpiPayout)
        assert payout.to_dict()["kind"] == "upi"

    def test_empty_payload_is_none(self):
        assert parse_payout_details(None) is None
        assert parse_payout_details({}) is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"kind": "paypal", "email": "x@y.z"},
            {**BANK, "ifsc_code": "BAD"},
            {**BANK, "account_number": "12ab"},
            {"kind": "upi", "upi_id": "no-handle"},
            {"kind": "upi"},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationException):
            parse_payout_details(payload)


@pytest.mark.unit
class TestSellerProfile:
    def test_update_details_leaves_omitted_fields(self):
        profile = SellerProfile(user_id=uuid4(), store_name="Old", commission_rate=Percentage(Decimal("5")))

        profile.update_details(store_name="  New  ")

        assert profile.store_name == "New"
        assert profile.commission_rate == Percentage(Decimal("5"))
        assert profile.total_earnings.is_zero()

    def test_blank_store_name_rejected(self):
        profile = SellerProfile(user_id=uuid4(), store_name="Shop")

        with pytest.raises(ValidationException):
            profile.update_details(store_name="   ")
