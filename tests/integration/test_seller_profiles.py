"""
Integration tests for creating and updating seller profiles.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from marketplace.core.domain import ValidationException
from marketplace.domains.payments.application.use_cases import UpsertSellerProfileRequest
from marketplace.domains.payments.domain import BankTransferPayout, UpiPayout
from marketplace.models.db import SellerProfile as SellerProfileModel

pytestmark = pytest.mark.integration


@pytest.fixture
def upsert(container):
    return container.create_upsert_seller_profile_use_case()


async def test_create_profile(upsert, seed):
    user_id = uuid4()
    payout = BankTransferPayout(
        account_holder_name="Asha Rao",
        bank_name="HDFC Bank",
        account_number="123456789012",
        ifsc_code="HDFC0001234",
    )

    profile = await upsert.execute(
        UpsertSellerProfileRequest(
            user_id=user_id, store_name="  Asha Crafts ", commission_rate=Decimal("12.5"), payout_details=payout
        )
    )

    assert profile.store_name == "Asha Crafts"
    assert profile.commission_rate.value == Decimal("12.5")
    assert profile.payout_details == payout
    stored = await seed.get_seller(user_id)
    assert stored.payout_details["kind"] == "bank_transfer"
    assert stored.total_earnings == Decimal("0")


async def test_update_keeps_omitted_fields(upsert, seed):
    seller = await seed.seller(commission_rate="10", store_name="Old Name")

    profile = await upsert.execute(
        UpsertSellerProfileRequest(user_id=seller, payout_details=UpiPayout(upi_id="asha.rao@okhdfc"))
    )

    assert profile.store_name == "Old Name"
    assert profile.commission_rate.value == Decimal("10")
    assert isinstance(profile.payout_details, UpiPayout)


async def test_update_never_touches_balances(upsert, seed):
    seller = await seed.seller(total_earnings="75.00")

    await upsert.execute(UpsertSellerProfileRequest(user_id=seller, store_name="Renamed"))

    stored = await seed.get_seller(seller)
    assert stored.store_name == "Renamed"
    assert stored.total_earnings == Decimal("75.00")
    assert stored.current_balance == Decimal("75.00")


async def test_new_profile_requires_store_name(upsert, seed):
    user_id = uuid4()

    with pytest.raises(ValidationException):
        await upsert.execute(UpsertSellerProfileRequest(user_id=user_id, commission_rate=Decimal("5")))

    assert await seed.count(SellerProfileModel, user_id=user_id) == 0


@pytest.mark.parametrize("rate", [Decimal("-1"), Decimal("100.01")])
async def test_rate_out_of_range(upsert, rate):
    with pytest.raises(ValidationException):
        await upsert.execute(UpsertSellerProfileRequest(user_id=uuid4(), store_name="Shop", commission_rate=rate))
