"""
Integration tests for seller earnings, platform revenue and ledger reconciliation.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from marketplace.core.container import DependencyContainer
from marketplace.core.domain import EntityNotFoundException

pytestmark = pytest.mark.integration


async def settle(container, order_id):
    return await container.create_settle_order_use_case().execute(order_id)


# ============================================================================
# SELLER EARNINGS
# ============================================================================


async def test_seller_earnings_reflect_settlements(container, seed):
    seller = await seed.seller(commission_rate="10")
    other = await seed.seller(commission_rate="10")
    await seed.admin()
    first = await seed.order([(seller, 1, "100.00")])
    second = await seed.order([(seller, 2, "25.00"), (other, 1, "40.00")])
    await settle(container, first)
    await settle(container, second)

    earnings = await container.create_get_seller_earnings_use_case().execute(seller)

    assert earnings.total_earnings.amount == Decimal("135.00")
    assert earnings.current_balance.amount == Decimal("135.00")
    assert {t.order_id for t in earnings.transactions} == {first, second}
    assert all(t.seller_id == seller for t in earnings.transactions)
    assert sum(t.seller_amount.amount for t in earnings.transactions) == earnings.total_earnings.amount


async def test_seller_without_sales_has_zero_earnings(container, seed):
    seller = await seed.seller()

    earnings = await container.create_get_seller_earnings_use_case().execute(seller)

    assert earnings.total_earnings.amount == Decimal("0")
    assert earnings.transactions == []


async def test_unknown_seller_earnings(container):
    with pytest.raises(EntityNotFoundException):
        await container.create_get_seller_earnings_use_case().execute(uuid4())


# ============================================================================
# PLATFORM REVENUE
# ============================================================================


async def test_platform_revenue_matches_ledger(container, seed):
    seller_a = await seed.seller(commission_rate="10")
    seller_b = await seed.seller(commission_rate="20")
    await seed.admin()
    for lines in ([(seller_a, 1, "100.00")], [(seller_a, 1, "100.00"), (seller_b, 1, "50.00")]):
        await settle(container, await seed.order(lines))
    await seed.order([(seller_b, 1, "999.00")])  # never settled

    revenue = await container.create_get_platform_revenue_use_case().execute()

    assert revenue.total.amount == Decimal("30.00")
    assert revenue.running_total.amount == Decimal("30.00")
    assert revenue.consistent
    assert revenue.total_orders == 2
    assert len(revenue.recent_transactions) == 3


async def test_platform_revenue_recent_limit(container, seed):
    seller = await seed.seller()
    await seed.admin()
    for _ in range(3):
        await settle(container, await seed.order([(seller, 1, "10.00")]))

    revenue = await container.create_get_platform_revenue_use_case().execute(recent_limit=2)

    assert len(revenue.recent_transactions) == 2
    assert revenue.total_orders == 3


async def test_platform_revenue_without_sales(container, seed):
    await seed.admin()

    revenue = await container.create_get_platform_revenue_use_case().execute()

    assert revenue.total.amount == Decimal("0")
    assert revenue.total_orders == 0
    assert revenue.consistent


# ============================================================================
# RECONCILIATION
# ============================================================================


async def test_reconciliation_balanced_after_settlements(container, seed):
    seller_a = await seed.seller(commission_rate="7.5")
    seller_b = await seed.seller()
    await seed.seller()  # no sales
    await seed.admin()
    await settle(container, await seed.order([(seller_a, 3, "33.33"), (seller_b, 1, "0.05")]))
    await settle(container, await seed.order([(seller_b, 2, "19.99")]))

    report = await container.create_reconcile_ledger_use_case().execute()

    assert report.balanced
    assert report.checked_sellers == 3


async def test_reconciliation_reports_drift(container, seed):
    # Balance with no ledger rows behind it
    drifted = await seed.seller(total_earnings="50.00")
    await seed.admin()

    report = await container.create_reconcile_ledger_use_case().execute()

    assert not report.balanced
    assert {(d.account_id, d.balance) for d in report.discrepancies} == {
        (drifted, "total_earnings"),
        (drifted, "current_balance"),
    }
    assert all(d.difference == Decimal("50.00") for d in report.discrepancies)


async def test_reports_stay_consistent_after_platform_admin_changes(container, test_settings, session_factory, seed):
    seller = await seed.seller(commission_rate="10")
    earliest = await seed.admin()
    await settle(container, await seed.order([(seller, 1, "100.00")]))

    later = await seed.admin()
    reassigned = DependencyContainer(
        settings=test_settings.model_copy(update={"PLATFORM_ADMIN_USER_ID": later}),
        session_factory=session_factory,
    )
    await settle(reassigned, await seed.order([(seller, 1, "100.00")]))

    assert (await seed.get_admin(earliest)).total_revenue == Decimal("10.00")
    assert (await seed.get_admin(later)).total_revenue == Decimal("10.00")

    revenue = await reassigned.create_get_platform_revenue_use_case().execute()
    assert revenue.total.amount == Decimal("20.00")
    assert revenue.running_total.amount == Decimal("20.00")
    assert revenue.consistent

    report = await reassigned.create_reconcile_ledger_use_case().execute()
    assert report.balanced
    assert report.ledger_platform_total == Decimal("20.00")


async def test_reconciliation_reports_platform_drift(container, seed):
    await seed.admin(total_revenue="5.00")

    report = await container.create_reconcile_ledger_use_case().execute()

    assert [(d.account, d.balance, d.difference) for d in report.discrepancies] == [
        ("platform", "total_revenue", Decimal("5.00"))
    ]
