"""
Unit tests for the SQLAlchemy repositories with a mocked session.

Balance and status writes must be single conditional UPDATE statements.
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from marketplace.core.domain import Money
from marketplace.domains.orders.domain import CartLine, Order, OrderStatus, PaymentStatus
from marketplace.domains.orders.infrastructure.repositories import SQLAlchemyOrderRepository
from marketplace.domains.payments.infrastructure.repositories import (
    SQLAlchemyPlatformAccountRepository,
    SQLAlchemySellerProfileRepository,
)


def rowcount_result(rowcount: int) -> MagicMock:
    result = MagicMock()
    result.rowcount = rowcount
    return result


def compiled_sql(mock_async_session) -> str:
    statement = mock_async_session.execute.call_args.args[0]
    return str(statement)


@pytest.fixture
def sample_order_model():
    """Sample SQLAlchemy order model."""
    item = MagicMock()
    item.id = uuid4()
    item.order_id = uuid4()
    item.product_id = uuid4()
    item.seller_id = uuid4()
    item.quantity = 2
    item.price_at_purchase = Decimal("50.00")
    item.created_at = datetime.now(UTC)

    model = MagicMock()
    model.id = item.order_id
    model.user_id = uuid4()
    model.total_amount = Decimal("100.00")
    model.shipping_fee = Decimal("0.00")
    model.tax_amount = Decimal("0.00")
    model.payment_status = "paid"
    model.order_status = "confirmed"
    model.shipping_address = {"city": "Pune"}
    model.billing_address = None
    model.payment_method = "Simulated Card"
    model.transaction_id = "SIM_TX_1_abc"
    model.created_at = datetime.now(UTC)
    model.updated_at = datetime.now(UTC)
    model.items = [item]
    return model


@pytest.mark.unit
@pytest.mark.repository
class TestOrderRepository:
    async def test_claim_for_settlement_is_conditional_update(self, mock_async_session):
        mock_async_session.execute.return_value = rowcount_result(1)
        repo = SQLAlchemyOrderRepository(mock_async_session)

        claimed = await repo.claim_for_settlement(uuid4(), "Simulated Card", "SIM_TX_1")

        assert claimed is True
        sql = compiled_sql(mock_async_session)
        assert sql.startswith("UPDATE orders SET")
        assert "orders.payment_status =" in sql
        assert "orders.order_status !=" in sql

    async def test_claim_reports_lost_race(self, mock_async_session):
        mock_async_session.execute.return_value = rowcount_result(0)
        repo = SQLAlchemyOrderRepository(mock_async_session)

        assert await repo.claim_for_settlement(uuid4(), "Simulated Card", "SIM_TX_1") is False

    async def test_transition_status_checks_payment_when_required(self, mock_async_session):
        mock_async_session.execute.return_value = rowcount_result(1)
        repo = SQLAlchemyOrderRepository(mock_async_session)

        await repo.transition_status(
            uuid4(), OrderStatus.PROCESSING, OrderStatus.CANCELLED, require_payment_pending=True
        )

        assert "orders.payment_status =" in compiled_sql(mock_async_session)

    async def test_get_by_id_maps_model(self, mock_async_session, sample_order_model):
        result = MagicMock()
        result.scalar_one_or_none.return_value = sample_order_model
        mock_async_session.execute.return_value = result
        repo = SQLAlchemyOrderRepository(mock_async_session)

        order = await repo.get_by_id(sample_order_model.id)

        assert order.payment_status is PaymentStatus.PAID
        assert order.order_status is OrderStatus.CONFIRMED
        assert order.total_amount.amount == Decimal("100.00")
        assert order.items[0].subtotal.amount == Decimal("100.00")

    async def test_get_by_id_not_found(self, mock_async_session):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        mock_async_session.execute.return_value = result

        assert await SQLAlchemyOrderRepository(mock_async_session).get_by_id(uuid4()) is None

    async def test_add_flushes_without_commit(self, mock_async_session):
        order = Order.place(
            user_id=uuid4(),
            lines=[CartLine(uuid4(), uuid4(), 1, Money(Decimal("5.00")))],
            shipping_address={"city": "Pune"},
        )

        await SQLAlchemyOrderRepository(mock_async_session).add(order)

        mock_async_session.add.assert_called_once()
        mock_async_session.flush.assert_awaited_once()
        mock_async_session.commit.assert_not_called()


@pytest.mark.unit
@pytest.mark.repository
class TestBalanceRepositories:
    async def test_credit_earnings_is_increment(self, mock_async_session):
        mock_async_session.execute.return_value = rowcount_result(1)
        repo = SQLAlchemySellerProfileRepository(mock_async_session)

        assert await repo.credit_earnings(uuid4(), Decimal("90.00")) is True
        sql = compiled_sql(mock_async_session)
        assert "seller_profiles.total_earnings +" in sql
        assert "seller_profiles.current_balance +" in sql

    async def test_credit_earnings_unknown_seller(self, mock_async_session):
        mock_async_session.execute.return_value = rowcount_result(0)

        assert await SQLAlchemySellerProfileRepository(mock_async_session).credit_earnings(uuid4(), Decimal("1")) is False

    async def test_credit_revenue_is_increment(self, mock_async_session):
        mock_async_session.execute.return_value = rowcount_result(1)
        repo = SQLAlchemyPlatformAccountRepository(mock_async_session)

        assert await repo.credit_revenue(uuid4(), Decimal("10.00")) is True
        assert "admin_profiles.total_revenue +" in compiled_sql(mock_async_session)

    async def test_total_revenue_sums_every_admin(self, mock_async_session):
        result = MagicMock()
        result.scalar_one.return_value = Decimal("20.00")
        mock_async_session.execute.return_value = result

        total = await SQLAlchemyPlatformAccountRepository(mock_async_session).total_revenue()

        assert total == Decimal("20.00")
        sql = compiled_sql(mock_async_session)
        assert "sum(admin_profiles.total_revenue)" in sql
        assert "WHERE" not in sql

    async def test_commission_rates_for_no_sellers_skips_query(self, mock_async_session):
        rates = await SQLAlchemySellerProfileRepository(mock_async_session).get_commission_rates([])

        assert rates == {}
        mock_async_session.execute.assert_not_called()
