"""
Shared pytest fixtures for all tests.

Database fixtures run against a throwaway file-backed SQLite database per
test (aiosqlite), with the schema created from the SQLAlchemy models.
"""

import os
from collections.abc import AsyncGenerator
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from marketplace.config.settings import Settings
from marketplace.core.container import DependencyContainer
from marketplace.core.domain import DomainEventPublisher
from marketplace.database import DatabaseSetup, create_async_database_engine, create_session_factory
from marketplace.models.db import AdminProfile, CartItem, Order, OrderItem, SellerProfile

os.environ["ENVIRONMENT"] = "test"

SAMPLE_ADDRESS: dict[str, Any] = {
    "full_name": "Asha Rao",
    "address_line1": "12 MG Road",
    "city": "Pune",
    "state": "Maharashtra",
    "postal_code": "411001",
    "country": "India",
}


# ============================================================================
# SETTINGS
# ============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings bound to a per-test SQLite file."""
    return Settings(
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}",
        DEFAULT_COMMISSION_RATE=Decimal("10.00"),
        SETTLEMENT_TIMEOUT_SECONDS=5.0,
        LOG_FORMAT="plain",
    )


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Engine with the full schema created."""
    engine = create_async_database_engine(test_settings)
    setup = DatabaseSetup(engine)
    await setup.create_tables()
    yield engine
    await setup.drop_tables()
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(async_engine)


@pytest.fixture
def container(test_settings: Settings, session_factory) -> DependencyContainer:
    return DependencyContainer(settings=test_settings, session_factory=session_factory)


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


@pytest.fixture(autouse=True)
def clear_event_handlers():
    """Domain event subscriptions are process-global."""
    DomainEventPublisher.clear_handlers()
    yield
    DomainEventPublisher.clear_handlers()


# ============================================================================
# SEEDING
# ============================================================================


class LedgerSeeder:
    """Writes fixture rows straight through the ORM models."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def seller(
        self,
        commission_rate: Decimal | str | None = None,
        store_name: str = "Test Store",
        total_earnings: Decimal | str = "0.00",
    ) -> UUID:
        user_id = uuid4()
        async with self.session_factory() as session, session.begin():
            session.add(
                SellerProfile(
                    id=uuid4(),
                    user_id=user_id,
                    store_name=store_name,
                    commission_rate=Decimal(commission_rate) if commission_rate is not None else None,
                    total_earnings=Decimal(total_earnings),
                    current_balance=Decimal(total_earnings),
                )
            )
        return user_id

    async def admin(self, department: str = "Finance", total_revenue: Decimal | str = "0.00") -> UUID:
        user_id = uuid4()
        async with self.session_factory() as session, session.begin():
            session.add(
                AdminProfile(id=uuid4(), user_id=user_id, department=department, total_revenue=Decimal(total_revenue))
            )
        return user_id

    async def order(
        self,
        lines: list[tuple[UUID, int, Decimal | str]],
        buyer_id: UUID | None = None,
        payment_status: str = "pending",
        order_status: str = "processing",
    ) -> UUID:
        """Insert an order; `lines` are (seller_id, quantity, unit_price)."""
        order_id = uuid4()
        items = [
            OrderItem(
                id=uuid4(),
                order_id=order_id,
                product_id=uuid4(),
                seller_id=seller_id,
                quantity=quantity,
                price_at_purchase=Decimal(price),
            )
            for seller_id, quantity, price in lines
        ]
        total = sum((Decimal(price) * quantity for _, quantity, price in lines), Decimal("0.00"))
        async with self.session_factory() as session, session.begin():
            session.add(
                Order(
                    id=order_id,
                    user_id=buyer_id or uuid4(),
                    total_amount=total,
                    payment_status=payment_status,
                    order_status=order_status,
                    shipping_address=SAMPLE_ADDRESS,
                    items=items,
                )
            )
        return order_id

    async def cart(self, user_id: UUID, lines: list[tuple[UUID, UUID, int, Decimal | str]]) -> None:
        """Fill a cart; `lines` are (product_id, seller_id, quantity, unit_price)."""
        async with self.session_factory() as session, session.begin():
            for product_id, seller_id, quantity, price in lines:
                session.add(
                    CartItem(
                        id=uuid4(),
                        user_id=user_id,
                        product_id=product_id,
                        seller_id=seller_id,
                        quantity=quantity,
                        price_at_time=Decimal(price),
                    )
                )

    # ---------------------------------------------------------------- reads

    async def get_order(self, order_id: UUID) -> Order | None:
        async with self.session_factory() as session:
            return await session.get(Order, order_id)

    async def get_seller(self, user_id: UUID) -> SellerProfile:
        async with self.session_factory() as session:
            result = await session.execute(select(SellerProfile).where(SellerProfile.user_id == user_id))
            return result.scalar_one()

    async def get_admin(self, user_id: UUID) -> AdminProfile:
        async with self.session_factory() as session:
            result = await session.execute(select(AdminProfile).where(AdminProfile.user_id == user_id))
            return result.scalar_one()

    async def count(self, model: type, **filters: Any) -> int:
        async with self.session_factory() as session:
            stmt = select(model)
            for name, value in filters.items():
                stmt = stmt.where(getattr(model, name) == value)
            result = await session.execute(stmt)
            return len(result.scalars().all())


@pytest.fixture
def seed(session_factory) -> LedgerSeeder:
    return LedgerSeeder(session_factory)
