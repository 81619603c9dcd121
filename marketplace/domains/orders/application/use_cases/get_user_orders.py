"""
Get User Orders Use Case

Order history of a buyer, newest first.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.domains.orders.application.ports import OrderRepositoryFactory
from marketplace.domains.orders.domain import Order


class GetUserOrdersUseCase:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory

    async def execute(self, user_id: UUID, limit: int = 50, offset: int = 0) -> list[Order]:
        async with self._session_factory() as session:
            return await self._order_repository_factory(session).list_by_user(user_id, limit=limit, offset=offset)
