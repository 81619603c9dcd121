"""
Get Order Details Use Case

Single order with its items, visible to the buyer who placed it.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import AuthorizationException
from marketplace.domains.orders.application.ports import OrderRepositoryFactory
from marketplace.domains.orders.domain import Order, OrderNotFoundError

logger = logging.getLogger(__name__)


class GetOrderDetailsUseCase:
    """
    Use Case: Get Order Details

    Raises:
        OrderNotFoundError: no such order
        AuthorizationException: the requester did not place the order
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory

    async def execute(self, order_id: UUID, requester_id: UUID) -> Order:
        async with self._session_factory() as session:
            order = await self._order_repository_factory(session).get_by_id(order_id)

        if order is None:
            raise OrderNotFoundError(order_id)
        if not order.is_owned_by(requester_id):
            logger.warning(f"User {requester_id} denied access to order {order_id}")
            raise AuthorizationException("view order", resource=str(order_id), user_id=str(requester_id))
        return order
