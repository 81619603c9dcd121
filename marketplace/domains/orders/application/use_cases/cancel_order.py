"""
Cancel Order Use Case

Buyer cancels an order that has not shipped and has not been paid.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import (
    AuthorizationException,
    DomainEventPublisher,
    InvalidOperationException,
    PersistenceException,
)
from marketplace.domains.orders.application.ports import OrderRepositoryFactory
from marketplace.domains.orders.domain import Order, OrderNotFoundError, OrderStatus

logger = logging.getLogger(__name__)


class CancelOrderUseCase:
    """
    Use Case: Cancel Order

    The write requires payment_status to still be pending, so a cancellation
    racing a settlement loses cleanly to whichever commits first.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory

    async def execute(self, order_id: UUID, requester_id: UUID) -> Order:
        try:
            async with self._session_factory() as session, session.begin():
                orders = self._order_repository_factory(session)
                order = await orders.get_by_id(order_id)
                if order is None:
                    raise OrderNotFoundError(order_id)
                if not order.is_owned_by(requester_id):
                    raise AuthorizationException("cancel order", resource=str(order_id), user_id=str(requester_id))

                previous = order.order_status
                order.cancel(cancelled_by=requester_id)
                applied = await orders.transition_status(
                    order.id,
                    expected=previous,
                    new_status=OrderStatus.CANCELLED,
                    require_payment_pending=True,
                )
                if not applied:
                    raise InvalidOperationException(
                        "cancel",
                        previous.value,
                        message="Order was modified concurrently; reload and retry",
                    )
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Cancellation of order {order_id} rolled back: {e}", exc_info=True)
            raise PersistenceException("cancel order", original_error=e) from e

        logger.info(f"Order {order_id} cancelled by buyer {requester_id}")
        await DomainEventPublisher.publish_all(order.get_domain_events())
        order.clear_domain_events()
        return order
