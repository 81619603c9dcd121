"""
Update Order Status Use Case

Fulfillment transitions performed by a seller of the order or an admin.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import (
    AuthorizationException,
    DomainEventPublisher,
    InvalidOperationException,
    PersistenceException,
)
from marketplace.domains.orders.application.ports import AccountDirectoryFactory, OrderRepositoryFactory
from marketplace.domains.orders.domain import Order, OrderNotFoundError, OrderStatus

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusRequest:
    order_id: UUID
    new_status: OrderStatus
    actor_id: UUID


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    The transition is validated by the Order aggregate and written as a
    compare-and-set on the previous status, so a concurrent change (or a
    settlement racing a cancellation) makes this call fail instead of
    overwriting the other writer. Payment state and balances are never touched.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
        account_directory_factory: AccountDirectoryFactory,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory
        self._account_directory_factory = account_directory_factory

    async def execute(self, request: UpdateOrderStatusRequest) -> Order:
        try:
            async with self._session_factory() as session, session.begin():
                orders = self._order_repository_factory(session)
                order = await orders.get_by_id(request.order_id)
                if order is None:
                    raise OrderNotFoundError(request.order_id)

                if not order.has_seller(request.actor_id):
                    is_admin = await self._account_directory_factory(session).is_admin(request.actor_id)
                    if not is_admin:
                        raise AuthorizationException(
                            "update order status", resource=str(request.order_id), user_id=str(request.actor_id)
                        )

                previous = order.order_status
                order.change_status(request.new_status, changed_by=request.actor_id)
                applied = await orders.transition_status(
                    order.id,
                    expected=previous,
                    new_status=order.order_status,
                    require_payment_pending=order.order_status is OrderStatus.CANCELLED,
                )
                if not applied:
                    raise InvalidOperationException(
                        f"change status to {request.new_status.value}",
                        previous.value,
                        message="Order was modified concurrently; reload and retry",
                    )
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Status update of order {request.order_id} rolled back: {e}", exc_info=True)
            raise PersistenceException("update order status", original_error=e) from e

        logger.info(f"Order {order.id} status {previous.value} -> {order.order_status.value} by {request.actor_id}")
        await DomainEventPublisher.publish_all(order.get_domain_events())
        order.clear_domain_events()
        return order
