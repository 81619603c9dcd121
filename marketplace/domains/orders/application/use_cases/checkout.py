"""
Checkout Use Case

Materialises a buyer's cart into a pending order.
"""

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.config.settings import Settings
from marketplace.core.domain import DomainEventPublisher, Money
from marketplace.domains.orders.application.ports import (
    AccountDirectoryFactory,
    CartRepositoryFactory,
    OrderRepositoryFactory,
)
from marketplace.domains.orders.domain import (
    CartLine,
    CheckoutPersistenceError,
    EmptyCartError,
    InvalidSellerReferenceError,
    Order,
)

logger = logging.getLogger(__name__)


@dataclass
class CheckoutRequest:
    """
    Request for checkout.

    When `lines` is None the snapshot is read from the buyer's stored cart,
    which is then cleared. Explicit lines leave the stored cart untouched.
    """

    user_id: UUID
    shipping_address: dict[str, Any]
    payment_method: str
    billing_address: dict[str, Any] | None = None
    lines: list[CartLine] | None = None


class CheckoutUseCase:
    """
    Use Case: Checkout

    Responsibilities:
    - Read the cart snapshot (unit prices frozen at cart insertion)
    - Resolve every seller referenced by the snapshot
    - Persist the order with all of its items
    - Clear the stored cart when it was the snapshot source

    All writes share one transaction: either the order, its items and the
    cleared cart are all committed, or nothing is.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
        cart_repository_factory: CartRepositoryFactory,
        account_directory_factory: AccountDirectoryFactory,
        settings: Settings,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory
        self._cart_repository_factory = cart_repository_factory
        self._account_directory_factory = account_directory_factory
        self._settings = settings

    async def execute(self, request: CheckoutRequest) -> Order:
        """
        Place an order from the buyer's cart.

        Raises:
            EmptyCartError: the snapshot has no lines
            InvalidSellerReferenceError: a line references an unknown seller
            CheckoutPersistenceError: storage failed; nothing was written
        """
        try:
            async with self._session_factory() as session, session.begin():
                carts = self._cart_repository_factory(session)
                from_cart = request.lines is None
                lines = await carts.get_lines(request.user_id) if from_cart else request.lines
                if not lines:
                    raise EmptyCartError(request.user_id)

                await self._ensure_sellers_exist(session, lines)

                order = Order.place(
                    user_id=request.user_id,
                    lines=lines,
                    shipping_address=request.shipping_address,
                    billing_address=request.billing_address,
                    payment_method=request.payment_method,
                    shipping_fee=Money(self._settings.DEFAULT_SHIPPING_FEE),
                    tax_amount=Money(self._settings.FLAT_TAX_AMOUNT),
                )
                await self._order_repository_factory(session).add(order)
                cleared = await carts.clear(request.user_id) if from_cart else 0
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Checkout failed for user {request.user_id}, rolled back: {e}", exc_info=True)
            raise CheckoutPersistenceError(e) from e

        logger.info(
            f"Order {order.id} placed by {request.user_id}: {len(order.items)} items, "
            f"total {order.total_amount.amount}, {cleared} cart lines cleared"
        )
        await DomainEventPublisher.publish_all(order.get_domain_events())
        order.clear_domain_events()
        return order

    async def _ensure_sellers_exist(self, session: AsyncSession, lines: list[CartLine]) -> None:
        referenced = {line.seller_id for line in lines}
        found = await self._account_directory_factory(session).existing_sellers(referenced)
        missing = referenced - found
        if missing:
            raise InvalidSellerReferenceError(missing)
