"""
Orders Application Ports

Interface definitions (ports) for the orders context.
Uses Protocol for structural typing. Implementations are bound to one
session; they flush but never commit, so the calling use case owns the
unit of work.
"""

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domains.orders.domain import CartLine, Order, OrderItem, OrderStatus


@runtime_checkable
class IOrderRepository(Protocol):
    """Order persistence."""

    async def add(self, order: Order) -> None:
        """Stage a new order and all of its items"""
        ...

    async def get_by_id(self, order_id: UUID) -> Order | None:
        """Get order with its items"""
        ...

    async def get_items(self, order_id: UUID) -> list[OrderItem]:
        """Get the items of an order"""
        ...

    async def list_by_user(self, user_id: UUID, limit: int = 50, offset: int = 0) -> list[Order]:
        """Buyer's orders, newest first"""
        ...

    async def list_by_seller(self, seller_id: UUID, limit: int = 50, offset: int = 0) -> list[Order]:
        """Orders containing at least one of the seller's items, newest first"""
        ...

    async def transition_status(
        self,
        order_id: UUID,
        expected: OrderStatus,
        new_status: OrderStatus,
        require_payment_pending: bool = False,
    ) -> bool:
        """Compare-and-set of order_status; False when the row no longer matches"""
        ...

    async def claim_for_settlement(self, order_id: UUID, payment_method: str, transaction_ref: str) -> bool:
        """Flip payment pending -> paid unless cancelled; False when another writer got there first"""
        ...


@runtime_checkable
class ICartRepository(Protocol):
    """Read/clear access to the cart owned by the cart service."""

    async def get_lines(self, user_id: UUID) -> list[CartLine]:
        """Cart snapshot for a buyer"""
        ...

    async def clear(self, user_id: UUID) -> int:
        """Remove every cart line of a buyer; returns the number removed"""
        ...


@runtime_checkable
class IAccountDirectory(Protocol):
    """Seller and admin lookups backed by the profile tables."""

    async def existing_sellers(self, seller_ids: Iterable[UUID]) -> set[UUID]:
        """Subset of `seller_ids` that have a seller profile"""
        ...

    async def is_admin(self, user_id: UUID) -> bool:
        """True if the user has an admin profile"""
        ...


OrderRepositoryFactory = Callable[[AsyncSession], IOrderRepository]
CartRepositoryFactory = Callable[[AsyncSession], ICartRepository]
AccountDirectoryFactory = Callable[[AsyncSession], IAccountDirectory]


__all__ = [
    "IOrderRepository",
    "ICartRepository",
    "IAccountDirectory",
    "OrderRepositoryFactory",
    "CartRepositoryFactory",
    "AccountDirectoryFactory",
]
