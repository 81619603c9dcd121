"""
Get Seller Orders Use Case

Orders that contain the seller's products, restricted to the seller's own lines.
"""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import Money
from marketplace.domains.orders.application.ports import OrderRepositoryFactory
from marketplace.domains.orders.domain import Order, OrderItem


@dataclass
class SellerOrderView:
    """An order as one seller sees it: only that seller's items and subtotal."""

    order: Order
    items: list[OrderItem]
    seller_subtotal: Money


class GetSellerOrdersUseCase:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory

    async def execute(self, seller_id: UUID, limit: int = 50, offset: int = 0) -> list[SellerOrderView]:
        async with self._session_factory() as session:
            orders = await self._order_repository_factory(session).list_by_seller(seller_id, limit=limit, offset=offset)

        views = []
        for order in orders:
            items = [item for item in order.items if item.seller_id == seller_id]
            views.append(
                SellerOrderView(
                    order=order,
                    items=items,
                    seller_subtotal=Money.total(item.subtotal for item in items),
                )
            )
        return views
