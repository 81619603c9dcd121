"""
Cart Repository Implementation

Reads the cart snapshot for checkout and clears it in the same unit of work.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain import Money
from marketplace.domains.orders.application.ports import ICartRepository
from marketplace.domains.orders.domain import CartLine
from marketplace.models.db.carts import CartItem as CartItemModel


class SQLAlchemyCartRepository(ICartRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_lines(self, user_id: UUID) -> list[CartLine]:
        result = await self.session.execute(
            select(CartItemModel).where(CartItemModel.user_id == user_id).order_by(CartItemModel.created_at)
        )
        return [
            CartLine(
                product_id=m.product_id,
                seller_id=m.seller_id,
                quantity=m.quantity,
                unit_price=Money(m.price_at_time),
            )
            for m in result.scalars().all()
        ]

    async def clear(self, user_id: UUID) -> int:
        result = await self.session.execute(
            delete(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount
