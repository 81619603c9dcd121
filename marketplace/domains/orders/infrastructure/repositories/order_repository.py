"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.core.domain import Money
from marketplace.domains.orders.application.ports import IOrderRepository
from marketplace.domains.orders.domain import Order, OrderItem, OrderStatus, PaymentStatus
from marketplace.models.db.orders import Order as OrderModel
from marketplace.models.db.orders import OrderItem as OrderItemModel

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.

    Status changes are issued as conditional UPDATEs so that concurrent
    writers are arbitrated by the database row lock.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, order: Order) -> None:
        self.session.add(self._to_model(order))
        await self.session.flush()

    async def get_by_id(self, order_id: UUID) -> Order | None:
        result = await self.session.execute(
            select(OrderModel).options(selectinload(OrderModel.items)).where(OrderModel.id == order_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_items(self, order_id: UUID) -> list[OrderItem]:
        result = await self.session.execute(
            select(OrderItemModel).where(OrderItemModel.order_id == order_id).order_by(OrderItemModel.created_at)
        )
        return [self._item_to_entity(m) for m in result.scalars().all()]

    async def list_by_user(self, user_id: UUID, limit: int = 50, offset: int = 0) -> list[Order]:
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id)
            .limit(limit)
            .offset(offset)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_by_seller(self, seller_id: UUID, limit: int = 50, offset: int = 0) -> list[Order]:
        seller_orders = select(OrderItemModel.order_id).where(OrderItemModel.seller_id == seller_id)
        result = await self.session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id.in_(seller_orders))
            .order_by(OrderModel.created_at.desc(), OrderModel.id)
            .limit(limit)
            .offset(offset)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def transition_status(
        self,
        order_id: UUID,
        expected: OrderStatus,
        new_status: OrderStatus,
        require_payment_pending: bool = False,
    ) -> bool:
        stmt = (
            update(OrderModel)
            .where(OrderModel.id == order_id, OrderModel.order_status == expected.value)
            .values(order_status=new_status.value, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        if require_payment_pending:
            stmt = stmt.where(OrderModel.payment_status == PaymentStatus.PENDING.value)
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def claim_for_settlement(self, order_id: UUID, payment_method: str, transaction_ref: str) -> bool:
        result = await self.session.execute(
            update(OrderModel)
            .where(
                OrderModel.id == order_id,
                OrderModel.payment_status == PaymentStatus.PENDING.value,
                OrderModel.order_status != OrderStatus.CANCELLED.value,
            )
            .values(
                payment_status=PaymentStatus.PAID.value,
                payment_method=payment_method,
                transaction_id=transaction_ref,
                updated_at=datetime.now(UTC),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    # ==================== Mapping ====================

    def _to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            items=[self._item_to_entity(i) for i in model.items],
            total_amount=Money(model.total_amount),
            shipping_fee=Money(model.shipping_fee),
            tax_amount=Money(model.tax_amount),
            payment_status=PaymentStatus(model.payment_status),
            order_status=OrderStatus(model.order_status),
            shipping_address=dict(model.shipping_address or {}),
            billing_address=dict(model.billing_address) if model.billing_address else None,
            payment_method=model.payment_method,
            transaction_id=model.transaction_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _item_to_entity(self, model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            seller_id=model.seller_id,
            quantity=model.quantity,
            price_at_purchase=Money(model.price_at_purchase),
            created_at=model.created_at,
            updated_at=model.created_at,
        )

    def _to_model(self, order: Order) -> OrderModel:
        return OrderModel(
            id=order.id,
            user_id=order.user_id,
            total_amount=order.total_amount.amount,
            shipping_fee=order.shipping_fee.amount,
            tax_amount=order.tax_amount.amount,
            payment_status=order.payment_status.value,
            order_status=order.order_status.value,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            payment_method=order.payment_method,
            transaction_id=order.transaction_id,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemModel(
                    id=item.id,
                    order_id=order.id,
                    product_id=item.product_id,
                    seller_id=item.seller_id,
                    quantity=item.quantity,
                    price_at_purchase=item.price_at_purchase.amount,
                    created_at=item.created_at,
                )
                for item in order.items
            ],
        )
