"""
Order models
"""

import uuid
from datetime import UTC, datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import relationship

from .base import Base, JSONType, MoneyColumn, TimestampMixin

PAYMENT_STATUSES = ("pending", "paid", "failed", "refunded")
ORDER_STATUSES = ("processing", "confirmed", "shipped", "out_for_delivery", "delivered", "cancelled", "returned")


def _in_clause(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{v}'" for v in values)
    return f"{column} IN ({quoted})"


class Order(Base, TimestampMixin):
    """Purchase order placed by a buyer."""

    __tablename__ = "orders"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False)

    # Amounts
    total_amount = MoneyColumn()
    shipping_fee = MoneyColumn(default=Decimal("0.00"))
    tax_amount = MoneyColumn(default=Decimal("0.00"))

    # Status
    payment_status = Column(String(20), nullable=False, default="pending")
    order_status = Column(String(20), nullable=False, default="processing")

    # Addresses
    shipping_address = Column(JSONType, nullable=False)
    billing_address = Column(JSONType, nullable=True)

    # Payment
    payment_method = Column(String(50), nullable=True)
    transaction_id = Column(String(100), nullable=True, unique=True)

    # Relationships
    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.created_at",
    )
    transactions = relationship("Transaction", back_populates="order")

    __table_args__ = (
        CheckConstraint(_in_clause("payment_status", PAYMENT_STATUSES), name="ck_orders_payment_status"),
        CheckConstraint(_in_clause("order_status", ORDER_STATUSES), name="ck_orders_order_status"),
        CheckConstraint("total_amount >= 0", name="ck_orders_total_non_negative"),
        Index("idx_orders_user_id", user_id),
        Index("idx_orders_payment_status", payment_status),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, payment_status='{self.payment_status}', order_status='{self.order_status}')>"


class OrderItem(Base):
    """Line of an order, frozen at checkout."""

    __tablename__ = "order_items"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid(as_uuid=True), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Uuid(as_uuid=True), nullable=False)
    seller_id = Column(Uuid(as_uuid=True), ForeignKey("seller_profiles.user_id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    price_at_purchase = MoneyColumn()
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    order = relationship("Order", back_populates="items")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        CheckConstraint("price_at_purchase >= 0", name="ck_order_items_price_non_negative"),
        Index("idx_order_items_order_id", order_id),
        Index("idx_order_items_seller_id", seller_id),
    )

    def __repr__(self):
        return f"<OrderItem(order_id={self.order_id}, seller_id={self.seller_id}, quantity={self.quantity})>"
