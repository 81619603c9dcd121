"""
Cart model

Cart lines are owned by the cart service; checkout reads a snapshot and clears it.
"""

import uuid

from sqlalchemy import CheckConstraint, Column, Index, Integer, UniqueConstraint, Uuid

from .base import Base, MoneyColumn, TimestampMixin


class CartItem(Base, TimestampMixin):
    """Product line in a buyer's cart with its unit price frozen when added."""

    __tablename__ = "cart_items"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False)
    product_id = Column(Uuid(as_uuid=True), nullable=False)
    seller_id = Column(Uuid(as_uuid=True), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)
    price_at_time = MoneyColumn()

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
        CheckConstraint("quantity >= 1", name="ck_cart_items_quantity_positive"),
        Index("idx_cart_items_user_id", user_id),
    )

    def __repr__(self):
        return f"<CartItem(user_id={self.user_id}, product_id={self.product_id}, quantity={self.quantity})>"
