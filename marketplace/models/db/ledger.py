"""
Settlement ledger models
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from .base import Base, MoneyColumn, RateColumn

TRANSACTION_STATUSES = ("pending", "completed", "failed", "refunded")


class Transaction(Base):
    """One seller's share of one settled order. Rows are never updated."""

    __tablename__ = "transactions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid(as_uuid=True), ForeignKey("orders.id"), nullable=False)
    seller_id = Column(Uuid(as_uuid=True), ForeignKey("seller_profiles.user_id"), nullable=False)
    total_amount = MoneyColumn()
    seller_amount = MoneyColumn()
    platform_amount = MoneyColumn()
    commission_rate = RateColumn(nullable=False)
    status = Column(String(20), nullable=False, default="completed")
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    order = relationship("Order", back_populates="transactions")

    __table_args__ = (
        UniqueConstraint("order_id", "seller_id", name="uq_transactions_order_seller"),
        CheckConstraint(
            "status IN ('pending', 'completed', 'failed', 'refunded')",
            name="ck_transactions_status",
        ),
        CheckConstraint("total_amount >= 0", name="ck_transactions_total_amount"),
        CheckConstraint("seller_amount >= 0", name="ck_transactions_seller_amount"),
        CheckConstraint("platform_amount >= 0", name="ck_transactions_platform_amount"),
        Index("idx_transactions_seller_id", seller_id),
        Index("idx_transactions_created_at", created_at),
    )

    def __repr__(self):
        return (
            f"<Transaction(order_id={self.order_id}, seller_id={self.seller_id}, "
            f"seller_amount={self.seller_amount}, platform_amount={self.platform_amount})>"
        )
