"""
Seller and admin profile models

Both profiles carry the running balances maintained by settlement.
"""

import uuid
from decimal import Decimal

from sqlalchemy import CheckConstraint, Column, String, Uuid

from .base import Base, JSONType, MoneyColumn, RateColumn, TimestampMixin


class SellerProfile(Base, TimestampMixin):
    """Seller account: commission rate, payout details and earnings."""

    __tablename__ = "seller_profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, unique=True)
    store_name = Column(String(200), nullable=False)
    # NULL means "use the platform default"
    commission_rate = RateColumn(nullable=True)
    total_earnings = MoneyColumn(default=Decimal("0.00"))
    current_balance = MoneyColumn(default=Decimal("0.00"))
    verification_status = Column(String(20), nullable=False, default="pending")
    payout_details = Column(JSONType, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "commission_rate IS NULL OR (commission_rate >= 0 AND commission_rate <= 100)",
            name="ck_seller_profiles_commission_rate",
        ),
        CheckConstraint("total_earnings >= 0", name="ck_seller_profiles_total_earnings"),
        CheckConstraint("current_balance >= 0", name="ck_seller_profiles_current_balance"),
    )

    def __repr__(self):
        return f"<SellerProfile(user_id={self.user_id}, store_name='{self.store_name}')>"


class AdminProfile(Base, TimestampMixin):
    """Platform administrator; holds the platform revenue running total."""

    __tablename__ = "admin_profiles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, unique=True)
    department = Column(String(100), nullable=True)
    total_revenue = MoneyColumn(default=Decimal("0.00"))

    __table_args__ = (CheckConstraint("total_revenue >= 0", name="ck_admin_profiles_total_revenue"),)

    def __repr__(self):
        return f"<AdminProfile(user_id={self.user_id}, total_revenue={self.total_revenue})>"
