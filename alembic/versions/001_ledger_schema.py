"""Ledger schema - orders, profiles, settlement transactions and carts.

Revision ID: 001_ledger_schema
Revises: None
Create Date: 2026-10-19

Tables created:
- seller_profiles, admin_profiles: accounts carrying running balances
- orders, order_items: checkout output
- transactions: one settled row per (order, seller)
- cart_items: checkout input
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_ledger_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MONEY = sa.Numeric(12, 2)
RATE = sa.Numeric(5, 2)
ZERO = sa.text("0.00")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "seller_profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False, unique=True),
        sa.Column("store_name", sa.String(200), nullable=False),
        sa.Column("commission_rate", RATE, nullable=True),
        sa.Column("total_earnings", MONEY, nullable=False, server_default=ZERO),
        sa.Column("current_balance", MONEY, nullable=False, server_default=ZERO),
        sa.Column("verification_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("payout_details", postgresql.JSONB(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "commission_rate IS NULL OR (commission_rate >= 0 AND commission_rate <= 100)",
            name="ck_seller_profiles_commission_rate",
        ),
        sa.CheckConstraint("total_earnings >= 0", name="ck_seller_profiles_total_earnings"),
        sa.CheckConstraint("current_balance >= 0", name="ck_seller_profiles_current_balance"),
    )

    op.create_table(
        "admin_profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False, unique=True),
        sa.Column("department", sa.String(100), nullable=True),
        sa.Column("total_revenue", MONEY, nullable=False, server_default=ZERO),
        *_timestamps(),
        sa.CheckConstraint("total_revenue >= 0", name="ck_admin_profiles_total_revenue"),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("total_amount", MONEY, nullable=False),
        sa.Column("shipping_fee", MONEY, nullable=False, server_default=ZERO),
        sa.Column("tax_amount", MONEY, nullable=False, server_default=ZERO),
        sa.Column("payment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("order_status", sa.String(20), nullable=False, server_default="processing"),
        sa.Column("shipping_address", postgresql.JSONB(), nullable=False),
        sa.Column("billing_address", postgresql.JSONB(), nullable=True),
        sa.Column("payment_method", sa.String(50), nullable=True),
        sa.Column("transaction_id", sa.String(100), nullable=True, unique=True),
        *_timestamps(),
        sa.CheckConstraint(
            "payment_status IN ('pending', 'paid', 'failed', 'refunded')",
            name="ck_orders_payment_status",
        ),
        sa.CheckConstraint(
            "order_status IN ('processing', 'confirmed', 'shipped', 'out_for_delivery', "
            "'delivered', 'cancelled', 'returned')",
            name="ck_orders_order_status",
        ),
        sa.CheckConstraint("total_amount >= 0", name="ck_orders_total_non_negative"),
    )
    op.create_index("idx_orders_user_id", "orders", ["user_id"])
    op.create_index("idx_orders_payment_status", "orders", ["payment_status"])

    op.create_table(
        "order_items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("order_id", sa.Uuid(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.Column("seller_id", sa.Uuid(), sa.ForeignKey("seller_profiles.user_id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price_at_purchase", MONEY, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        sa.CheckConstraint("price_at_purchase >= 0", name="ck_order_items_price_non_negative"),
    )
    op.create_index("idx_order_items_order_id", "order_items", ["order_id"])
    op.create_index("idx_order_items_seller_id", "order_items", ["seller_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("order_id", sa.Uuid(), sa.ForeignKey("orders.id"), nullable=False),
        sa.Column("seller_id", sa.Uuid(), sa.ForeignKey("seller_profiles.user_id"), nullable=False),
        sa.Column("total_amount", MONEY, nullable=False),
        sa.Column("seller_amount", MONEY, nullable=False),
        sa.Column("platform_amount", MONEY, nullable=False),
        sa.Column("commission_rate", RATE, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="completed"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("order_id", "seller_id", name="uq_transactions_order_seller"),
        sa.CheckConstraint(
            "status IN ('pending', 'completed', 'failed', 'refunded')",
            name="ck_transactions_status",
        ),
        sa.CheckConstraint("total_amount >= 0", name="ck_transactions_total_amount"),
        sa.CheckConstraint("seller_amount >= 0", name="ck_transactions_seller_amount"),
        sa.CheckConstraint("platform_amount >= 0", name="ck_transactions_platform_amount"),
    )
    op.create_index("idx_transactions_seller_id", "transactions", ["seller_id"])
    op.create_index("idx_transactions_created_at", "transactions", ["created_at"])

    op.create_table(
        "cart_items",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("product_id", sa.Uuid(), nullable=False),
        sa.Column("seller_id", sa.Uuid(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("price_at_time", MONEY, nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
        sa.CheckConstraint("quantity >= 1", name="ck_cart_items_quantity_positive"),
    )
    op.create_index("idx_cart_items_user_id", "cart_items", ["user_id"])


def downgrade() -> None:
    op.drop_table("cart_items")
    op.drop_table("transactions")
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("admin_profiles")
    op.drop_table("seller_profiles")
