"""
Orders API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from marketplace.domains.orders.application.use_cases import SellerOrderView
from marketplace.domains.orders.domain import Order, OrderItem, OrderStatus, PaymentStatus


class ShippingAddress(BaseModel):
    """Postal address schema; also used for billing."""

    full_name: str = Field(..., min_length=1, max_length=200)
    address_line1: str = Field(..., min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=3, max_length=20)
    country: str = Field(default="India", max_length=100)
    phone: str | None = Field(default=None, max_length=20)


class CheckoutRequestBody(BaseModel):
    """Checkout request schema. Lines and prices always come from the stored cart."""

    shipping_address: ShippingAddress
    billing_address: ShippingAddress | None = None
    payment_method: str = Field(default="Simulated Card", min_length=1, max_length=50)


class UpdateOrderStatusBody(BaseModel):
    status: OrderStatus


class OrderItemResponse(BaseModel):
    """Order item response schema."""

    id: UUID
    product_id: UUID
    seller_id: UUID
    quantity: int
    price_at_purchase: Decimal
    subtotal: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            id=item.id,
            product_id=item.product_id,
            seller_id=item.seller_id,
            quantity=item.quantity,
            price_at_purchase=item.price_at_purchase.amount,
            subtotal=item.subtotal.amount,
        )


class OrderResponse(BaseModel):
    """Order response schema."""

    id: UUID
    user_id: UUID
    total_amount: Decimal
    shipping_fee: Decimal
    tax_amount: Decimal
    payment_status: PaymentStatus
    order_status: OrderStatus
    payment_method: str | None = None
    transaction_id: str | None = None
    shipping_address: dict[str, Any]
    billing_address: dict[str, Any] | None = None
    items: list[OrderItemResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, order: Order, items: list[OrderItem] | None = None) -> "OrderResponse":
        return cls(
            id=order.id,
            user_id=order.user_id,
            total_amount=order.total_amount.amount,
            shipping_fee=order.shipping_fee.amount,
            tax_amount=order.tax_amount.amount,
            payment_status=order.payment_status,
            order_status=order.order_status,
            payment_method=order.payment_method,
            transaction_id=order.transaction_id,
            shipping_address=order.shipping_address,
            billing_address=order.billing_address,
            items=[OrderItemResponse.from_entity(i) for i in (order.items if items is None else items)],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class SellerOrderResponse(OrderResponse):
    """Order restricted to the requesting seller's lines."""

    seller_subtotal: Decimal

    @classmethod
    def from_view(cls, view: SellerOrderView) -> "SellerOrderResponse":
        base = OrderResponse.from_entity(view.order, view.items)
        return cls(**base.model_dump(), seller_subtotal=view.seller_subtotal.amount)
