"""
Order Entity

A buyer's order: the lines frozen at checkout plus payment and fulfillment state.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from marketplace.core.domain import (
    AggregateRoot,
    Entity,
    InvalidOperationException,
    Money,
    ValidationException,
    generate_uuid,
)

from ..events import OrderPlaced, OrderStatusChanged
from ..exceptions import EmptyCartError
from ..value_objects import CartLine, OrderStatus, PaymentStatus


@dataclass(kw_only=True, eq=False)
class OrderItem(Entity[UUID]):
    """Order line; the price is the unit price at purchase time and never changes."""

    order_id: UUID
    product_id: UUID
    seller_id: UUID
    quantity: int
    price_at_purchase: Money

    @property
    def subtotal(self) -> Money:
        return self.price_at_purchase.multiply(self.quantity)


@dataclass(kw_only=True, eq=False)
class Order(AggregateRoot[UUID]):
    """
    Order aggregate root.

    Created by checkout with `Order.place`. Settlement moves payment_status
    from PENDING to PAID; fulfillment moves order_status along its own
    state machine.

    Example:
        ```python
        order = Order.place(
            user_id=buyer_id,
            lines=[CartLine(product_id, seller_id, 2, Money(Decimal("50.00")))],
            shipping_address={"city": "Pune"},
            payment_method="Simulated Card",
        )
        order.total_amount  # Money(100.00)
        ```
    """

    user_id: UUID
    items: list[OrderItem] = field(default_factory=list)
    total_amount: Money = field(default_factory=Money.zero)
    shipping_fee: Money = field(default_factory=Money.zero)
    tax_amount: Money = field(default_factory=Money.zero)
    payment_status: PaymentStatus = PaymentStatus.PENDING
    order_status: OrderStatus = OrderStatus.PROCESSING
    shipping_address: dict[str, Any] = field(default_factory=dict)
    billing_address: dict[str, Any] | None = None
    payment_method: str | None = None
    transaction_id: str | None = None

    # ==================== Factory ====================

    @classmethod
    def place(
        cls,
        user_id: UUID,
        lines: Sequence[CartLine],
        shipping_address: dict[str, Any],
        payment_method: str | None = None,
        billing_address: dict[str, Any] | None = None,
        shipping_fee: Money | None = None,
        tax_amount: Money | None = None,
    ) -> "Order":
        """
        Materialise a cart snapshot into a new pending order.

        total_amount is the sum of line totals only; shipping fee and tax
        are stored alongside it.

        Raises:
            EmptyCartError: if `lines` is empty
            ValidationException: if no shipping address is given
        """
        if not lines:
            raise EmptyCartError(user_id)
        if not shipping_address:
            raise ValidationException("Shipping address is required", field="shipping_address")

        order_id = generate_uuid()
        items = [
            OrderItem(
                id=generate_uuid(),
                order_id=order_id,
                product_id=line.product_id,
                seller_id=line.seller_id,
                quantity=line.quantity,
                price_at_purchase=line.unit_price,
            )
            for line in lines
        ]
        order = cls(
            id=order_id,
            user_id=user_id,
            items=items,
            total_amount=Money.total(item.subtotal for item in items),
            shipping_fee=shipping_fee or Money.zero(),
            tax_amount=tax_amount or Money.zero(),
            shipping_address=dict(shipping_address),
            billing_address=dict(billing_address) if billing_address else None,
            payment_method=payment_method,
        )
        order._record_event(
            OrderPlaced(
                order_id=order_id,
                user_id=user_id,
                total_amount=order.total_amount.amount,
                seller_ids=tuple(order.seller_ids),
            )
        )
        return order

    # ==================== Queries ====================

    @property
    def seller_ids(self) -> list[UUID]:
        """Distinct sellers in the order, in a stable order."""
        return sorted({item.seller_id for item in self.items}, key=str)

    def has_seller(self, seller_id: UUID) -> bool:
        return any(item.seller_id == seller_id for item in self.items)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    @property
    def is_settled(self) -> bool:
        return self.payment_status.is_settled()

    # ==================== Fulfillment ====================

    def change_status(self, new_status: OrderStatus, changed_by: UUID | None = None) -> None:
        """
        Move the order along its fulfillment state machine.

        Cancellation goes through `cancel` so its payment precondition applies.
        """
        if new_status is OrderStatus.CANCELLED:
            self.cancel(changed_by)
            return
        if not self.order_status.can_transition_to(new_status):
            allowed = ", ".join(s.value for s in self.order_status.get_valid_transitions()) or "none"
            raise InvalidOperationException(
                f"change status to {new_status.value}",
                self.order_status.value,
                message=f"Cannot move order from {self.order_status.value} to {new_status.value} (allowed: {allowed})",
            )
        self._apply_status(new_status, changed_by)

    def cancel(self, cancelled_by: UUID | None = None) -> None:
        """
        Cancel an order before it ships and before any money has moved.

        Refunds are out of scope, so a paid order cannot be cancelled.
        """
        if not self.order_status.is_cancellable():
            raise InvalidOperationException("cancel", self.order_status.value)
        if self.payment_status is not PaymentStatus.PENDING:
            raise InvalidOperationException(
                "cancel",
                f"payment {self.payment_status.value}",
                message="Cannot cancel an order whose payment is not pending",
            )
        self._apply_status(OrderStatus.CANCELLED, cancelled_by)

    def _apply_status(self, new_status: OrderStatus, changed_by: UUID | None) -> None:
        old_status = self.order_status
        self.order_status = new_status
        self.touch()
        self._record_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
                changed_by=changed_by,
            )
        )
