"""
Order Status Value Objects

Fulfillment and payment lifecycles of an order with their transition rules.
"""

from marketplace.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Fulfillment lifecycle.

    Valid transitions:
    - PROCESSING -> CONFIRMED, CANCELLED
    - CONFIRMED -> SHIPPED, CANCELLED
    - SHIPPED -> OUT_FOR_DELIVERY, DELIVERED, RETURNED
    - OUT_FOR_DELIVERY -> DELIVERED, RETURNED
    - DELIVERED -> RETURNED
    - CANCELLED, RETURNED -> (terminal states)
    """

    PROCESSING = "processing"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        return new_status in _ORDER_TRANSITIONS[self]

    def get_valid_transitions(self) -> list["OrderStatus"]:
        return list(_ORDER_TRANSITIONS[self])

    def is_terminal(self) -> bool:
        return not _ORDER_TRANSITIONS[self]

    def is_cancellable(self) -> bool:
        """Buyer may still cancel (nothing has left the warehouse)."""
        return self in (OrderStatus.PROCESSING, OrderStatus.CONFIRMED)


class PaymentStatus(StatusEnum):
    """
    Payment lifecycle.

    Valid transitions:
    - PENDING -> PAID, FAILED
    - PAID -> REFUNDED
    - FAILED, REFUNDED -> (terminal states)

    Only PENDING -> PAID is performed here (by settlement).
    """

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"

    def can_transition_to(self, new_status: "PaymentStatus") -> bool:
        return new_status in _PAYMENT_TRANSITIONS[self]

    def is_settled(self) -> bool:
        return self is PaymentStatus.PAID


_ORDER_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PROCESSING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    OrderStatus.SHIPPED: (OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED, OrderStatus.RETURNED),
    OrderStatus.OUT_FOR_DELIVERY: (OrderStatus.DELIVERED, OrderStatus.RETURNED),
    OrderStatus.DELIVERED: (OrderStatus.RETURNED,),
    OrderStatus.CANCELLED: (),
    OrderStatus.RETURNED: (),
}

_PAYMENT_TRANSITIONS: dict[PaymentStatus, tuple[PaymentStatus, ...]] = {
    PaymentStatus.PENDING: (PaymentStatus.PAID, PaymentStatus.FAILED),
    PaymentStatus.PAID: (PaymentStatus.REFUNDED,),
    PaymentStatus.FAILED: (),
    PaymentStatus.REFUNDED: (),
}
