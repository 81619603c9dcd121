"""
Orders Domain Layer

Order aggregate, cart snapshot lines, status machines, events and errors.
"""

from .entities import Order, OrderItem
from .events import OrderPlaced, OrderStatusChanged
from .exceptions import CheckoutPersistenceError, EmptyCartError, InvalidSellerReferenceError, OrderNotFoundError
from .value_objects import CartLine, OrderStatus, PaymentStatus

__all__ = [
    "Order",
    "OrderItem",
    "CartLine",
    "OrderStatus",
    "PaymentStatus",
    "OrderPlaced",
    "OrderStatusChanged",
    "EmptyCartError",
    "InvalidSellerReferenceError",
    "OrderNotFoundError",
    "CheckoutPersistenceError",
]
