"""Order value objects."""

from .cart_line import CartLine
from .order_status import OrderStatus, PaymentStatus

__all__ = [
    "CartLine",
    "OrderStatus",
    "PaymentStatus",
]
