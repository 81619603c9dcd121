"""
Database models

Importing this package registers every table on `Base.metadata`.
"""

from .base import Base, TimestampMixin
from .carts import CartItem
from .ledger import Transaction
from .orders import Order, OrderItem
from .profiles import AdminProfile, SellerProfile

__all__ = [
    "Base",
    "TimestampMixin",
    "Order",
    "OrderItem",
    "Transaction",
    "SellerProfile",
    "AdminProfile",
    "CartItem",
]
