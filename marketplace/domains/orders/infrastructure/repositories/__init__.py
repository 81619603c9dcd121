"""Orders repositories."""

from .account_directory import SQLAlchemyAccountDirectory
from .cart_repository import SQLAlchemyCartRepository
from .order_repository import SQLAlchemyOrderRepository

__all__ = [
    "SQLAlchemyAccountDirectory",
    "SQLAlchemyCartRepository",
    "SQLAlchemyOrderRepository",
]
