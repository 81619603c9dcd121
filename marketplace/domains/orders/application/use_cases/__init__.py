"""
Orders Use Cases
"""

from .cancel_order import CancelOrderUseCase
from .checkout import CheckoutRequest, CheckoutUseCase
from .get_order_details import GetOrderDetailsUseCase
from .get_seller_orders import GetSellerOrdersUseCase, SellerOrderView
from .get_user_orders import GetUserOrdersUseCase
from .update_order_status import UpdateOrderStatusRequest, UpdateOrderStatusUseCase

__all__ = [
    "CheckoutUseCase",
    "CheckoutRequest",
    "GetUserOrdersUseCase",
    "GetOrderDetailsUseCase",
    "GetSellerOrdersUseCase",
    "SellerOrderView",
    "UpdateOrderStatusUseCase",
    "UpdateOrderStatusRequest",
    "CancelOrderUseCase",
]
