"""
Orders Domain Container.

Single Responsibility: wire order repositories and use cases.
"""

from typing import TYPE_CHECKING

from marketplace.domains.orders.application.use_cases import (
    CancelOrderUseCase,
    CheckoutUseCase,
    GetOrderDetailsUseCase,
    GetSellerOrdersUseCase,
    GetUserOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from marketplace.domains.orders.infrastructure.repositories import (
    SQLAlchemyAccountDirectory,
    SQLAlchemyCartRepository,
    SQLAlchemyOrderRepository,
)

if TYPE_CHECKING:
    from .base import BaseContainer


class OrdersContainer:
    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== USE CASES ====================

    def create_checkout_use_case(self) -> CheckoutUseCase:
        return CheckoutUseCase(
            session_factory=self._base.session_factory,
            order_repository_factory=SQLAlchemyOrderRepository,
            cart_repository_factory=SQLAlchemyCartRepository,
            account_directory_factory=SQLAlchemyAccountDirectory,
            settings=self._base.settings,
        )

    def create_get_user_orders_use_case(self) -> GetUserOrdersUseCase:
        return GetUserOrdersUseCase(self._base.session_factory, SQLAlchemyOrderRepository)

    def create_get_order_details_use_case(self) -> GetOrderDetailsUseCase:
        return GetOrderDetailsUseCase(self._base.session_factory, SQLAlchemyOrderRepository)

    def create_get_seller_orders_use_case(self) -> GetSellerOrdersUseCase:
        return GetSellerOrdersUseCase(self._base.session_factory, SQLAlchemyOrderRepository)

    def create_update_order_status_use_case(self) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(
            session_factory=self._base.session_factory,
            order_repository_factory=SQLAlchemyOrderRepository,
            account_directory_factory=SQLAlchemyAccountDirectory,
        )

    def create_cancel_order_use_case(self) -> CancelOrderUseCase:
        return CancelOrderUseCase(self._base.session_factory, SQLAlchemyOrderRepository)
