"""
Orders API Dependencies

FastAPI dependencies for the orders domain.
"""

from fastapi import Depends

from marketplace.api.dependencies import get_dependency_container
from marketplace.core.container import DependencyContainer
from marketplace.domains.orders.application.use_cases import (
    CancelOrderUseCase,
    CheckoutUseCase,
    GetOrderDetailsUseCase,
    GetSellerOrdersUseCase,
    GetUserOrdersUseCase,
    UpdateOrderStatusUseCase,
)


def get_checkout_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> CheckoutUseCase:
    """Get CheckoutUseCase instance."""
    return container.create_checkout_use_case()


def get_user_orders_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> GetUserOrdersUseCase:
    return container.create_get_user_orders_use_case()


def get_order_details_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> GetOrderDetailsUseCase:
    return container.create_get_order_details_use_case()


def get_seller_orders_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> GetSellerOrdersUseCase:
    return container.create_get_seller_orders_use_case()


def get_update_order_status_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> UpdateOrderStatusUseCase:
    return container.create_update_order_status_use_case()


def get_cancel_order_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> CancelOrderUseCase:
    return container.create_cancel_order_use_case()


__all__ = [
    "get_checkout_use_case",
    "get_user_orders_use_case",
    "get_order_details_use_case",
    "get_seller_orders_use_case",
    "get_update_order_status_use_case",
    "get_cancel_order_use_case",
]
