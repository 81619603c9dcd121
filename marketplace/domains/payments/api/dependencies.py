"""
Payments API Dependencies

FastAPI dependencies for the payments domain.
"""

from fastapi import Depends

from marketplace.api.dependencies import get_dependency_container
from marketplace.core.container import DependencyContainer
from marketplace.domains.payments.application.use_cases import (
    GetPlatformRevenueUseCase,
    GetSellerEarningsUseCase,
    ReconcileLedgerUseCase,
    SettleOrderUseCase,
    UpsertSellerProfileUseCase,
)


def get_settle_order_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> SettleOrderUseCase:
    """Get SettleOrderUseCase instance."""
    return container.create_settle_order_use_case()


def get_seller_earnings_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> GetSellerEarningsUseCase:
    return container.create_get_seller_earnings_use_case()


def get_platform_revenue_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> GetPlatformRevenueUseCase:
    return container.create_get_platform_revenue_use_case()


def get_reconcile_ledger_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> ReconcileLedgerUseCase:
    return container.create_reconcile_ledger_use_case()


def get_upsert_seller_profile_use_case(
    container: DependencyContainer = Depends(get_dependency_container),  # noqa: B008
) -> UpsertSellerProfileUseCase:
    return container.create_upsert_seller_profile_use_case()


__all__ = [
    "get_settle_order_use_case",
    "get_seller_earnings_use_case",
    "get_platform_revenue_use_case",
    "get_reconcile_ledger_use_case",
    "get_upsert_seller_profile_use_case",
]
