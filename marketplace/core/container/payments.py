"""
Payments Domain Container.

Single Responsibility: wire settlement, reporting and seller profile use cases.
"""

from typing import TYPE_CHECKING

from marketplace.domains.orders.infrastructure.repositories import (
    SQLAlchemyAccountDirectory,
    SQLAlchemyOrderRepository,
)
from marketplace.domains.payments.application.use_cases import (
    GetPlatformRevenueUseCase,
    GetSellerEarningsUseCase,
    ReconcileLedgerUseCase,
    SettleOrderUseCase,
    UpsertSellerProfileUseCase,
)
from marketplace.domains.payments.infrastructure.repositories import (
    SQLAlchemyLedgerRepository,
    SQLAlchemyPlatformAccountRepository,
    SQLAlchemySellerProfileRepository,
)

if TYPE_CHECKING:
    from .base import BaseContainer


class PaymentsContainer:
    def __init__(self, base: "BaseContainer"):
        self._base = base

    # ==================== USE CASES ====================

    def create_settle_order_use_case(self) -> SettleOrderUseCase:
        return SettleOrderUseCase(
            session_factory=self._base.session_factory,
            order_repository_factory=SQLAlchemyOrderRepository,
            seller_profile_repository_factory=SQLAlchemySellerProfileRepository,
            platform_account_repository_factory=SQLAlchemyPlatformAccountRepository,
            ledger_repository_factory=SQLAlchemyLedgerRepository,
            settings=self._base.settings,
        )

    def create_get_seller_earnings_use_case(self) -> GetSellerEarningsUseCase:
        return GetSellerEarningsUseCase(
            session_factory=self._base.session_factory,
            seller_profile_repository_factory=SQLAlchemySellerProfileRepository,
            ledger_repository_factory=SQLAlchemyLedgerRepository,
        )

    def create_get_platform_revenue_use_case(self) -> GetPlatformRevenueUseCase:
        return GetPlatformRevenueUseCase(
            session_factory=self._base.session_factory,
            platform_account_repository_factory=SQLAlchemyPlatformAccountRepository,
            ledger_repository_factory=SQLAlchemyLedgerRepository,
            settings=self._base.settings,
        )

    def create_reconcile_ledger_use_case(self) -> ReconcileLedgerUseCase:
        return ReconcileLedgerUseCase(
            session_factory=self._base.session_factory,
            seller_profile_repository_factory=SQLAlchemySellerProfileRepository,
            platform_account_repository_factory=SQLAlchemyPlatformAccountRepository,
            ledger_repository_factory=SQLAlchemyLedgerRepository,
        )

    def create_upsert_seller_profile_use_case(self) -> UpsertSellerProfileUseCase:
        return UpsertSellerProfileUseCase(
            session_factory=self._base.session_factory,
            seller_profile_repository_factory=SQLAlchemySellerProfileRepository,
        )

    # ==================== QUERIES ====================

    async def is_admin(self, user_id) -> bool:
        """Admin check used by the revenue and reconciliation endpoints."""
        async with self._base.session_factory() as session:
            return await SQLAlchemyAccountDirectory(session).is_admin(user_id)
