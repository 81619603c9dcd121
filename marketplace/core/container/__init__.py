"""
Dependency Injection Container.

Wires concrete repositories and the session factory into use cases.
This module is the facade that composes the domain containers.
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.config.settings import Settings

from .base import BaseContainer
from .orders import OrdersContainer
from .payments import PaymentsContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: compose and delegate to domain containers.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._base = BaseContainer(settings, session_factory)
        self._orders = OrdersContainer(self._base)
        self._payments = PaymentsContainer(self._base)
        logger.debug("DependencyContainer initialized")

    @property
    def settings(self) -> Settings:
        return self._base.settings

    # ==================== ORDERS ====================

    def create_checkout_use_case(self):
        return self._orders.create_checkout_use_case()

    def create_get_user_orders_use_case(self):
        return self._orders.create_get_user_orders_use_case()

    def create_get_order_details_use_case(self):
        return self._orders.create_get_order_details_use_case()

    def create_get_seller_orders_use_case(self):
        return self._orders.create_get_seller_orders_use_case()

    def create_update_order_status_use_case(self):
        return self._orders.create_update_order_status_use_case()

    def create_cancel_order_use_case(self):
        return self._orders.create_cancel_order_use_case()

    # ==================== PAYMENTS ====================

    def create_settle_order_use_case(self):
        return self._payments.create_settle_order_use_case()

    def create_get_seller_earnings_use_case(self):
        return self._payments.create_get_seller_earnings_use_case()

    def create_get_platform_revenue_use_case(self):
        return self._payments.create_get_platform_revenue_use_case()

    def create_reconcile_ledger_use_case(self):
        return self._payments.create_reconcile_ledger_use_case()

    def create_upsert_seller_profile_use_case(self):
        return self._payments.create_upsert_seller_profile_use_case()

    async def is_admin(self, user_id: UUID) -> bool:
        return await self._payments.is_admin(user_id)


# Container singleton
_container_instance: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Return the process-wide container."""
    global _container_instance
    if _container_instance is None:
        _container_instance = DependencyContainer()
    return _container_instance


__all__ = [
    "BaseContainer",
    "DependencyContainer",
    "OrdersContainer",
    "PaymentsContainer",
    "get_container",
]
