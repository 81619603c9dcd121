"""
Get Platform Revenue Use Case

Platform commission totals for the admin dashboard.
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.config.settings import Settings
from marketplace.core.domain import Money
from marketplace.domains.payments.application.ports import LedgerRepositoryFactory, PlatformAccountRepositoryFactory
from marketplace.domains.payments.domain import LedgerTransaction

logger = logging.getLogger(__name__)


@dataclass
class PlatformRevenue:
    """
    `total` is derived from the ledger rows; `running_total` is the
    maintained aggregate summed over every admin profile. They must agree.
    """

    total: Money
    running_total: Money
    total_orders: int
    recent_transactions: list[LedgerTransaction] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        return self.total == self.running_total


class GetPlatformRevenueUseCase:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        platform_account_repository_factory: PlatformAccountRepositoryFactory,
        ledger_repository_factory: LedgerRepositoryFactory,
        settings: Settings,
    ):
        self._session_factory = session_factory
        self._platform_account_repository_factory = platform_account_repository_factory
        self._ledger_repository_factory = ledger_repository_factory
        self._settings = settings

    async def execute(self, recent_limit: int | None = None) -> PlatformRevenue:
        limit = recent_limit if recent_limit is not None else self._settings.RECENT_TRANSACTIONS_LIMIT

        # Single read transaction so the ledger sum and the aggregate come from one snapshot
        async with self._session_factory() as session, session.begin():
            ledger = self._ledger_repository_factory(session)
            total = Money(await ledger.total_platform_amount())
            total_orders = await ledger.count_settled_orders()
            recent = await ledger.list_recent(limit)
            running_total = Money(await self._platform_account_repository_factory(session).total_revenue())

        revenue = PlatformRevenue(
            total=total,
            running_total=running_total,
            total_orders=total_orders,
            recent_transactions=recent,
        )
        if not revenue.consistent:
            logger.warning(
                f"Platform revenue mismatch: ledger {revenue.total.amount} vs aggregate {revenue.running_total.amount}"
            )
        return revenue
