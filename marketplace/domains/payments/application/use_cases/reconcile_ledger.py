"""
Reconcile Ledger Use Case

Re-derives every running balance from the Transaction rows and reports drift.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import Money
from marketplace.domains.payments.application.ports import (
    LedgerRepositoryFactory,
    PlatformAccountRepositoryFactory,
    SellerProfileRepositoryFactory,
)

logger = logging.getLogger(__name__)


@dataclass
class BalanceDiscrepancy:
    """A running balance that no longer equals the sum of its ledger rows."""

    account: str
    account_id: UUID | None
    balance: str
    recorded: Decimal
    expected: Decimal

    @property
    def difference(self) -> Decimal:
        return self.recorded - self.expected


@dataclass
class ReconciliationReport:
    checked_sellers: int
    ledger_platform_total: Decimal
    discrepancies: list[BalanceDiscrepancy] = field(default_factory=list)

    @property
    def balanced(self) -> bool:
        return not self.discrepancies


class ReconcileLedgerUseCase:
    """
    Use Case: Reconcile Ledger

    For every seller, total_earnings must equal the sum of its completed
    seller_amount rows. Payouts are not handled here, so current_balance must
    match as well. Summed over every admin profile, total_revenue must
    equal the sum of platform_amount.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        seller_profile_repository_factory: SellerProfileRepositoryFactory,
        platform_account_repository_factory: PlatformAccountRepositoryFactory,
        ledger_repository_factory: LedgerRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._seller_profile_repository_factory = seller_profile_repository_factory
        self._platform_account_repository_factory = platform_account_repository_factory
        self._ledger_repository_factory = ledger_repository_factory

    async def execute(self) -> ReconciliationReport:
        async with self._session_factory() as session, session.begin():
            ledger = self._ledger_repository_factory(session)
            seller_totals = await ledger.seller_amount_totals()
            platform_total = await ledger.total_platform_amount()
            profiles = await self._seller_profile_repository_factory(session).list_all()
            recorded_platform = await self._platform_account_repository_factory(session).total_revenue()

        report = ReconciliationReport(checked_sellers=len(profiles), ledger_platform_total=platform_total)
        zero = Money.zero().amount

        for profile in profiles:
            expected = seller_totals.get(profile.user_id, zero)
            for name, recorded in (
                ("total_earnings", profile.total_earnings.amount),
                ("current_balance", profile.current_balance.amount),
            ):
                if recorded != expected:
                    report.discrepancies.append(
                        BalanceDiscrepancy("seller", profile.user_id, name, recorded, expected)
                    )

        if recorded_platform != platform_total:
            report.discrepancies.append(
                BalanceDiscrepancy("platform", None, "total_revenue", recorded_platform, platform_total)
            )

        for d in report.discrepancies:
            logger.warning(
                f"Ledger drift on {d.account} {d.account_id} {d.balance}: "
                f"recorded {d.recorded}, ledger {d.expected} (diff {d.difference})"
            )
        if report.balanced:
            logger.info(f"Ledger reconciled: {report.checked_sellers} sellers, platform total {platform_total}")
        return report
