"""
Get Seller Earnings Use Case

A seller's running balances with the settlement rows behind them.
"""

from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import EntityNotFoundException, Money
from marketplace.domains.payments.application.ports import LedgerRepositoryFactory, SellerProfileRepositoryFactory
from marketplace.domains.payments.domain import LedgerTransaction


@dataclass
class SellerEarnings:
    seller_id: UUID
    total_earnings: Money
    current_balance: Money
    transactions: list[LedgerTransaction] = field(default_factory=list)


class GetSellerEarningsUseCase:
    """
    Use Case: Get Seller Earnings

    Reads only the profile balances and Transaction rows; order items are
    never consulted after settlement.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        seller_profile_repository_factory: SellerProfileRepositoryFactory,
        ledger_repository_factory: LedgerRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._seller_profile_repository_factory = seller_profile_repository_factory
        self._ledger_repository_factory = ledger_repository_factory

    async def execute(self, seller_id: UUID) -> SellerEarnings:
        async with self._session_factory() as session, session.begin():
            profile = await self._seller_profile_repository_factory(session).get_by_user_id(seller_id)
            if profile is None:
                raise EntityNotFoundException("SellerProfile", seller_id)
            transactions = await self._ledger_repository_factory(session).list_by_seller(seller_id)

        return SellerEarnings(
            seller_id=seller_id,
            total_earnings=profile.total_earnings,
            current_balance=profile.current_balance,
            transactions=transactions,
        )
