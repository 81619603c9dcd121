"""
Payments Application Ports

Interface definitions (ports) for the payments context.
Balance changes are expressed as increments applied by the database
(`SET x = x + :delta`), never as read-then-overwrite.
"""

from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Protocol, runtime_checkable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domains.payments.domain import LedgerTransaction, PlatformAccount, SellerProfile


@runtime_checkable
class ISellerProfileRepository(Protocol):
    async def get_by_user_id(self, user_id: UUID) -> SellerProfile | None:
        """Get seller profile by the seller's user id"""
        ...

    async def list_all(self) -> list[SellerProfile]:
        """Every seller profile"""
        ...

    async def get_commission_rates(self, seller_ids: Iterable[UUID]) -> dict[UUID, Decimal | None]:
        """Current commission rate per seller (None = platform default); unknown sellers are absent"""
        ...

    async def credit_earnings(self, seller_id: UUID, amount: Decimal) -> bool:
        """Atomically add `amount` to total_earnings and current_balance"""
        ...

    async def save(self, profile: SellerProfile) -> SellerProfile:
        """Insert or update descriptive fields (never balances)"""
        ...


@runtime_checkable
class IPlatformAccountRepository(Protocol):
    async def get_platform_account(self, admin_user_id: UUID | None = None) -> PlatformAccount | None:
        """The configured admin profile, or the earliest one when not configured"""
        ...

    async def credit_revenue(self, account_id: UUID, amount: Decimal) -> bool:
        """Atomically add `amount` to total_revenue"""
        ...

    async def total_revenue(self) -> Decimal:
        """Sum of total_revenue across every admin profile"""
        ...

    async def create(self, user_id: UUID, department: str | None = None) -> PlatformAccount:
        """Create an admin profile"""
        ...


@runtime_checkable
class ILedgerRepository(Protocol):
    async def add_all(self, transactions: list[LedgerTransaction]) -> None:
        """Stage settlement rows"""
        ...

    async def list_by_seller(self, seller_id: UUID) -> list[LedgerTransaction]:
        """Seller's transactions, newest first"""
        ...

    async def list_recent(self, limit: int = 10) -> list[LedgerTransaction]:
        """Latest transactions across all sellers"""
        ...

    async def total_platform_amount(self) -> Decimal:
        """Sum of platform_amount over completed transactions"""
        ...

    async def seller_amount_totals(self) -> dict[UUID, Decimal]:
        """Sum of seller_amount over completed transactions, per seller"""
        ...

    async def count_settled_orders(self) -> int:
        """Number of distinct orders with completed transactions"""
        ...


SellerProfileRepositoryFactory = Callable[[AsyncSession], ISellerProfileRepository]
PlatformAccountRepositoryFactory = Callable[[AsyncSession], IPlatformAccountRepository]
LedgerRepositoryFactory = Callable[[AsyncSession], ILedgerRepository]


__all__ = [
    "ISellerProfileRepository",
    "IPlatformAccountRepository",
    "ILedgerRepository",
    "SellerProfileRepositoryFactory",
    "PlatformAccountRepositoryFactory",
    "LedgerRepositoryFactory",
]
