"""Payments repositories."""

from .ledger_repository import SQLAlchemyLedgerRepository
from .platform_account_repository import SQLAlchemyPlatformAccountRepository
from .seller_profile_repository import SQLAlchemySellerProfileRepository

__all__ = [
    "SQLAlchemyLedgerRepository",
    "SQLAlchemyPlatformAccountRepository",
    "SQLAlchemySellerProfileRepository",
]
