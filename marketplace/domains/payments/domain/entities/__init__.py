"""Payments entities."""

from .ledger_transaction import LedgerTransaction
from .platform_account import PlatformAccount
from .seller_profile import SellerProfile

__all__ = ["LedgerTransaction", "PlatformAccount", "SellerProfile"]
