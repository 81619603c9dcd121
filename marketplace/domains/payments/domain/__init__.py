"""
Payments Domain Layer

Split computation, ledger entities, seller payout details and settlement errors.
"""

from .entities import LedgerTransaction, PlatformAccount, SellerProfile
from .events import OrderSettled
from .exceptions import (
    AlreadySettledError,
    EmptySettlementError,
    PlatformAccountMissingError,
    SettlementPersistenceError,
    SettlementTimeoutError,
)
from .services import SellerSplit, SplitCalculator
from .value_objects import BankTransferPayout, PayoutDetails, TransactionStatus, UpiPayout, parse_payout_details

__all__ = [
    "LedgerTransaction",
    "PlatformAccount",
    "SellerProfile",
    "OrderSettled",
    "AlreadySettledError",
    "EmptySettlementError",
    "PlatformAccountMissingError",
    "SettlementPersistenceError",
    "SettlementTimeoutError",
    "SellerSplit",
    "SplitCalculator",
    "BankTransferPayout",
    "UpiPayout",
    "PayoutDetails",
    "TransactionStatus",
    "parse_payout_details",
]
