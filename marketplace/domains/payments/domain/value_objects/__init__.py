"""Payments value objects."""

from .payout_details import BankTransferPayout, PayoutDetails, UpiPayout, parse_payout_details
from .transaction_status import TransactionStatus

__all__ = [
    "BankTransferPayout",
    "UpiPayout",
    "PayoutDetails",
    "parse_payout_details",
    "TransactionStatus",
]
