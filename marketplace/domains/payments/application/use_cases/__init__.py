"""
Payments Use Cases
"""

from .get_platform_revenue import GetPlatformRevenueUseCase, PlatformRevenue
from .get_seller_earnings import GetSellerEarningsUseCase, SellerEarnings
from .reconcile_ledger import BalanceDiscrepancy, ReconcileLedgerUseCase, ReconciliationReport
from .settle_order import DEFAULT_PAYMENT_METHOD, SettlementResult, SettleOrderUseCase
from .upsert_seller_profile import UpsertSellerProfileRequest, UpsertSellerProfileUseCase

__all__ = [
    "SettleOrderUseCase",
    "SettlementResult",
    "DEFAULT_PAYMENT_METHOD",
    "GetSellerEarningsUseCase",
    "SellerEarnings",
    "GetPlatformRevenueUseCase",
    "PlatformRevenue",
    "ReconcileLedgerUseCase",
    "ReconciliationReport",
    "BalanceDiscrepancy",
    "UpsertSellerProfileUseCase",
    "UpsertSellerProfileRequest",
]
