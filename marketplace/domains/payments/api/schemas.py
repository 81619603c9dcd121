"""
Payments API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from marketplace.domains.payments.application.use_cases import (
    DEFAULT_PAYMENT_METHOD,
    BalanceDiscrepancy,
    PlatformRevenue,
    ReconciliationReport,
    SellerEarnings,
    SettlementResult,
)
from marketplace.domains.payments.domain import (
    BankTransferPayout,
    LedgerTransaction,
    PayoutDetails,
    SellerProfile,
    SellerSplit,
    UpiPayout,
)

# ==================== Requests ====================


class SettleOrderRequest(BaseModel):
    payment_method: str = Field(default=DEFAULT_PAYMENT_METHOD, min_length=1, max_length=50)


class BankTransferPayoutSchema(BaseModel):
    kind: Literal["bank_transfer"] = "bank_transfer"
    account_holder_name: str = Field(..., min_length=1, max_length=200)
    bank_name: str = Field(..., min_length=1, max_length=200)
    account_number: str = Field(..., min_length=6, max_length=20)
    ifsc_code: str = Field(..., min_length=11, max_length=11)

    def to_domain(self) -> BankTransferPayout:
        return BankTransferPayout(
            account_holder_name=self.account_holder_name,
            bank_name=self.bank_name,
            account_number=self.account_number,
            ifsc_code=self.ifsc_code.upper(),
        )


class UpiPayoutSchema(BaseModel):
    kind: Literal["upi"] = "upi"
    upi_id: str = Field(..., min_length=3, max_length=320)

    def to_domain(self) -> UpiPayout:
        return UpiPayout(upi_id=self.upi_id)


PayoutDetailsSchema = Annotated[BankTransferPayoutSchema | UpiPayoutSchema, Field(discriminator="kind")]


class SellerProfileRequest(BaseModel):
    """Seller profile upsert schema; omitted fields are left unchanged."""

    store_name: str | None = Field(default=None, min_length=1, max_length=100)
    commission_rate: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=2)
    payout_details: PayoutDetailsSchema | None = None


# ==================== Responses ====================


def _payout_to_schema(payout: PayoutDetails | None) -> BankTransferPayoutSchema | UpiPayoutSchema | None:
    if payout is None:
        return None
    if isinstance(payout, UpiPayout):
        return UpiPayoutSchema(upi_id=payout.upi_id)
    return BankTransferPayoutSchema(
        account_holder_name=payout.account_holder_name,
        bank_name=payout.bank_name,
        account_number=payout.account_number,
        ifsc_code=payout.ifsc_code,
    )


class SellerSplitResponse(BaseModel):
    seller_id: UUID
    item_total: Decimal
    commission_rate: Decimal
    platform_amount: Decimal
    seller_amount: Decimal

    @classmethod
    def from_split(cls, split: SellerSplit) -> "SellerSplitResponse":
        return cls(
            seller_id=split.seller_id,
            item_total=split.item_total.amount,
            commission_rate=split.commission_rate.value,
            platform_amount=split.platform_amount.amount,
            seller_amount=split.seller_amount.amount,
        )


class SettlementResponse(BaseModel):
    """Settlement result schema."""

    order_id: UUID
    transaction_id: str
    payment_method: str
    total_amount: Decimal
    platform_total: Decimal
    splits: list[SellerSplitResponse]

    @classmethod
    def from_result(cls, result: SettlementResult) -> "SettlementResponse":
        return cls(
            order_id=result.order_id,
            transaction_id=result.transaction_ref,
            payment_method=result.payment_method,
            total_amount=result.total_amount.amount,
            platform_total=result.platform_total.amount,
            splits=[SellerSplitResponse.from_split(s) for s in result.splits],
        )


class SellerProfileResponse(BaseModel):
    id: UUID
    user_id: UUID
    store_name: str
    commission_rate: Decimal | None = None
    total_earnings: Decimal
    current_balance: Decimal
    verification_status: str
    payout_details: PayoutDetailsSchema | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, profile: SellerProfile) -> "SellerProfileResponse":
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            store_name=profile.store_name,
            commission_rate=profile.commission_rate.value if profile.commission_rate else None,
            total_earnings=profile.total_earnings.amount,
            current_balance=profile.current_balance.amount,
            verification_status=profile.verification_status,
            payout_details=_payout_to_schema(profile.payout_details),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class TransactionResponse(BaseModel):
    """Ledger row schema."""

    id: UUID
    order_id: UUID
    seller_id: UUID
    total_amount: Decimal
    seller_amount: Decimal
    platform_amount: Decimal
    commission_rate: Decimal
    status: str
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, transaction: LedgerTransaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            order_id=transaction.order_id,
            seller_id=transaction.seller_id,
            total_amount=transaction.total_amount.amount,
            seller_amount=transaction.seller_amount.amount,
            platform_amount=transaction.platform_amount.amount,
            commission_rate=transaction.commission_rate.value,
            status=transaction.status.value,
            created_at=transaction.created_at,
        )


class SellerEarningsResponse(BaseModel):
    total_earnings: Decimal
    current_balance: Decimal
    transactions: list[TransactionResponse]

    @classmethod
    def from_earnings(cls, earnings: SellerEarnings) -> "SellerEarningsResponse":
        return cls(
            total_earnings=earnings.total_earnings.amount,
            current_balance=earnings.current_balance.amount,
            transactions=[TransactionResponse.from_entity(t) for t in earnings.transactions],
        )


class PlatformRevenueResponse(BaseModel):
    """
    `total_revenue` is summed from the ledger, `running_total` is the admin
    aggregate. `consistent` is false when they disagree.
    """

    total_revenue: Decimal
    running_total: Decimal
    consistent: bool
    total_orders: int
    recent_transactions: list[TransactionResponse]

    @classmethod
    def from_revenue(cls, revenue: PlatformRevenue) -> "PlatformRevenueResponse":
        return cls(
            total_revenue=revenue.total.amount,
            running_total=revenue.running_total.amount,
            consistent=revenue.consistent,
            total_orders=revenue.total_orders,
            recent_transactions=[TransactionResponse.from_entity(t) for t in revenue.recent_transactions],
        )


class DiscrepancyResponse(BaseModel):
    account: str
    account_id: UUID | None = None
    balance: str
    recorded: Decimal
    expected: Decimal
    difference: Decimal

    @classmethod
    def from_discrepancy(cls, d: BalanceDiscrepancy) -> "DiscrepancyResponse":
        return cls(
            account=d.account,
            account_id=d.account_id,
            balance=d.balance,
            recorded=d.recorded,
            expected=d.expected,
            difference=d.difference,
        )


class ReconciliationResponse(BaseModel):
    balanced: bool
    checked_sellers: int
    ledger_platform_total: Decimal
    discrepancies: list[DiscrepancyResponse]

    @classmethod
    def from_report(cls, report: ReconciliationReport) -> "ReconciliationResponse":
        return cls(
            balanced=report.balanced,
            checked_sellers=report.checked_sellers,
            ledger_platform_total=report.ledger_platform_total,
            discrepancies=[DiscrepancyResponse.from_discrepancy(d) for d in report.discrepancies],
        )
