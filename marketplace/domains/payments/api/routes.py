"""
Payments API Routes

Settlement, seller profile and revenue endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import get_current_user_id, require_admin
from marketplace.domains.payments.api.dependencies import (
    get_platform_revenue_use_case,
    get_reconcile_ledger_use_case,
    get_seller_earnings_use_case,
    get_settle_order_use_case,
    get_upsert_seller_profile_use_case,
)
from marketplace.domains.payments.api.schemas import (
    PlatformRevenueResponse,
    ReconciliationResponse,
    SellerEarningsResponse,
    SellerProfileRequest,
    SellerProfileResponse,
    SettlementResponse,
    SettleOrderRequest,
)
from marketplace.domains.payments.application.use_cases import (
    DEFAULT_PAYMENT_METHOD,
    GetPlatformRevenueUseCase,
    GetSellerEarningsUseCase,
    ReconcileLedgerUseCase,
    SettleOrderUseCase,
    UpsertSellerProfileRequest,
    UpsertSellerProfileUseCase,
)

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.post("/checkout/{order_id}", response_model=SettlementResponse)
async def settle_order(
    order_id: UUID,
    body: SettleOrderRequest | None = None,
    _user_id: UUID = Depends(get_current_user_id),
    use_case: SettleOrderUseCase = Depends(get_settle_order_use_case),
):
    """Simulated payment: mark the order paid and split the revenue."""
    payment_method = body.payment_method if body else DEFAULT_PAYMENT_METHOD
    result = await use_case.execute(order_id, payment_method)
    return SettlementResponse.from_result(result)


@router.put("/seller-profile", response_model=SellerProfileResponse)
async def upsert_seller_profile(
    body: SellerProfileRequest,
    user_id: UUID = Depends(get_current_user_id),
    use_case: UpsertSellerProfileUseCase = Depends(get_upsert_seller_profile_use_case),
):
    """Create or update the caller's seller profile."""
    profile = await use_case.execute(
        UpsertSellerProfileRequest(
            user_id=user_id,
            store_name=body.store_name,
            commission_rate=body.commission_rate,
            payout_details=body.payout_details.to_domain() if body.payout_details else None,
        )
    )
    return SellerProfileResponse.from_entity(profile)


@router.get("/seller-earnings", response_model=SellerEarningsResponse)
async def get_seller_earnings(
    user_id: UUID = Depends(get_current_user_id),
    use_case: GetSellerEarningsUseCase = Depends(get_seller_earnings_use_case),
):
    earnings = await use_case.execute(user_id)
    return SellerEarningsResponse.from_earnings(earnings)


@router.get("/admin-revenue", response_model=PlatformRevenueResponse)
async def get_admin_revenue(
    _admin_id: UUID = Depends(require_admin),
    use_case: GetPlatformRevenueUseCase = Depends(get_platform_revenue_use_case),
):
    """Platform commission revenue (admin only)."""
    revenue = await use_case.execute()
    return PlatformRevenueResponse.from_revenue(revenue)


@router.get("/reconciliation", response_model=ReconciliationResponse)
async def get_reconciliation(
    _admin_id: UUID = Depends(require_admin),
    use_case: ReconcileLedgerUseCase = Depends(get_reconcile_ledger_use_case),
):
    """Compare running balances with the ledger (admin only)."""
    report = await use_case.execute()
    return ReconciliationResponse.from_report(report)


__all__ = ["router"]
