"""
Orders API Routes

FastAPI router for checkout and order endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from marketplace.api.dependencies import get_current_user_id
from marketplace.domains.orders.api.dependencies import (
    get_cancel_order_use_case,
    get_checkout_use_case,
    get_order_details_use_case,
    get_seller_orders_use_case,
    get_update_order_status_use_case,
    get_user_orders_use_case,
)
from marketplace.domains.orders.api.schemas import (
    CheckoutRequestBody,
    OrderResponse,
    SellerOrderResponse,
    UpdateOrderStatusBody,
)
from marketplace.domains.orders.application.use_cases import (
    CancelOrderUseCase,
    CheckoutRequest,
    CheckoutUseCase,
    GetOrderDetailsUseCase,
    GetSellerOrdersUseCase,
    GetUserOrdersUseCase,
    UpdateOrderStatusRequest,
    UpdateOrderStatusUseCase,
)

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("/checkout", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def checkout(
    body: CheckoutRequestBody,
    user_id: UUID = Depends(get_current_user_id),
    use_case: CheckoutUseCase = Depends(get_checkout_use_case),
):
    """Turn the caller's cart into a pending order."""
    order = await use_case.execute(
        CheckoutRequest(
            user_id=user_id,
            shipping_address=body.shipping_address.model_dump(),
            billing_address=body.billing_address.model_dump() if body.billing_address else None,
            payment_method=body.payment_method,
        )
    )
    return OrderResponse.from_entity(order)


@router.get("/my-orders", response_model=list[OrderResponse])
async def get_my_orders(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user_id: UUID = Depends(get_current_user_id),
    use_case: GetUserOrdersUseCase = Depends(get_user_orders_use_case),
):
    """Caller's orders, newest first."""
    orders = await use_case.execute(user_id, limit=limit, offset=offset)
    return [OrderResponse.from_entity(order) for order in orders]


@router.get("/seller/orders", response_model=list[SellerOrderResponse])
async def get_seller_orders(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user_id: UUID = Depends(get_current_user_id),
    use_case: GetSellerOrdersUseCase = Depends(get_seller_orders_use_case),
):
    """Orders containing the calling seller's products."""
    views = await use_case.execute(user_id, limit=limit, offset=offset)
    return [SellerOrderResponse.from_view(view) for view in views]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    use_case: GetOrderDetailsUseCase = Depends(get_order_details_use_case),
):
    order = await use_case.execute(order_id, user_id)
    return OrderResponse.from_entity(order)


@router.post("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(
    order_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    use_case: CancelOrderUseCase = Depends(get_cancel_order_use_case),
):
    """Cancel an unpaid order that has not shipped."""
    order = await use_case.execute(order_id, user_id)
    return OrderResponse.from_entity(order)


@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: UUID,
    body: UpdateOrderStatusBody,
    user_id: UUID = Depends(get_current_user_id),
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
):
    """Fulfillment transition by a seller of the order or an admin."""
    order = await use_case.execute(UpdateOrderStatusRequest(order_id=order_id, new_status=body.status, actor_id=user_id))
    return OrderResponse.from_entity(order)


__all__ = ["router"]
