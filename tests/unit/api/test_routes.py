"""
HTTP layer tests.

Use cases are replaced through FastAPI dependency overrides, so these tests
cover routing, request parsing, identity and error mapping only.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from marketplace.api.dependencies import get_dependency_container
from marketplace.core.app_factory import create_app
from marketplace.core.domain import Money, Percentage
from marketplace.domains.orders.api.dependencies import get_checkout_use_case
from marketplace.domains.orders.domain import CartLine, EmptyCartError, Order
from marketplace.domains.payments.api.dependencies import (
    get_platform_revenue_use_case,
    get_settle_order_use_case,
)
from marketplace.domains.payments.application.use_cases import PlatformRevenue, SettlementResult
from marketplace.domains.payments.domain import AlreadySettledError, SellerSplit, SettlementPersistenceError

pytestmark = pytest.mark.unit

API = "/api/v1"
ADDRESS = {
    "full_name": "Asha Rao",
    "address_line1": "12 MG Road",
    "city": "Pune",
    "state": "Maharashtra",
    "postal_code": "411001",
}


@pytest.fixture
def app(test_settings):
    application = create_app(test_settings)
    application.dependency_overrides[get_dependency_container] = MagicMock
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    # No context manager: the lifespan (and its database setup) is not run
    return TestClient(app)


@pytest.fixture
def caller():
    return uuid4()


@pytest.fixture
def headers(caller):
    return {"X-User-Id": str(caller)}


def override(app, dependency, use_case):
    app.dependency_overrides[dependency] = lambda: use_case
    return use_case


def settlement_result(order_id, payment_method="Simulated Card") -> SettlementResult:
    split = SellerSplit(
        seller_id=uuid4(),
        item_total=Money(Decimal("100.00")),
        commission_rate=Percentage(Decimal("10")),
        platform_amount=Money(Decimal("10.00")),
        seller_amount=Money(Decimal("90.00")),
    )
    return SettlementResult(
        order_id=order_id,
        transaction_ref="SIM_TX_1_abc",
        payment_method=payment_method,
        total_amount=Money(Decimal("100.00")),
        platform_total=Money(Decimal("10.00")),
        splits=[split],
    )


# ============================================================================
# IDENTITY
# ============================================================================


def test_missing_identity_is_unauthorized(client):
    response = client.get(f"{API}/orders/my-orders")

    assert response.status_code == 401
    assert response.json()["error"] is True


def test_malformed_identity_is_unauthorized(client):
    response = client.get(f"{API}/payments/seller-earnings", headers={"X-User-Id": "not-a-uuid"})

    assert response.status_code == 401


def test_non_admin_cannot_read_revenue(app, client, headers):
    container = MagicMock()
    container.is_admin = AsyncMock(return_value=False)
    app.dependency_overrides[get_dependency_container] = lambda: container
    use_case = override(app, get_platform_revenue_use_case, AsyncMock())

    response = client.get(f"{API}/payments/admin-revenue", headers=headers)

    assert response.status_code == 403
    use_case.execute.assert_not_awaited()


def test_admin_reads_revenue(app, client, headers):
    container = MagicMock()
    container.is_admin = AsyncMock(return_value=True)
    app.dependency_overrides[get_dependency_container] = lambda: container
    use_case = override(app, get_platform_revenue_use_case, AsyncMock())
    use_case.execute.return_value = PlatformRevenue(
        total=Money(Decimal("30.00")), running_total=Money(Decimal("30.00")), total_orders=2
    )

    response = client.get(f"{API}/payments/admin-revenue", headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["total_revenue"]) == Decimal("30.00")
    assert body["consistent"] is True
    assert body["total_orders"] == 2


# ============================================================================
# CHECKOUT
# ============================================================================


def test_checkout_creates_order(app, client, headers, caller):
    line = CartLine(product_id=uuid4(), seller_id=uuid4(), quantity=2, unit_price=Money(Decimal("25.00")))
    use_case = override(app, get_checkout_use_case, AsyncMock())
    use_case.execute.return_value = Order.place(caller, [line], ADDRESS)

    response = client.post(f"{API}/orders/checkout", json={"shipping_address": ADDRESS}, headers=headers)

    assert response.status_code == 201
    body = response.json()
    assert Decimal(body["total_amount"]) == Decimal("50.00")
    assert body["payment_status"] == "pending"
    request = use_case.execute.await_args.args[0]
    assert request.user_id == caller
    assert request.lines is None


def test_checkout_ignores_client_supplied_lines(app, client, headers, caller):
    line = CartLine(product_id=uuid4(), seller_id=uuid4(), quantity=3, unit_price=Money(Decimal("999.00")))
    use_case = override(app, get_checkout_use_case, AsyncMock())
    use_case.execute.return_value = Order.place(caller, [line], ADDRESS)
    body = {
        "shipping_address": ADDRESS,
        "items": [{"product_id": str(uuid4()), "seller_id": str(uuid4()), "quantity": 1, "unit_price": "0.01"}],
    }

    response = client.post(f"{API}/orders/checkout", json=body, headers=headers)

    assert response.status_code == 201
    assert use_case.execute.await_args.args[0].lines is None
    assert Decimal(response.json()["total_amount"]) == Decimal("2997.00")


def test_checkout_requires_shipping_address(app, client, headers):
    use_case = override(app, get_checkout_use_case, AsyncMock())

    response = client.post(f"{API}/orders/checkout", json={}, headers=headers)

    assert response.status_code == 422
    use_case.execute.assert_not_awaited()


def test_empty_cart_is_bad_request(app, client, headers, caller):
    use_case = override(app, get_checkout_use_case, AsyncMock())
    use_case.execute.side_effect = EmptyCartError(caller)

    response = client.post(f"{API}/orders/checkout", json={"shipping_address": ADDRESS}, headers=headers)

    assert response.status_code == 400


# ============================================================================
# SETTLEMENT
# ============================================================================


def test_settle_without_body_uses_default_method(app, client, headers):
    order_id = uuid4()
    use_case = override(app, get_settle_order_use_case, AsyncMock())
    use_case.execute.return_value = settlement_result(order_id)

    response = client.post(f"{API}/payments/checkout/{order_id}", headers=headers)

    assert response.status_code == 200
    use_case.execute.assert_awaited_once_with(order_id, "Simulated Card")
    body = response.json()
    assert body["transaction_id"] == "SIM_TX_1_abc"
    assert Decimal(body["splits"][0]["seller_amount"]) == Decimal("90.00")


def test_settle_with_payment_method(app, client, headers):
    order_id = uuid4()
    use_case = override(app, get_settle_order_use_case, AsyncMock())
    use_case.execute.return_value = settlement_result(order_id, "UPI")

    response = client.post(f"{API}/payments/checkout/{order_id}", json={"payment_method": "UPI"}, headers=headers)

    assert response.status_code == 200
    use_case.execute.assert_awaited_once_with(order_id, "UPI")


def test_already_settled_is_conflict(app, client, headers):
    order_id = uuid4()
    use_case = override(app, get_settle_order_use_case, AsyncMock())
    use_case.execute.side_effect = AlreadySettledError(order_id, "SIM_TX_1_abc")

    response = client.post(f"{API}/payments/checkout/{order_id}", headers=headers)

    assert response.status_code == 409
    body = response.json()
    assert body["code"] == "ALREADY_SETTLED"
    assert body["retryable"] is False
    assert "Retry-After" not in response.headers


def test_storage_failure_is_retryable(app, client, headers):
    order_id = uuid4()
    use_case = override(app, get_settle_order_use_case, AsyncMock())
    use_case.execute.side_effect = SettlementPersistenceError(order_id)

    response = client.post(f"{API}/payments/checkout/{order_id}", headers=headers)

    assert response.status_code == 503
    assert response.headers["Retry-After"] == "1"
    assert response.json()["retryable"] is True


def test_settle_rejects_bad_order_id(app, client, headers):
    override(app, get_settle_order_use_case, AsyncMock())

    response = client.post(f"{API}/payments/checkout/not-a-uuid", headers=headers)

    assert response.status_code == 422


# ============================================================================
# PLUMBING
# ============================================================================


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
