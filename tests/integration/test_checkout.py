"""
Integration tests for checkout (cart snapshot -> pending order).
"""

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from marketplace.core.domain import DomainEventPublisher, Money
from marketplace.domains.orders.application.use_cases import CheckoutRequest, CheckoutUseCase
from marketplace.domains.orders.domain import (
    CartLine,
    CheckoutPersistenceError,
    EmptyCartError,
    InvalidSellerReferenceError,
    OrderPlaced,
)
from marketplace.domains.orders.infrastructure.repositories import (
    SQLAlchemyAccountDirectory,
    SQLAlchemyCartRepository,
    SQLAlchemyOrderRepository,
)
from marketplace.models.db import CartItem, Order, OrderItem

pytestmark = pytest.mark.integration


ADDRESS = {"full_name": "Asha Rao", "address_line1": "12 MG Road", "city": "Pune"}


def checkout_request(buyer_id, lines=None) -> CheckoutRequest:
    return CheckoutRequest(
        user_id=buyer_id,
        shipping_address=ADDRESS,
        payment_method="Simulated Card",
        lines=lines,
    )


async def test_cart_is_materialized_into_order(container, seed):
    # Arrange
    seller_a = await seed.seller()
    seller_b = await seed.seller()
    buyer = uuid4()
    p1, p2 = uuid4(), uuid4()
    await seed.cart(buyer, [(p1, seller_a, 2, "50.00"), (p2, seller_b, 1, "30.00")])

    # Act
    order = await container.create_checkout_use_case().execute(checkout_request(buyer))

    # Assert
    assert order.total_amount.amount == Decimal("130.00")
    stored = await seed.get_order(order.id)
    assert stored.total_amount == Decimal("130.00")
    assert stored.payment_status == "pending"
    assert stored.order_status == "processing"
    assert await seed.count(OrderItem, order_id=order.id) == 2
    prices = {(i.product_id, i.price_at_purchase.amount, i.quantity) for i in order.items}
    assert prices == {(p1, Decimal("50.00"), 2), (p2, Decimal("30.00"), 1)}
    assert await seed.count(CartItem, user_id=buyer) == 0


async def test_explicit_lines_leave_stored_cart_alone(container, seed):
    seller = await seed.seller()
    buyer = uuid4()
    await seed.cart(buyer, [(uuid4(), seller, 3, "999.00")])

    order = await container.create_checkout_use_case().execute(
        checkout_request(buyer, lines=[CartLine(uuid4(), seller, 1, Money(Decimal("9.99")))])
    )

    assert order.total_amount.amount == Decimal("9.99")
    assert await seed.count(CartItem, user_id=buyer) == 1


async def test_empty_cart_is_rejected(container, seed):
    buyer = uuid4()

    with pytest.raises(EmptyCartError):
        await container.create_checkout_use_case().execute(checkout_request(buyer))

    assert await seed.count(Order, user_id=buyer) == 0


async def test_unknown_seller_is_rejected_and_nothing_written(container, seed):
    known = await seed.seller()
    unknown = uuid4()
    buyer = uuid4()
    await seed.cart(buyer, [(uuid4(), known, 1, "10.00"), (uuid4(), unknown, 1, "10.00")])

    with pytest.raises(InvalidSellerReferenceError) as exc_info:
        await container.create_checkout_use_case().execute(checkout_request(buyer))

    assert exc_info.value.seller_ids == [unknown]
    assert await seed.count(Order, user_id=buyer) == 0
    assert await seed.count(CartItem, user_id=buyer) == 2


async def test_storage_failure_rolls_back_order_and_cart(test_settings, session_factory, seed):
    # Arrange: the cart clear fails after the order and its items were flushed
    seller = await seed.seller()
    buyer = uuid4()
    await seed.cart(buyer, [(uuid4(), seller, 1, "10.00")])

    class FailingCartRepository(SQLAlchemyCartRepository):
        async def clear(self, user_id):
            raise OperationalError("DELETE FROM cart_items", {}, Exception("disk I/O error"))

    use_case = CheckoutUseCase(
        session_factory=session_factory,
        order_repository_factory=SQLAlchemyOrderRepository,
        cart_repository_factory=FailingCartRepository,
        account_directory_factory=SQLAlchemyAccountDirectory,
        settings=test_settings,
    )

    # Act
    with pytest.raises(CheckoutPersistenceError) as exc_info:
        await use_case.execute(checkout_request(buyer))

    # Assert
    assert exc_info.value.retryable is True
    assert await seed.count(Order, user_id=buyer) == 0
    assert await seed.count(OrderItem) == 0
    assert await seed.count(CartItem, user_id=buyer) == 1


async def test_order_placed_published_after_commit(container, seed):
    seller = await seed.seller()
    buyer = uuid4()
    await seed.cart(buyer, [(uuid4(), seller, 1, "10.00")])
    received = []

    async def handler(event):
        # The order must already be visible to other sessions
        received.append((event, await seed.get_order(event.order_id)))

    DomainEventPublisher.subscribe(OrderPlaced, handler)

    order = await container.create_checkout_use_case().execute(checkout_request(buyer))

    assert len(received) == 1
    event, stored = received[0]
    assert event.order_id == order.id
    assert stored is not None


async def test_connection_loss_is_retryable(test_settings, session_factory, seed):
    seller = await seed.seller()
    buyer = uuid4()
    await seed.cart(buyer, [(uuid4(), seller, 1, "10.00")])

    class UnreachableCartRepository(SQLAlchemyCartRepository):
        async def get_lines(self, user_id):
            raise ConnectionRefusedError("connection refused")

    use_case = CheckoutUseCase(
        session_factory=session_factory,
        order_repository_factory=SQLAlchemyOrderRepository,
        cart_repository_factory=UnreachableCartRepository,
        account_directory_factory=SQLAlchemyAccountDirectory,
        settings=test_settings,
    )

    with pytest.raises(CheckoutPersistenceError) as exc_info:
        await use_case.execute(checkout_request(buyer))

    assert exc_info.value.retryable is True
    assert await seed.count(Order, user_id=buyer) == 0
    assert await seed.count(CartItem, user_id=buyer) == 1
