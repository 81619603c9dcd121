"""
Order domain errors.
"""

from collections.abc import Iterable
from typing import Any
from uuid import UUID

from marketplace.core.domain import (
    BusinessRuleViolationException,
    DomainException,
    EntityNotFoundException,
    PersistenceException,
)


class EmptyCartError(BusinessRuleViolationException):
    """Checkout was attempted with no cart lines."""

    def __init__(self, user_id: UUID | None = None):
        details: dict[str, Any] = {}
        if user_id is not None:
            details["user_id"] = str(user_id)
        super().__init__("non_empty_cart", "Cart is empty", details, code="EMPTY_CART")


class InvalidSellerReferenceError(DomainException):
    """An order line or ledger write references a seller without a profile."""

    def __init__(self, seller_ids: Iterable[UUID]):
        self.seller_ids = sorted(seller_ids, key=str)
        ids = ", ".join(str(s) for s in self.seller_ids)
        super().__init__(
            f"Unknown seller reference(s): {ids}",
            "INVALID_SELLER_REFERENCE",
            {"seller_ids": [str(s) for s in self.seller_ids]},
        )


class OrderNotFoundError(EntityNotFoundException):
    def __init__(self, order_id: Any):
        super().__init__("Order", order_id)


class CheckoutPersistenceError(PersistenceException):
    """Storage failed during checkout; nothing was written."""

    def __init__(self, original_error: Exception | None = None):
        super().__init__("checkout", "Checkout could not be stored; no order was created", original_error)
