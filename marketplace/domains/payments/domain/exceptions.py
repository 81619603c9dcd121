"""
Settlement errors.

Input and state errors reach the caller unchanged; storage failures are
wrapped in SettlementPersistenceError, which is safe to retry because the
failed attempt left nothing behind.
"""

from typing import Any
from uuid import UUID

from marketplace.core.domain import (
    BusinessRuleViolationException,
    ConfigurationException,
    DomainException,
    PersistenceException,
)


class AlreadySettledError(DomainException):
    """The order's payment is already `paid`; settlement is refused."""

    def __init__(self, order_id: UUID, transaction_ref: str | None = None):
        self.order_id = order_id
        self.transaction_ref = transaction_ref
        details: dict[str, Any] = {"order_id": str(order_id)}
        if transaction_ref:
            details["transaction_ref"] = transaction_ref
        super().__init__(f"Order {order_id} is already paid", "ALREADY_SETTLED", details)


class EmptySettlementError(BusinessRuleViolationException):
    """The order has no items to settle."""

    def __init__(self, order_id: UUID | None = None):
        details: dict[str, Any] = {}
        if order_id is not None:
            details["order_id"] = str(order_id)
        super().__init__("order_has_items", "Order has no items to settle", details, code="EMPTY_SETTLEMENT")


class PlatformAccountMissingError(ConfigurationException):
    """No admin profile exists to receive platform revenue."""

    def __init__(self, admin_user_id: UUID | None = None):
        if admin_user_id is not None:
            message = f"Configured platform admin {admin_user_id} has no admin profile"
        else:
            message = "No admin profile exists to receive platform revenue"
        super().__init__(message, setting="PLATFORM_ADMIN_USER_ID")


class SettlementPersistenceError(PersistenceException):
    """The ledger store failed; the settlement was rolled back and may be retried."""

    def __init__(self, order_id: UUID, original_error: Exception | None = None, message: str | None = None):
        self.order_id = order_id
        super().__init__(
            "settle",
            message or f"Settlement of order {order_id} failed and was rolled back",
            original_error,
        )
        self.details["order_id"] = str(order_id)


class SettlementTimeoutError(SettlementPersistenceError):
    """The settlement did not commit in time and was rolled back."""

    def __init__(self, order_id: UUID, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            order_id,
            message=f"Settlement of order {order_id} exceeded {timeout_seconds}s and was rolled back",
        )
        self.details["timeout_seconds"] = timeout_seconds
