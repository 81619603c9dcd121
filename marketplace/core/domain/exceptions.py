"""
Domain Exceptions

Every failure a use case reports on purpose derives from DomainException.
The API layer maps each class to an HTTP status; nothing in here knows
about HTTP.
"""

from typing import Any


class DomainException(Exception):
    """
    Base of the hierarchy.

    `code` is the stable machine-readable name clients branch on;
    `retryable` says whether repeating the identical request can succeed.
    """

    retryable: bool = False

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "retryable": self.retryable,
        }


class ValidationException(DomainException):
    """Malformed input: a bad rate, address or payout detail."""

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """An order, seller profile or admin profile that does not exist."""

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class BusinessRuleViolationException(DomainException):
    """Well-formed input that the marketplace rules refuse (empty cart, empty order)."""

    def __init__(
        self,
        rule: str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        code: str = "BUSINESS_RULE_VIOLATION",
    ):
        self.rule = rule
        msg = message or f"Business rule violated: {rule}"
        details = details or {}
        details["rule"] = rule
        super().__init__(msg, code, details)


class InvalidOperationException(DomainException):
    """The operation conflicts with the current order state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class AuthorizationException(DomainException):
    """The caller is known but may not act on this resource."""

    def __init__(self, operation: str, resource: str | None = None, user_id: str | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        msg = f"Not authorized to perform '{operation}'"
        if resource:
            msg += f" on '{resource}'"
        super().__init__(
            msg,
            "AUTHORIZATION_ERROR",
            {
                "operation": operation,
                "resource": resource,
            },
        )


class ConfigurationException(DomainException):
    """Raised when required platform configuration or reference data is missing."""

    def __init__(self, message: str, setting: str | None = None):
        self.setting = setting
        details: dict[str, Any] = {}
        if setting:
            details["setting"] = setting
        super().__init__(message, "CONFIGURATION_ERROR", details)


class PersistenceException(DomainException):
    """
    Raised when the ledger store fails underneath a unit of work.

    The unit of work has been rolled back; the operation may be retried.
    """

    retryable = True

    def __init__(self, operation: str, message: str | None = None, original_error: Exception | None = None):
        self.operation = operation
        self.original_error = original_error
        details: dict[str, Any] = {"operation": operation}
        if original_error is not None:
            details["original_error"] = type(original_error).__name__
        super().__init__(message or f"Storage failure during '{operation}'", "PERSISTENCE_ERROR", details)
