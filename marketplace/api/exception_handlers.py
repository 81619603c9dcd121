"""
Exception handlers for the settlement API.

Every error body has the same shape: error, code, message, details,
retryable and status_code. Domain exceptions are mapped to HTTP status
codes by class; the most specific registered class in the MRO wins.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from marketplace.core.domain import (
    AuthorizationException,
    BusinessRuleViolationException,
    ConfigurationException,
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    PersistenceException,
    ValidationException,
)
from marketplace.domains.orders.domain import EmptyCartError, InvalidSellerReferenceError
from marketplace.domains.payments.domain import AlreadySettledError, EmptySettlementError

logger = logging.getLogger(__name__)

RETRY_AFTER_SECONDS = "1"

DOMAIN_STATUS_CODES: dict[type[DomainException], int] = {
    ValidationException: status.HTTP_400_BAD_REQUEST,
    EmptyCartError: status.HTTP_400_BAD_REQUEST,
    InvalidSellerReferenceError: status.HTTP_400_BAD_REQUEST,
    EmptySettlementError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    BusinessRuleViolationException: status.HTTP_422_UNPROCESSABLE_ENTITY,
    EntityNotFoundException: status.HTTP_404_NOT_FOUND,
    AuthorizationException: status.HTTP_403_FORBIDDEN,
    InvalidOperationException: status.HTTP_409_CONFLICT,
    AlreadySettledError: status.HTTP_409_CONFLICT,
    ConfigurationException: status.HTTP_500_INTERNAL_SERVER_ERROR,
    PersistenceException: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_code_for(exc: DomainException) -> int:
    """Resolve the HTTP status for a domain exception."""
    for klass in type(exc).__mro__:
        if klass in DOMAIN_STATUS_CODES:
            return DOMAIN_STATUS_CODES[klass]
    return status.HTTP_400_BAD_REQUEST


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a DomainException with its code and retryability."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = status_code_for(exc)
    headers = None
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        headers = {"Retry-After": RETRY_AFTER_SECONDS}

    if status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    body = exc.to_dict()
    body["error"] = True
    body["code"] = exc.code
    body["status_code"] = status_code
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content={
            "error": True,
            "message": http_exc.detail,
            "status_code": http_exc.status_code,
        },
        headers=http_exc.headers,
    )


def _format_errors(errors: list[dict]) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors with detailed error messages."""
    if not isinstance(exc, RequestValidationError | ValidationError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": True, "message": str(exc), "status_code": status.HTTP_422_UNPROCESSABLE_ENTITY},
        )

    errors = _format_errors(exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": True,
            "message": "Validation error",
            "details": errors,
            "status_code": status.HTTP_422_UNPROCESSABLE_ENTITY,
        },
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": True,
            "message": "Internal server error",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
