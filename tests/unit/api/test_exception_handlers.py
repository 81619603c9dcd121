"""Domain exception to HTTP status mapping."""

from uuid import uuid4

import pytest

from marketplace.api.exception_handlers import status_code_for
from marketplace.core.domain import (
    AuthorizationException,
    ConfigurationException,
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    ValidationException,
)
from marketplace.domains.orders.domain import (
    CheckoutPersistenceError,
    EmptyCartError,
    InvalidSellerReferenceError,
    OrderNotFoundError,
)
from marketplace.domains.payments.domain import (
    AlreadySettledError,
    EmptySettlementError,
    PlatformAccountMissingError,
    SettlementPersistenceError,
    SettlementTimeoutError,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (ValidationException("bad"), 400),
        (EmptyCartError(uuid4()), 400),
        (InvalidSellerReferenceError([uuid4()]), 400),
        (EmptySettlementError(uuid4()), 422),
        (EntityNotFoundException("Order", uuid4()), 404),
        (OrderNotFoundError(uuid4()), 404),
        (AuthorizationException("cancel order"), 403),
        (InvalidOperationException("cancel", "shipped"), 409),
        (AlreadySettledError(uuid4()), 409),
        (ConfigurationException("missing"), 500),
        (SettlementPersistenceError(uuid4()), 503),
        (SettlementTimeoutError(uuid4(), 5.0), 503),
        (CheckoutPersistenceError(), 503),
    ],
)
def test_status_code_for(exc, expected):
    assert status_code_for(exc) == expected


def test_missing_platform_account_is_server_side():
    assert status_code_for(PlatformAccountMissingError(None)) >= 500


def test_unmapped_domain_exception_is_bad_request():
    assert status_code_for(DomainException("odd")) == 400
