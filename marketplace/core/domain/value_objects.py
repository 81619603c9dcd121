"""
Base Value Object Classes

Immutable money primitives. Amounts are Decimal held to the cent;
binary floats never reach arithmetic.
"""

from abc import ABC
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

CENT = Decimal("0.01")
DEFAULT_CURRENCY = "INR"


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert a numeric input to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal value: {value!r}") from e


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override `_validate` to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Non-negative amount in the marketplace currency, held to the cent.

    Sub-cent inputs are rejected; callers that derive shares round first
    (see `Percentage.apply_to`).

    Example:
        ```python
        price = Money(Decimal("99.99"))
        line_total = price.multiply(3)
        total = line_total.add(Money(Decimal("10.00")))
        ```
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def _validate(self) -> None:
        amount = to_decimal(self.amount)
        if not amount.is_finite():
            raise ValueError("Money amount must be finite")
        cents = amount.quantize(CENT, ROUND_HALF_UP)
        if cents != amount:
            raise ValueError(f"Money amount has fractions of a cent: {amount}")
        object.__setattr__(self, "amount", cents)
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        if not self.currency or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter ISO code")

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")

    def add(self, other: "Money") -> "Money":
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: "Money") -> "Money":
        self._check_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValueError("Result cannot be negative")
        return Money(amount=result, currency=self.currency)

    def multiply(self, quantity: int) -> "Money":
        """Exact multiplication by a whole quantity."""
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")
        return Money(amount=self.amount * quantity, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def total(cls, amounts: Iterable["Money"], currency: str = DEFAULT_CURRENCY) -> "Money":
        """Sum of several amounts (zero for an empty iterable)."""
        result = cls.zero(currency)
        for amount in amounts:
            result = result.add(amount)
        return result


@dataclass(frozen=True)
class Percentage(ValueObject):
    """
    Percentage with two decimal places, bounded to [min_value, max_value].
    """

    value: Decimal
    min_value: Decimal = Decimal("0")
    max_value: Decimal = Decimal("100")

    def _validate(self) -> None:
        value = to_decimal(self.value)
        if not value.is_finite():
            raise ValueError("Percentage must be finite")
        if value < self.min_value or value > self.max_value:
            raise ValueError(f"Percentage must be between {self.min_value} and {self.max_value}")
        object.__setattr__(self, "value", value.quantize(CENT, ROUND_HALF_UP))

    @property
    def as_decimal(self) -> Decimal:
        """Fraction form, e.g. 10.00 -> 0.1."""
        return self.value / Decimal("100")

    def apply_to(self, money: Money) -> Money:
        """Share of `money`, rounded half-up to the cent."""
        share = (money.amount * self.as_decimal).quantize(CENT, ROUND_HALF_UP)
        return Money(amount=share, currency=money.currency)

    def __str__(self) -> str:
        return f"{self.value}%"


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]
