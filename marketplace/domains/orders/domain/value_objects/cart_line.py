"""
Cart Line Value Object

One line of the cart snapshot handed to checkout.
"""

from dataclasses import dataclass
from uuid import UUID

from marketplace.core.domain import Money, ValueObject


@dataclass(frozen=True)
class CartLine(ValueObject):
    """Product, seller, quantity and the unit price frozen when it was added to the cart."""

    product_id: UUID
    seller_id: UUID
    quantity: int
    unit_price: Money

    def _validate(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("Cart line quantity must be a positive integer")
        if not isinstance(self.unit_price, Money):
            object.__setattr__(self, "unit_price", Money(self.unit_price))

    @property
    def line_total(self) -> Money:
        return self.unit_price.multiply(self.quantity)
