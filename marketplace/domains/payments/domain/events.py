"""
Settlement domain events.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from marketplace.core.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderSettled(DomainEvent):
    order_id: UUID
    transaction_ref: str
    payment_method: str
    total_amount: Decimal
    platform_total: Decimal
    seller_amounts: dict[UUID, Decimal] = field(default_factory=dict)
