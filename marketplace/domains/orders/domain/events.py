"""
Order domain events.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from marketplace.core.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    order_id: UUID
    user_id: UUID
    total_amount: Decimal
    seller_ids: tuple[UUID, ...] = field(default_factory=tuple)


@dataclass(frozen=True, kw_only=True)
class OrderStatusChanged(DomainEvent):
    order_id: UUID
    old_status: str
    new_status: str
    changed_by: UUID | None = None
