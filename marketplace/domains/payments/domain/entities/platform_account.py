"""
Platform Account Entity
"""

from dataclasses import dataclass, field
from uuid import UUID

from marketplace.core.domain import Entity, Money


@dataclass(kw_only=True, eq=False)
class PlatformAccount(Entity[UUID]):
    """Admin profile that accumulates the platform's commission revenue."""

    user_id: UUID
    department: str | None = None
    total_revenue: Money = field(default_factory=Money.zero)
