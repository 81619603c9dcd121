"""
Seller Profile Entity
"""

from dataclasses import dataclass, field
from uuid import UUID

from marketplace.core.domain import Entity, Money, Percentage, ValidationException

from ..value_objects import PayoutDetails


@dataclass(kw_only=True, eq=False)
class SellerProfile(Entity[UUID]):
    """
    Seller account as seen by the ledger.

    Balances are written only by settlement (as atomic increments), never
    through profile updates.
    """

    user_id: UUID
    store_name: str
    commission_rate: Percentage | None = None
    total_earnings: Money = field(default_factory=Money.zero)
    current_balance: Money = field(default_factory=Money.zero)
    verification_status: str = "pending"
    payout_details: PayoutDetails | None = None

    def update_details(
        self,
        store_name: str | None = None,
        commission_rate: Percentage | None = None,
        payout_details: PayoutDetails | None = None,
    ) -> None:
        """Change descriptive fields; omitted arguments are left as they are."""
        if store_name is not None:
            if not store_name.strip():
                raise ValidationException("Store name cannot be empty", field="store_name")
            self.store_name = store_name.strip()
        if commission_rate is not None:
            self.commission_rate = commission_rate
        if payout_details is not None:
            self.payout_details = payout_details
        self.touch()
