"""
Ledger Transaction Entity
"""

from dataclasses import dataclass
from uuid import UUID

from marketplace.core.domain import Entity, Money, Percentage

from ..services.split_calculator import SellerSplit
from ..value_objects import TransactionStatus


@dataclass(kw_only=True, eq=False)
class LedgerTransaction(Entity[UUID]):
    """
    Settled share of one seller in one order.

    Invariant: seller_amount + platform_amount == total_amount.
    """

    order_id: UUID
    seller_id: UUID
    total_amount: Money
    seller_amount: Money
    platform_amount: Money
    commission_rate: Percentage
    status: TransactionStatus = TransactionStatus.COMPLETED

    @classmethod
    def from_split(cls, order_id: UUID, split: SellerSplit) -> "LedgerTransaction":
        return cls(
            order_id=order_id,
            seller_id=split.seller_id,
            total_amount=split.item_total,
            seller_amount=split.seller_amount,
            platform_amount=split.platform_amount,
            commission_rate=split.commission_rate,
        )
