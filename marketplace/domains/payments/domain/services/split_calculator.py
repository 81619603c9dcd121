"""
Split Calculator

Divides an order's money between its sellers and the platform.

Rounding policy, applied to every seller group:
    platform_amount = item_total * commission_rate / 100, rounded half-up to the cent
    seller_amount   = item_total - platform_amount
so seller_amount + platform_amount == item_total exactly.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from marketplace.core.domain import Money, Percentage
from marketplace.domains.orders.domain import OrderItem

from ..exceptions import EmptySettlementError


@dataclass(frozen=True)
class SellerSplit:
    """One seller's share of an order."""

    seller_id: UUID
    item_total: Money
    commission_rate: Percentage
    platform_amount: Money
    seller_amount: Money


class SplitCalculator:
    """
    Pure split computation; no I/O.

    A seller without an explicit commission rate (None) is charged
    `default_rate`.
    """

    def __init__(self, default_rate: Percentage | Decimal):
        self.default_rate = default_rate if isinstance(default_rate, Percentage) else Percentage(default_rate)

    def split(
        self,
        items: Iterable[OrderItem],
        commission_rates: Mapping[UUID, Decimal | Percentage | None],
        order_id: UUID | None = None,
    ) -> list[SellerSplit]:
        """
        Group items by seller and split each group's total.

        Returns splits ordered by seller id so row order is deterministic.

        Raises:
            EmptySettlementError: there are no items
            ValueError: a commission rate is outside 0..100
        """
        totals: dict[UUID, Money] = defaultdict(Money.zero)
        for item in items:
            totals[item.seller_id] = totals[item.seller_id].add(item.subtotal)

        if not totals:
            raise EmptySettlementError(order_id)

        return [
            self.split_group(seller_id, totals[seller_id], commission_rates.get(seller_id))
            for seller_id in sorted(totals, key=str)
        ]

    def split_group(
        self,
        seller_id: UUID,
        item_total: Money,
        commission_rate: Decimal | Percentage | None,
    ) -> SellerSplit:
        rate = self._resolve_rate(commission_rate)
        platform_amount = rate.apply_to(item_total)
        return SellerSplit(
            seller_id=seller_id,
            item_total=item_total,
            commission_rate=rate,
            platform_amount=platform_amount,
            seller_amount=item_total.subtract(platform_amount),
        )

    def _resolve_rate(self, rate: Decimal | Percentage | None) -> Percentage:
        if rate is None:
            return self.default_rate
        if isinstance(rate, Percentage):
            return rate
        return Percentage(rate)

    @staticmethod
    def platform_total(splits: Iterable[SellerSplit]) -> Money:
        return Money.total(s.platform_amount for s in splits)
