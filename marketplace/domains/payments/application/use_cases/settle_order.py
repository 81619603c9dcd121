"""
Settle Order Use Case

Turns one pending order into paid and records where every unit of money went.
"""

import asyncio
import time
import uuid
from dataclasses import dataclass, field
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.config.settings import Settings
from marketplace.core.domain import DomainEventPublisher, DomainException, InvalidOperationException, Money
from marketplace.core.shared import ContextLogger, get_service_logger
from marketplace.domains.orders.application.ports import IOrderRepository, OrderRepositoryFactory
from marketplace.domains.orders.domain import InvalidSellerReferenceError, OrderNotFoundError, OrderStatus, PaymentStatus
from marketplace.domains.payments.application.ports import (
    LedgerRepositoryFactory,
    PlatformAccountRepositoryFactory,
    SellerProfileRepositoryFactory,
)
from marketplace.domains.payments.domain import (
    AlreadySettledError,
    EmptySettlementError,
    LedgerTransaction,
    OrderSettled,
    PlatformAccountMissingError,
    SellerSplit,
    SettlementPersistenceError,
    SettlementTimeoutError,
    SplitCalculator,
)

DEFAULT_PAYMENT_METHOD = "Simulated Card"


@dataclass
class SettlementResult:
    order_id: UUID
    transaction_ref: str
    payment_method: str
    total_amount: Money
    platform_total: Money
    splits: list[SellerSplit] = field(default_factory=list)


class SettleOrderUseCase:
    """
    Use Case: Settle Order

    One unit of work, bounded by SETTLEMENT_TIMEOUT_SECONDS:

    1. Claim the order: `UPDATE ... SET payment_status='paid' WHERE
       payment_status='pending' AND order_status<>'cancelled'`. The row lock
       taken here serialises concurrent attempts; the loser sees `paid` once
       the winner commits and fails with AlreadySettledError.
    2. Group the order's items by seller and split each group.
    3. Write one completed ledger row per seller and increment each
       seller's balances.
    4. Credit the platform total to the platform account.

    Any failure rolls the whole attempt back, leaving the order pending.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        order_repository_factory: OrderRepositoryFactory,
        seller_profile_repository_factory: SellerProfileRepositoryFactory,
        platform_account_repository_factory: PlatformAccountRepositoryFactory,
        ledger_repository_factory: LedgerRepositoryFactory,
        settings: Settings,
    ):
        self._session_factory = session_factory
        self._order_repository_factory = order_repository_factory
        self._seller_profile_repository_factory = seller_profile_repository_factory
        self._platform_account_repository_factory = platform_account_repository_factory
        self._ledger_repository_factory = ledger_repository_factory
        self._settings = settings
        self._calculator = SplitCalculator(settings.DEFAULT_COMMISSION_RATE)
        self._logger = get_service_logger("settlement")

    async def execute(self, order_id: UUID, payment_method: str = DEFAULT_PAYMENT_METHOD) -> SettlementResult:
        """
        Settle an order.

        Raises:
            OrderNotFoundError: no such order
            AlreadySettledError: the order is already paid
            InvalidOperationException: the order is cancelled or its payment failed/was refunded
            EmptySettlementError: the order has no items
            InvalidSellerReferenceError: an item's seller has no profile
            PlatformAccountMissingError: no admin profile to credit
            SettlementTimeoutError: the unit of work did not finish in time (retryable)
            SettlementPersistenceError: storage failure (retryable)
        """
        transaction_ref = self._mint_reference()
        log = self._logger.with_context(order_id=str(order_id), transaction_ref=transaction_ref)
        timeout = self._settings.SETTLEMENT_TIMEOUT_SECONDS

        try:
            async with asyncio.timeout(timeout):
                result = await self._settle(order_id, payment_method, transaction_ref, log)
        except DomainException as e:
            log.warning(f"Settlement rejected: {e.message}", error=e.code)
            raise
        except TimeoutError as e:
            log.error(f"Settlement exceeded {timeout}s, rolled back", exc_info=True)
            raise SettlementTimeoutError(order_id, timeout) from e
        except (SQLAlchemyError, OSError) as e:
            log.error(f"Settlement failed, rolled back: {e}", exc_info=True)
            raise SettlementPersistenceError(order_id, e) from e

        log.info(
            "Order settled",
            sellers=len(result.splits),
            total_amount=str(result.total_amount.amount),
            platform_total=str(result.platform_total.amount),
        )
        await DomainEventPublisher.publish(
            OrderSettled(
                order_id=order_id,
                transaction_ref=transaction_ref,
                payment_method=payment_method,
                total_amount=result.total_amount.amount,
                platform_total=result.platform_total.amount,
                seller_amounts={s.seller_id: s.seller_amount.amount for s in result.splits},
            )
        )
        return result

    async def _settle(
        self,
        order_id: UUID,
        payment_method: str,
        transaction_ref: str,
        log: ContextLogger,
    ) -> SettlementResult:
        async with self._session_factory() as session, session.begin():
            orders = self._order_repository_factory(session)
            sellers = self._seller_profile_repository_factory(session)
            platform = self._platform_account_repository_factory(session)
            ledger = self._ledger_repository_factory(session)

            if not await orders.claim_for_settlement(order_id, payment_method, transaction_ref):
                await self._raise_rejection(orders, order_id)

            items = await orders.get_items(order_id)
            if not items:
                raise EmptySettlementError(order_id)

            seller_ids = {item.seller_id for item in items}
            rates = await sellers.get_commission_rates(seller_ids)
            unknown = seller_ids - rates.keys()
            if unknown:
                raise InvalidSellerReferenceError(unknown)

            splits = self._calculator.split(items, rates, order_id=order_id)
            log.debug("Computed splits", splits=[(str(s.seller_id), str(s.seller_amount.amount)) for s in splits])

            await ledger.add_all([LedgerTransaction.from_split(order_id, split) for split in splits])
            for split in splits:
                if not await sellers.credit_earnings(split.seller_id, split.seller_amount.amount):
                    raise InvalidSellerReferenceError([split.seller_id])

            platform_total = SplitCalculator.platform_total(splits)
            account = await platform.get_platform_account(self._settings.PLATFORM_ADMIN_USER_ID)
            if account is None or not await platform.credit_revenue(account.id, platform_total.amount):
                raise PlatformAccountMissingError(self._settings.PLATFORM_ADMIN_USER_ID)

        return SettlementResult(
            order_id=order_id,
            transaction_ref=transaction_ref,
            payment_method=payment_method,
            total_amount=Money.total(s.item_total for s in splits),
            platform_total=platform_total,
            splits=splits,
        )

    async def _raise_rejection(self, orders: IOrderRepository, order_id: UUID) -> None:
        """Explain why the claim matched no row."""
        order = await orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        if order.payment_status is PaymentStatus.PAID:
            raise AlreadySettledError(order_id, order.transaction_id)
        if order.order_status is OrderStatus.CANCELLED:
            raise InvalidOperationException("settle", OrderStatus.CANCELLED.value)
        raise InvalidOperationException("settle", f"payment {order.payment_status.value}")

    def _mint_reference(self) -> str:
        return f"{self._settings.SETTLEMENT_REFERENCE_PREFIX}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:12]}"
