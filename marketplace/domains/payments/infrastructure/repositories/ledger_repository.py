"""
Ledger Repository Implementation

Settlement transaction rows: written once, read by the reporting use cases.
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain import Money, Percentage, generate_uuid
from marketplace.domains.payments.application.ports import ILedgerRepository
from marketplace.domains.payments.domain import LedgerTransaction, TransactionStatus
from marketplace.models.db.ledger import Transaction as TransactionModel

_COMPLETED = TransactionStatus.COMPLETED.value


class SQLAlchemyLedgerRepository(ILedgerRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_all(self, transactions: list[LedgerTransaction]) -> None:
        self.session.add_all([self._to_model(t) for t in transactions])
        await self.session.flush()

    async def list_by_seller(self, seller_id: UUID) -> list[LedgerTransaction]:
        result = await self.session.execute(
            select(TransactionModel)
            .where(TransactionModel.seller_id == seller_id)
            .order_by(TransactionModel.created_at.desc(), TransactionModel.id)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_recent(self, limit: int = 10) -> list[LedgerTransaction]:
        result = await self.session.execute(
            select(TransactionModel).order_by(TransactionModel.created_at.desc(), TransactionModel.id).limit(limit)
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def total_platform_amount(self) -> Decimal:
        result = await self.session.execute(
            select(func.coalesce(func.sum(TransactionModel.platform_amount), 0)).where(
                TransactionModel.status == _COMPLETED
            )
        )
        return Money(result.scalar_one()).amount

    async def seller_amount_totals(self) -> dict[UUID, Decimal]:
        result = await self.session.execute(
            select(TransactionModel.seller_id, func.sum(TransactionModel.seller_amount))
            .where(TransactionModel.status == _COMPLETED)
            .group_by(TransactionModel.seller_id)
        )
        return {seller_id: Money(total).amount for seller_id, total in result.all()}

    async def count_settled_orders(self) -> int:
        result = await self.session.execute(
            select(func.count(func.distinct(TransactionModel.order_id))).where(TransactionModel.status == _COMPLETED)
        )
        return int(result.scalar_one())

    def _to_model(self, transaction: LedgerTransaction) -> TransactionModel:
        return TransactionModel(
            id=transaction.id or generate_uuid(),
            order_id=transaction.order_id,
            seller_id=transaction.seller_id,
            total_amount=transaction.total_amount.amount,
            seller_amount=transaction.seller_amount.amount,
            platform_amount=transaction.platform_amount.amount,
            commission_rate=transaction.commission_rate.value,
            status=transaction.status.value,
            created_at=transaction.created_at,
        )

    def _to_entity(self, model: TransactionModel) -> LedgerTransaction:
        return LedgerTransaction(
            id=model.id,
            order_id=model.order_id,
            seller_id=model.seller_id,
            total_amount=Money(model.total_amount),
            seller_amount=Money(model.seller_amount),
            platform_amount=Money(model.platform_amount),
            commission_rate=Percentage(model.commission_rate),
            status=TransactionStatus(model.status),
            created_at=model.created_at,
            updated_at=model.created_at,
        )
