"""
Platform Account Repository Implementation

Admin profiles double as the platform revenue aggregate.
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain import Money, generate_uuid
from marketplace.domains.payments.application.ports import IPlatformAccountRepository
from marketplace.domains.payments.domain import PlatformAccount
from marketplace.models.db.profiles import AdminProfile as AdminProfileModel


class SQLAlchemyPlatformAccountRepository(IPlatformAccountRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_platform_account(self, admin_user_id: UUID | None = None) -> PlatformAccount | None:
        stmt = select(AdminProfileModel)
        if admin_user_id is not None:
            stmt = stmt.where(AdminProfileModel.user_id == admin_user_id)
        else:
            stmt = stmt.order_by(AdminProfileModel.created_at, AdminProfileModel.id).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def credit_revenue(self, account_id: UUID, amount: Decimal) -> bool:
        result = await self.session.execute(
            update(AdminProfileModel)
            .where(AdminProfileModel.id == account_id)
            .values(
                total_revenue=AdminProfileModel.total_revenue + amount,
                updated_at=datetime.now(UTC),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def total_revenue(self) -> Decimal:
        # Revenue credited to an admin stays counted after PLATFORM_ADMIN_USER_ID moves on
        result = await self.session.execute(select(func.coalesce(func.sum(AdminProfileModel.total_revenue), 0)))
        return Money(result.scalar_one()).amount

    async def create(self, user_id: UUID, department: str | None = None) -> PlatformAccount:
        model = AdminProfileModel(
            id=generate_uuid(),
            user_id=user_id,
            department=department,
            total_revenue=Decimal("0.00"),
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    def _to_entity(self, model: AdminProfileModel) -> PlatformAccount:
        return PlatformAccount(
            id=model.id,
            user_id=model.user_id,
            department=model.department,
            total_revenue=Money(model.total_revenue),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
