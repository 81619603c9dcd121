"""
Seller Profile Repository Implementation

SQLAlchemy implementation of ISellerProfileRepository.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.domain import Money, Percentage, generate_uuid
from marketplace.domains.payments.application.ports import ISellerProfileRepository
from marketplace.domains.payments.domain import SellerProfile, parse_payout_details
from marketplace.models.db.profiles import SellerProfile as SellerProfileModel


class SQLAlchemySellerProfileRepository(ISellerProfileRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> SellerProfile | None:
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[SellerProfile]:
        result = await self.session.execute(select(SellerProfileModel).order_by(SellerProfileModel.created_at))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_commission_rates(self, seller_ids: Iterable[UUID]) -> dict[UUID, Decimal | None]:
        wanted = set(seller_ids)
        if not wanted:
            return {}
        result = await self.session.execute(
            select(SellerProfileModel.user_id, SellerProfileModel.commission_rate).where(
                SellerProfileModel.user_id.in_(wanted)
            )
        )
        return {user_id: rate for user_id, rate in result.all()}

    async def credit_earnings(self, seller_id: UUID, amount: Decimal) -> bool:
        result = await self.session.execute(
            update(SellerProfileModel)
            .where(SellerProfileModel.user_id == seller_id)
            .values(
                total_earnings=SellerProfileModel.total_earnings + amount,
                current_balance=SellerProfileModel.current_balance + amount,
                updated_at=datetime.now(UTC),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def save(self, profile: SellerProfile) -> SellerProfile:
        model = await self._get_model(profile.user_id)
        payout = profile.payout_details.to_dict() if profile.payout_details else None
        rate = profile.commission_rate.value if profile.commission_rate else None

        if model is None:
            model = SellerProfileModel(
                id=profile.id or generate_uuid(),
                user_id=profile.user_id,
                store_name=profile.store_name,
                commission_rate=rate,
                verification_status=profile.verification_status,
                payout_details=payout,
            )
            self.session.add(model)
        else:
            model.store_name = profile.store_name
            model.commission_rate = rate
            model.payout_details = payout
            model.verification_status = profile.verification_status

        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def _get_model(self, user_id: UUID) -> SellerProfileModel | None:
        result = await self.session.execute(select(SellerProfileModel).where(SellerProfileModel.user_id == user_id))
        return result.scalar_one_or_none()

    def _to_entity(self, model: SellerProfileModel) -> SellerProfile:
        return SellerProfile(
            id=model.id,
            user_id=model.user_id,
            store_name=model.store_name,
            commission_rate=Percentage(model.commission_rate) if model.commission_rate is not None else None,
            total_earnings=Money(model.total_earnings),
            current_balance=Money(model.current_balance),
            verification_status=model.verification_status,
            payout_details=parse_payout_details(model.payout_details),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
