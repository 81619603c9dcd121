"""
Account Directory

Answers "is this user a seller / an admin" from the profile tables.
"""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domains.orders.application.ports import IAccountDirectory
from marketplace.models.db.profiles import AdminProfile, SellerProfile


class SQLAlchemyAccountDirectory(IAccountDirectory):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def existing_sellers(self, seller_ids: Iterable[UUID]) -> set[UUID]:
        wanted = set(seller_ids)
        if not wanted:
            return set()
        result = await self.session.execute(select(SellerProfile.user_id).where(SellerProfile.user_id.in_(wanted)))
        return set(result.scalars().all())

    async def is_admin(self, user_id: UUID) -> bool:
        result = await self.session.execute(select(AdminProfile.id).where(AdminProfile.user_id == user_id))
        return result.first() is not None
