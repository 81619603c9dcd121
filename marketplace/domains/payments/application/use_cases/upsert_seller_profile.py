"""
Upsert Seller Profile Use Case

Creates or updates a seller's store name, commission rate and payout details.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.core.domain import Percentage, PersistenceException, ValidationException
from marketplace.domains.payments.application.ports import SellerProfileRepositoryFactory
from marketplace.domains.payments.domain import PayoutDetails, SellerProfile

logger = logging.getLogger(__name__)


@dataclass
class UpsertSellerProfileRequest:
    user_id: UUID
    store_name: str | None = None
    commission_rate: Decimal | None = None
    payout_details: PayoutDetails | None = None


class UpsertSellerProfileUseCase:
    """
    Use Case: Upsert Seller Profile

    Balances are not writable here; only settlement moves them.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        seller_profile_repository_factory: SellerProfileRepositoryFactory,
    ):
        self._session_factory = session_factory
        self._seller_profile_repository_factory = seller_profile_repository_factory

    async def execute(self, request: UpsertSellerProfileRequest) -> SellerProfile:
        rate = self._parse_rate(request.commission_rate)
        try:
            async with self._session_factory() as session, session.begin():
                profiles = self._seller_profile_repository_factory(session)
                profile = await profiles.get_by_user_id(request.user_id)
                if profile is None:
                    if not request.store_name or not request.store_name.strip():
                        raise ValidationException("Store name is required for a new seller", field="store_name")
                    profile = SellerProfile(
                        user_id=request.user_id,
                        store_name=request.store_name.strip(),
                        commission_rate=rate,
                        payout_details=request.payout_details,
                    )
                    created = True
                else:
                    profile.update_details(
                        store_name=request.store_name,
                        commission_rate=rate,
                        payout_details=request.payout_details,
                    )
                    created = False
                saved = await profiles.save(profile)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Saving seller profile {request.user_id} failed: {e}", exc_info=True)
            raise PersistenceException("upsert seller profile", original_error=e) from e

        logger.info(f"Seller profile {'created' if created else 'updated'} for {request.user_id}")
        return saved

    def _parse_rate(self, value: Decimal | None) -> Percentage | None:
        if value is None:
            return None
        try:
            return Percentage(value)
        except ValueError as e:
            raise ValidationException(str(e), field="commission_rate") from e
