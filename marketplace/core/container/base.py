"""
Base Container - Shared Singletons.

Single Responsibility: hold settings and the session factory every unit of work opens.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from marketplace.config.settings import Settings, get_settings
from marketplace.database import get_session_factory

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.

    A session factory can be injected (tests bind one to a throwaway
    database); otherwise the process-wide factory is created lazily.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self.settings = settings or get_settings()
        self._session_factory = session_factory
        logger.debug("BaseContainer initialized")

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = get_session_factory()
        return self._session_factory
