"""
Application lifecycle management using the FastAPI lifespan pattern.

Handles only application startup/shutdown logic.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from marketplace.config.settings import Settings, get_settings
from marketplace.core.shared import configure_logging
from marketplace.database import DatabaseSetup, dispose_async_engine, get_async_engine

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Startup configures logging and optionally creates the schema;
    shutdown releases the connection pool.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        configure_logging(
            level=self._settings.LOG_LEVEL,
            format_type=self._settings.LOG_FORMAT,
            log_file=self._settings.LOG_FILE,
        )
        logger.info("Starting application lifecycle...")

        self._verify_configurations()

        if self._settings.DB_AUTO_CREATE_TABLES:
            await DatabaseSetup(get_async_engine()).create_tables()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await dispose_async_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Log settings that change how settlement behaves."""
        if self._settings.PLATFORM_ADMIN_USER_ID is None:
            logger.info("PLATFORM_ADMIN_USER_ID not set - revenue goes to the earliest admin profile")
        if not self._settings.SENTRY_DSN:
            logger.info("SENTRY_DSN not set - error tracking disabled")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    lifecycle = LifecycleManager(settings)

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
