"""
Database Setup

Schema creation helpers for development databases and tests. Production
schemas are managed by Alembic.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from marketplace.models.db import Base

logger = logging.getLogger(__name__)


class DatabaseSetup:
    """Creates or drops the ledger schema on a given engine."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def create_tables(self) -> None:
        """Create every table registered on `Base.metadata`."""
        try:
            async with self.engine.begin() as conn:
                logger.info("Creating tables...")
                await conn.run_sync(Base.metadata.create_all)
                logger.info("Tables created")
        except Exception as e:
            logger.error(f"Error creating tables: {e}")
            raise

    async def drop_tables(self) -> None:
        """Drop every table registered on `Base.metadata`."""
        try:
            async with self.engine.begin() as conn:
                logger.info("Dropping tables...")
                await conn.run_sync(Base.metadata.drop_all)
                logger.info("Tables dropped")
        except Exception as e:
            logger.error(f"Error dropping tables: {e}")
            raise
