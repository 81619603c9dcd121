"""
Database access: engine, session factory and schema helpers.
"""

from marketplace.database.async_db import (
    create_async_database_engine,
    create_session_factory,
    dispose_async_engine,
    get_async_db_context,
    get_async_engine,
    get_session_factory,
)
from marketplace.database.setup import DatabaseSetup

__all__ = [
    "DatabaseSetup",
    "create_async_database_engine",
    "create_session_factory",
    "dispose_async_engine",
    "get_async_db_context",
    "get_async_engine",
    "get_session_factory",
]
