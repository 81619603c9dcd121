"""
Base models and mixins for the database
"""

from datetime import UTC, datetime

from sqlalchemy import JSON, Column, DateTime, Numeric
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# JSONB on PostgreSQL, plain JSON elsewhere
JSONType = JSON().with_variant(JSONB(), "postgresql")


def MoneyColumn(**kwargs) -> Column:
    """Amount column held to the cent."""
    kwargs.setdefault("nullable", False)
    return Column(Numeric(12, 2, asdecimal=True), **kwargs)


def RateColumn(**kwargs) -> Column:
    """Percentage column (0.00 - 100.00)."""
    return Column(Numeric(5, 2, asdecimal=True), **kwargs)


class TimestampMixin:
    """Mixin that adds automatic timestamps."""

    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )
