"""
Entity Base Classes

Orders, seller profiles, ledger rows and the platform account are entities:
two instances describe the same thing when their ids match, whatever their
balances or statuses say at the moment.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Generic, TypeVar
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from marketplace.core.domain.events import DomainEvent

TId = TypeVar("TId")


def utcnow() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(UTC)


def generate_uuid() -> UUID:
    return uuid4()


@dataclass
class Entity(ABC, Generic[TId]):
    """
    Identity plus timestamps.

    An entity without an id (not stored yet) is only equal to itself.
    """

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self) or self.id is None:
            return other is self
        return self.id == other.id

    def __hash__(self) -> int:
        return id(self) if self.id is None else hash((type(self).__name__, self.id))

    def touch(self) -> None:
        self.updated_at = utcnow()


@dataclass(eq=False)
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Consistency boundary that buffers the events raised while it changes.

    Use cases drain the buffer with `get_domain_events()` only after their
    unit of work has committed, then call `clear_domain_events()`.
    """

    _domain_events: list["DomainEvent"] = field(default_factory=list, repr=False, compare=False)

    def _record_event(self, event: "DomainEvent") -> None:
        self._domain_events.append(event)

    def get_domain_events(self) -> list["DomainEvent"]:
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()
