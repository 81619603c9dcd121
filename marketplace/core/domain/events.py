"""
Base Domain Event Classes

Domain events represent significant business occurrences. Use cases
publish them after their unit of work commits, so subscribers never see
an event for a change that was rolled back.
"""

import logging
from abc import ABC
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

from marketplace.core.domain.entities import utcnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Example:
        ```python
        @dataclass(frozen=True, kw_only=True)
        class OrderPlaced(DomainEvent):
            order_id: UUID
            total_amount: Decimal
        ```
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=utcnow)

    @property
    def event_type(self) -> str:
        """Get the event type name (class name)."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        """Convert event to a JSON-friendly dictionary."""
        result: dict[str, Any] = {"event_type": self.event_type}
        for f in fields(self):
            result[f.name] = _serialize(getattr(self, f.name))
        return result


def _serialize(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    if isinstance(value, dict):
        return {str(_serialize(k)): _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value


# Type aliases for event handlers
EventHandler = Callable[[DomainEvent], Coroutine[Any, Any, None]]


class DomainEventPublisher:
    """
    In-process domain event publisher.

    Handler failures are logged and never propagate to the publisher, so a
    broken subscriber cannot undo a committed settlement.
    """

    _handlers: dict[str, list[EventHandler]] = {}

    @classmethod
    def subscribe(cls, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to subscribe to
            handler: Async handler function
        """
        cls._handlers.setdefault(event_type.__name__, []).append(handler)

    @classmethod
    async def publish(cls, event: DomainEvent) -> None:
        """Publish a domain event to all subscribers."""
        event_name = event.event_type
        for handler in cls._handlers.get(event_name, []):
            try:
                await handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event_name}: {e}", exc_info=True)

    @classmethod
    async def publish_all(cls, events: list[DomainEvent]) -> None:
        """Publish multiple events in order."""
        for event in events:
            await cls.publish(event)

    @classmethod
    def clear_handlers(cls) -> None:
        """Clear all event handlers (useful for testing)."""
        cls._handlers.clear()
