"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Events: Domain events for communication
- Exceptions: Domain-specific error handling
"""

from marketplace.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid,
    utcnow,
)
from marketplace.core.domain.events import (
    DomainEvent,
    DomainEventPublisher,
)
from marketplace.core.domain.exceptions import (
    AuthorizationException,
    BusinessRuleViolationException,
    ConfigurationException,
    DomainException,
    EntityNotFoundException,
    InvalidOperationException,
    PersistenceException,
    ValidationException,
)
from marketplace.core.domain.value_objects import (
    CENT,
    Money,
    Percentage,
    StatusEnum,
    ValueObject,
    to_decimal,
)

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid",
    "utcnow",
    # Value Objects
    "ValueObject",
    "Money",
    "Percentage",
    "StatusEnum",
    "CENT",
    "to_decimal",
    # Events
    "DomainEvent",
    "DomainEventPublisher",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "BusinessRuleViolationException",
    "InvalidOperationException",
    "AuthorizationException",
    "ConfigurationException",
    "PersistenceException",
]
