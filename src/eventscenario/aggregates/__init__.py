"""Aggregate root base classes and the event-sourced repository."""

from eventscenario.aggregates.base import (
    AggregateRoot,
    DeclarativeAggregate,
    UnregisteredEventHandling,
)
from eventscenario.aggregates.repository import (
    EventSourcedAggregateRootRepository,
    TAggregate,
)

__all__ = [
    "AggregateRoot",
    "DeclarativeAggregate",
    "UnregisteredEventHandling",
    "EventSourcedAggregateRootRepository",
    "TAggregate",
]
