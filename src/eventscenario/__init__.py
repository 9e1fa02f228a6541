"""
eventscenario - Given/When/Then scenario harness for event-sourced aggregates.

This library provides:
- Aggregate root base classes and an event-sourced aggregate repository
- An in-memory message log that exposes the most recent commit
- Message decorators and a synchronous message dispatcher
- A controllable clock for deterministic recording timestamps
- Scenario testing helpers in eventscenario.testing (pytest)
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("eventscenario-py")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from eventscenario.aggregates.base import AggregateRoot, DeclarativeAggregate
from eventscenario.aggregates.repository import EventSourcedAggregateRootRepository
from eventscenario.clock import Clock, SystemClock, TestClock
from eventscenario.decorators import (
    DefaultHeadersDecorator,
    EventIdDecorator,
    MessageDecorator,
    MessageDecoratorChain,
    StaticHeadersDecorator,
)
from eventscenario.dispatch import (
    CollectingMessageConsumer,
    MessageConsumer,
    MessageDispatcher,
    SerializingMessageConsumer,
    SynchronousMessageDispatcher,
)
from eventscenario.events.base import DomainEvent
from eventscenario.exceptions import (
    AggregateNotFoundError,
    DomainFailure,
    EventScenarioError,
    FailedToDetectExpectedFailure,
    HarnessConfigurationError,
    ScenarioPhaseError,
    SerializationError,
    UnhandledEventError,
)
from eventscenario.handlers import handles
from eventscenario.messages import Commit, Header, Message
from eventscenario.protocols import CommandHandler, EventSourcedAggregate
from eventscenario.stores.in_memory import InMemoryMessageRepository
from eventscenario.stores.interface import MessageRepository

__all__ = [
    "__version__",
    # Events and messages
    "DomainEvent",
    "Message",
    "Header",
    "Commit",
    # Aggregates
    "AggregateRoot",
    "DeclarativeAggregate",
    "EventSourcedAggregateRootRepository",
    "handles",
    # Stores
    "MessageRepository",
    "InMemoryMessageRepository",
    # Decoration and dispatch
    "MessageDecorator",
    "MessageDecoratorChain",
    "DefaultHeadersDecorator",
    "EventIdDecorator",
    "StaticHeadersDecorator",
    "MessageConsumer",
    "MessageDispatcher",
    "SynchronousMessageDispatcher",
    "CollectingMessageConsumer",
    "SerializingMessageConsumer",
    # Clock
    "Clock",
    "SystemClock",
    "TestClock",
    # Protocols
    "CommandHandler",
    "EventSourcedAggregate",
    # Exceptions
    "EventScenarioError",
    "HarnessConfigurationError",
    "ScenarioPhaseError",
    "AggregateNotFoundError",
    "UnhandledEventError",
    "SerializationError",
    "FailedToDetectExpectedFailure",
    "DomainFailure",
]
