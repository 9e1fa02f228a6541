"""
Shared pytest fixtures for the eventscenario library tests.

This module provides:
- Sample data fixtures (document_id, other_document_id)
- Clock fixtures (fixed_instant, clock)
- Message log and repository fixtures wired with tracing disabled
- A scenario controller bound to the document aggregate
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from eventscenario.aggregates.repository import EventSourcedAggregateRootRepository
from eventscenario.clock import TestClock
from eventscenario.decorators import DefaultHeadersDecorator, MessageDecoratorChain
from eventscenario.dispatch import (
    CollectingMessageConsumer,
    SerializingMessageConsumer,
    SynchronousMessageDispatcher,
)
from eventscenario.stores.in_memory import InMemoryMessageRepository
from eventscenario.testing.scenario import ScenarioController
from tests.fixtures import DocumentAggregate, DocumentCommandHandler

# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def document_id() -> UUID:
    """Identity of the document under test."""
    return uuid4()


@pytest.fixture
def other_document_id() -> UUID:
    """A second document, for multi-aggregate scenarios."""
    return uuid4()


# ============================================================================
# Clock
# ============================================================================


@pytest.fixture
def fixed_instant() -> datetime:
    return datetime(2024, 3, 1, 12, 30, 0, tzinfo=UTC)


@pytest.fixture
def clock(fixed_instant: datetime) -> TestClock:
    """A TestClock frozen at fixed_instant."""
    return TestClock(fixed_instant)


# ============================================================================
# Message log and repositories
# ============================================================================


@pytest.fixture
def message_repository() -> InMemoryMessageRepository:
    """Empty in-memory message log with tracing disabled."""
    return InMemoryMessageRepository(enable_tracing=False)


@pytest.fixture
def collector() -> CollectingMessageConsumer:
    """Consumer that records every dispatched message."""
    return CollectingMessageConsumer()


@pytest.fixture
def document_repository(
    message_repository: InMemoryMessageRepository,
    collector: CollectingMessageConsumer,
    clock: TestClock,
) -> EventSourcedAggregateRootRepository[DocumentAggregate]:
    """Document repository wired the way AggregateRootTestCase wires it."""
    return EventSourcedAggregateRootRepository(
        DocumentAggregate,
        message_repository,
        SynchronousMessageDispatcher(
            SerializingMessageConsumer(),
            collector,
            enable_tracing=False,
        ),
        MessageDecoratorChain(DefaultHeadersDecorator(clock)),
        enable_tracing=False,
    )


@pytest.fixture
def document_handler(
    document_repository: EventSourcedAggregateRootRepository[DocumentAggregate],
) -> DocumentCommandHandler:
    return DocumentCommandHandler(document_repository)


@pytest.fixture
def scenario(
    document_id: UUID,
    document_repository: EventSourcedAggregateRootRepository[DocumentAggregate],
    message_repository: InMemoryMessageRepository,
    clock: TestClock,
    document_handler: DocumentCommandHandler,
) -> ScenarioController:
    """A fresh scenario for document_id."""
    return ScenarioController(
        document_id,
        document_repository,
        message_repository,
        clock,
        document_handler,
    )
