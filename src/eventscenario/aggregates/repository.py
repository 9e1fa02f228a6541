"""
Repository pattern for event-sourced aggregates.

The repository loads aggregates by replaying their history and persists
the events they record, decorating each one into a Message, appending
them as a single Commit and dispatching them to consumers.
"""

import logging
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from eventscenario.aggregates.base import AggregateRoot
from eventscenario.decorators import MessageDecorator, MessageDecoratorChain
from eventscenario.dispatch import MessageDispatcher, SynchronousMessageDispatcher
from eventscenario.exceptions import AggregateNotFoundError
from eventscenario.messages import Commit, Header, Message
from eventscenario.observability import Tracer, create_tracer
from eventscenario.observability.attributes import (
    ATTR_AGGREGATE_ID,
    ATTR_AGGREGATE_TYPE,
    ATTR_EVENT_COUNT,
    ATTR_EXPECTED_VERSION,
    ATTR_VERSION,
)
from eventscenario.stores.interface import MessageRepository

logger = logging.getLogger(__name__)

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)


class EventSourcedAggregateRootRepository(Generic[TAggregate]):
    """
    Repository for event-sourced aggregates.

    Features:
    - Retrieve aggregates by replaying their message history
    - Persist an aggregate's recorded events as one commit
    - Stage raw events against an id without an aggregate instance
    - Decorate every message through a configurable chain
    - Dispatch persisted messages synchronously to consumers

    The repository only depends on the MessageRepository contract, so the
    same wiring works with the in-memory log and a durable store.

    Example:
        >>> log = InMemoryMessageRepository()
        >>> repository = EventSourcedAggregateRootRepository(
        ...     Account,
        ...     log,
        ...     SynchronousMessageDispatcher(projector),
        ...     MessageDecoratorChain(DefaultHeadersDecorator(clock)),
        ... )
        >>> account = Account.open(account_id)
        >>> repository.persist(account)
        >>> repository.retrieve(account_id).version
        1

    Attributes:
        _aggregate_root_class: Class used to reconstitute aggregates
        _messages: The message repository
        _dispatcher: Dispatcher receiving every persisted message
        _decorator: Decorator applied to every message before persisting
    """

    def __init__(
        self,
        aggregate_root_class: type[TAggregate],
        message_repository: MessageRepository,
        dispatcher: MessageDispatcher | None = None,
        decorator: MessageDecorator | None = None,
        *,
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        """
        Initialize the repository.

        Args:
            aggregate_root_class: Aggregate class to reconstitute on retrieve
            message_repository: Where commits are appended and history is read
            dispatcher: Receives every persisted message (default: no consumers)
            decorator: Applied to every message before it is persisted
                       (default: empty chain)
            tracer: Optional custom Tracer instance
            enable_tracing: If True, emit OpenTelemetry spans (default: True).
                          Ignored if tracer is explicitly provided.
        """
        self._tracer = tracer or create_tracer(__name__, enable_tracing)
        self._aggregate_root_class = aggregate_root_class
        self._messages = message_repository
        self._dispatcher = dispatcher or SynchronousMessageDispatcher(enable_tracing=False)
        self._decorator = decorator or MessageDecoratorChain()

    @property
    def aggregate_root_class(self) -> type[TAggregate]:
        return self._aggregate_root_class

    @property
    def aggregate_type(self) -> str:
        """Get the aggregate type this repository manages."""
        return self._aggregate_root_class.aggregate_type

    @property
    def message_repository(self) -> MessageRepository:
        return self._messages

    def retrieve(self, aggregate_root_id: Any) -> TAggregate:
        """
        Load an aggregate from its message history.

        Args:
            aggregate_root_id: ID of the aggregate to load

        Returns:
            The reconstituted aggregate

        Raises:
            AggregateNotFoundError: If no messages exist for the aggregate
        """
        with self._tracer.span(
            "eventscenario.repository.retrieve",
            {
                ATTR_AGGREGATE_ID: str(aggregate_root_id),
                ATTR_AGGREGATE_TYPE: self.aggregate_type,
            },
        ):
            events = self._messages.retrieve_all(aggregate_root_id)
            if not events:
                raise AggregateNotFoundError(aggregate_root_id, self.aggregate_type)

            aggregate = self._aggregate_root_class.reconstitute_from_events(
                aggregate_root_id, events
            )

            logger.debug(
                "Retrieved %s/%s at version %d",
                self.aggregate_type,
                aggregate_root_id,
                aggregate.version,
                extra={
                    "aggregate_root_id": str(aggregate_root_id),
                    "aggregate_type": self.aggregate_type,
                    "events_replayed": len(events),
                },
            )
            return aggregate

    def retrieve_or_create(self, aggregate_root_id: Any) -> TAggregate:
        """Load an existing aggregate, or return a new one with no history."""
        try:
            return self.retrieve(aggregate_root_id)
        except AggregateNotFoundError:
            return self._aggregate_root_class.new(aggregate_root_id)

    def persist(self, aggregate: TAggregate) -> None:
        """
        Persist the events an aggregate recorded since its last release.

        The events are released from the aggregate, decorated, appended as
        one commit and then dispatched. A no-op when nothing was recorded.

        Raises:
            Exception: Whatever a consumer raises during dispatch
        """
        events = aggregate.release_events()
        if not events:
            return

        with self._tracer.span(
            "eventscenario.repository.persist",
            {
                ATTR_AGGREGATE_ID: str(aggregate.aggregate_root_id),
                ATTR_AGGREGATE_TYPE: self.aggregate_type,
                ATTR_VERSION: aggregate.version,
            },
        ):
            self.persist_events(aggregate.aggregate_root_id, aggregate.version, *events)

    def persist_events(
        self,
        aggregate_root_id: Any,
        aggregate_root_version: int,
        *events: Any,
    ) -> None:
        """
        Persist raw events against an aggregate id.

        This is how scenarios stage history: no aggregate instance is
        needed, so setup data doesn't depend on aggregate behaviour.

        Args:
            aggregate_root_id: The aggregate the events belong to
            aggregate_root_version: Aggregate version after these events
            *events: Events in order
        """
        if not events:
            return

        expected_version = aggregate_root_version - len(events)

        with self._tracer.span(
            "eventscenario.repository.persist_events",
            {
                ATTR_AGGREGATE_ID: str(aggregate_root_id),
                ATTR_AGGREGATE_TYPE: self.aggregate_type,
                ATTR_EVENT_COUNT: len(events),
                ATTR_EXPECTED_VERSION: expected_version,
                ATTR_VERSION: aggregate_root_version,
            },
        ):
            messages = self._decorate(aggregate_root_id, expected_version, events)
            self._messages.append(
                aggregate_root_id,
                Commit(aggregate_root_id, expected_version, messages),
            )
            self._dispatcher.dispatch(*messages)

        logger.debug(
            "Persisted %d event(s) for %s/%s at version %d",
            len(events),
            self.aggregate_type,
            aggregate_root_id,
            aggregate_root_version,
            extra={
                "aggregate_root_id": str(aggregate_root_id),
                "aggregate_type": self.aggregate_type,
                "event_count": len(events),
                "version": aggregate_root_version,
            },
        )

    def _decorate(
        self,
        aggregate_root_id: Any,
        expected_version: int,
        events: Sequence[Any],
    ) -> tuple[Message, ...]:
        # Each message carries the aggregate version at the time it was recorded
        return tuple(
            self._decorator.decorate(
                Message(
                    event,
                    {
                        Header.AGGREGATE_ROOT_ID: aggregate_root_id,
                        Header.AGGREGATE_ROOT_TYPE: self.aggregate_type,
                        Header.AGGREGATE_ROOT_VERSION: expected_version + position,
                    },
                )
            )
            for position, event in enumerate(events, start=1)
        )


__all__ = [
    "EventSourcedAggregateRootRepository",
    "TAggregate",
]
