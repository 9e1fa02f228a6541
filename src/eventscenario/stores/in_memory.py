"""
In-memory message repository.

Used as the event log of every scenario. Not suitable for production:
everything is lost when the process terminates.
"""

import logging
from collections import defaultdict
from typing import Any

from eventscenario.messages import Commit, Message
from eventscenario.observability import (
    ATTR_AGGREGATE_ID,
    ATTR_EVENT_COUNT,
    ATTR_EXPECTED_VERSION,
    Tracer,
    create_tracer,
)
from eventscenario.stores.interface import MessageRepository

logger = logging.getLogger(__name__)


class InMemoryMessageRepository(MessageRepository):
    """
    Append-only, per-aggregate message log with a last-commit slot.

    Besides the full history of every aggregate, the repository remembers
    the messages of the most recent append. Scenarios compare that
    last commit against their expected events and purge it after staging
    history, so staged events never reach the assertion.

    No version check happens here; optimistic concurrency belongs to the
    caller.

    Thread-safety:
        None. A repository is owned by a single scenario.

    Example:
        >>> log = InMemoryMessageRepository()
        >>> log.append(order_id, Commit(order_id, 0, (Message(placed),)))
        >>> log.last_commit()
        (OrderPlaced(...),)
        >>> log.purge_last_commit()
        >>> log.last_commit()
        ()
        >>> log.events_for(order_id)
        (OrderPlaced(...),)

    Attributes:
        _messages: Mapping of aggregate id to its messages in order
        _last_commit: Messages of the most recent append
    """

    def __init__(
        self,
        *,
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        """
        Initialize an empty repository.

        Args:
            tracer: Optional custom Tracer instance. If not provided, one is
                   created based on enable_tracing setting.
            enable_tracing: If True, emit OpenTelemetry spans (default: True).
                          Ignored if tracer is explicitly provided.
        """
        self._tracer = tracer or create_tracer(__name__, enable_tracing)
        self._messages: dict[Any, list[Message]] = defaultdict(list)
        self._last_commit: list[Message] = []

    def append(self, aggregate_root_id: Any, commit: Commit) -> None:
        """
        Append a commit and make it the last commit.

        An empty commit leaves history untouched but still replaces the
        last-commit slot, so it reads as "nothing happened".
        """
        with self._tracer.span(
            "eventscenario.message_repository.append",
            {
                ATTR_AGGREGATE_ID: str(aggregate_root_id),
                ATTR_EVENT_COUNT: len(commit),
                ATTR_EXPECTED_VERSION: commit.expected_version,
            },
        ):
            self._messages[aggregate_root_id].extend(commit.messages)
            self._last_commit = list(commit.messages)

        logger.debug(
            "Appended %d message(s) for aggregate %s",
            len(commit),
            aggregate_root_id,
            extra={
                "aggregate_root_id": str(aggregate_root_id),
                "message_count": len(commit),
                "expected_version": commit.expected_version,
            },
        )

    def history(self, aggregate_root_id: Any) -> tuple[Message, ...]:
        with self._tracer.span(
            "eventscenario.message_repository.history",
            {ATTR_AGGREGATE_ID: str(aggregate_root_id)},
        ):
            return tuple(self._messages.get(aggregate_root_id, ()))

    def events_for(self, aggregate_root_id: Any) -> tuple[Any, ...]:
        """Event payloads recorded for an aggregate, oldest first."""
        return self.retrieve_all(aggregate_root_id)

    def last_commit(self) -> tuple[Any, ...]:
        """
        Event payloads of the most recent append.

        Returns:
            Events in order; empty if nothing was appended since the last purge
        """
        return tuple(message.event for message in self._last_commit)

    def last_commit_messages(self) -> tuple[Message, ...]:
        """The most recent append as decorated messages."""
        return tuple(self._last_commit)

    def purge_last_commit(self) -> None:
        """Forget the last commit. History is not touched."""
        if self._last_commit:
            logger.debug(
                "Purging last commit of %d message(s)",
                len(self._last_commit),
                extra={"message_count": len(self._last_commit)},
            )
        self._last_commit = []

    def aggregate_root_ids(self) -> list[Any]:
        """Aggregates with at least one recorded message, in first-seen order."""
        return [key for key, messages in self._messages.items() if messages]

    def clear(self) -> None:
        """Drop all history and the last commit."""
        self._messages.clear()
        self._last_commit = []

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __repr__(self) -> str:
        return (
            f"InMemoryMessageRepository(aggregates={len(self.aggregate_root_ids())}, "
            f"messages={len(self)}, last_commit={len(self._last_commit)})"
        )


__all__ = ["InMemoryMessageRepository"]
