"""
Synchronous message dispatch.

The aggregate repository hands every recorded message to a dispatcher,
which forwards it to consumers. Dispatch here is strictly synchronous:
messages are delivered in recording order, each to every consumer in
registration order, and the first consumer failure stops dispatch and
propagates to the caller of persist().

Example:
    >>> collector = CollectingMessageConsumer()
    >>> dispatcher = SynchronousMessageDispatcher(collector)
    >>> dispatcher.dispatch(message_one, message_two)
    >>> collector.events
    [...]
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from eventscenario.events.base import event_type_name
from eventscenario.exceptions import SerializationError
from eventscenario.messages import Message
from eventscenario.observability import Tracer, create_tracer
from eventscenario.observability.attributes import (
    ATTR_CONSUMER_COUNT,
    ATTR_EVENT_COUNT,
)
from eventscenario.serialization import HeaderJSONEncoder, json_dumps, json_loads

logger = logging.getLogger(__name__)


@runtime_checkable
class MessageConsumer(Protocol):
    """
    Protocol for anything that reacts to dispatched messages.

    Example:
        >>> class AuditLog:
        ...     def handle(self, message: Message) -> None:
        ...         self.lines.append(message.header("event_type"))
    """

    def handle(self, message: Message) -> None:
        """
        Handle one message.

        Raises:
            Exception: Any failure propagates to the dispatcher's caller
        """
        ...


class MessageDispatcher(ABC):
    """Abstract dispatcher interface used by the aggregate repository."""

    @abstractmethod
    def dispatch(self, *messages: Message) -> None:
        """Deliver messages to consumers."""
        pass


def _consumer_name(consumer: Any) -> str:
    return getattr(consumer, "__name__", None) or type(consumer).__name__


class SynchronousMessageDispatcher(MessageDispatcher):
    """
    Dispatcher that calls consumers inline, one at a time.

    Args:
        *consumers: MessageConsumer instances, or plain callables taking a
                    Message, in the order they should be invoked
        tracer: Optional custom Tracer instance
        enable_tracing: If True, emit OpenTelemetry spans (default: True).
                        Ignored if tracer is explicitly provided.
    """

    def __init__(
        self,
        *consumers: MessageConsumer | Callable[[Message], None],
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        self._consumers = list(consumers)
        self._tracer = tracer or create_tracer(__name__, enable_tracing)

    @property
    def consumers(self) -> list[MessageConsumer | Callable[[Message], None]]:
        return list(self._consumers)

    def dispatch(self, *messages: Message) -> None:
        if not messages or not self._consumers:
            return

        with self._tracer.span(
            "eventscenario.dispatcher.dispatch",
            {
                ATTR_EVENT_COUNT: len(messages),
                ATTR_CONSUMER_COUNT: len(self._consumers),
            },
        ):
            for message in messages:
                for consumer in self._consumers:
                    logger.debug(
                        "Dispatching %s to %s",
                        event_type_name(message.event),
                        _consumer_name(consumer),
                        extra={
                            "event_type": event_type_name(message.event),
                            "consumer": _consumer_name(consumer),
                        },
                    )
                    if isinstance(consumer, MessageConsumer):
                        consumer.handle(message)
                    else:
                        consumer(message)

    def __repr__(self) -> str:
        return f"SynchronousMessageDispatcher(consumers={len(self._consumers)})"


class CollectingMessageConsumer:
    """Consumer that keeps every message it receives, for assertions."""

    def __init__(self) -> None:
        self.messages: list[Message] = []

    def handle(self, message: Message) -> None:
        self.messages.append(message)

    @property
    def events(self) -> list[Any]:
        return [message.event for message in self.messages]

    def clear(self) -> None:
        self.messages.clear()


class SerializingMessageConsumer:
    """
    Consumer that checks every message survives a JSON round trip.

    Scenarios dispatch through this consumer by default so that a test
    fails as soon as an event carries something a real store could not
    write.

    Payloads must be something EventScenarioJSONEncoder knows: pydantic
    models, dataclasses, objects with a to_dict() method, or plain JSON
    values. Header values are opaque and fall back to str(), so any
    hashable aggregate id works.

    Raises:
        SerializationError: If the payload can't be encoded
    """

    def handle(self, message: Message) -> None:
        event_type = event_type_name(message.event)
        try:
            headers = json_loads(json_dumps(dict(message.headers), cls=HeaderJSONEncoder))
            json_loads(json_dumps({"headers": headers, "payload": message.event}))
        except (TypeError, ValueError) as e:
            raise SerializationError(event_type, str(e)) from e


__all__ = [
    "MessageConsumer",
    "MessageDispatcher",
    "SynchronousMessageDispatcher",
    "CollectingMessageConsumer",
    "SerializingMessageConsumer",
]
