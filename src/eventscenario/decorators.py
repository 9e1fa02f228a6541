"""
Message decorators.

Decorators stamp headers onto messages before they are persisted and
dispatched. They are composed as an ordered chain rather than by
inheritance.

Example:
    >>> decorator = MessageDecoratorChain(
    ...     DefaultHeadersDecorator(clock),
    ...     StaticHeadersDecorator({"tenant": "acme"}),
    ... )
    >>> decorated = decorator.decorate(Message(event))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable
from uuid import uuid4

from eventscenario.clock import Clock, SystemClock
from eventscenario.events.base import event_type_name
from eventscenario.messages import Header, Message


@runtime_checkable
class MessageDecorator(Protocol):
    """Protocol for message transforms."""

    def decorate(self, message: Message) -> Message:
        """Return a decorated copy of message."""
        ...


class MessageDecoratorChain:
    """Apply decorators in order, each one receiving the previous result."""

    def __init__(self, *decorators: MessageDecorator) -> None:
        self._decorators = list(decorators)

    @property
    def decorators(self) -> list[MessageDecorator]:
        return list(self._decorators)

    def decorate(self, message: Message) -> Message:
        for decorator in self._decorators:
            message = decorator.decorate(message)
        return message

    def __repr__(self) -> str:
        return f"MessageDecoratorChain({len(self._decorators)} decorators)"


class DefaultHeadersDecorator:
    """
    Stamp the event type and time of recording.

    Headers already present on the message are left untouched, so a message
    decorated twice keeps its original recording time.

    Args:
        clock: Time source for the time_of_recording header. Scenarios pass
               a TestClock so headers are deterministic.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def decorate(self, message: Message) -> Message:
        headers: dict[str, Any] = {
            Header.EVENT_TYPE: event_type_name(message.event),
            Header.TIME_OF_RECORDING: self._clock.now().strftime(
                Header.TIME_OF_RECORDING_FORMAT
            ),
        }
        return message.with_headers({**headers, **message.headers})


class EventIdDecorator:
    """Assign an event_id header to messages that don't have one."""

    def __init__(self, id_factory: Callable[[], Any] = uuid4) -> None:
        self._id_factory = id_factory

    def decorate(self, message: Message) -> Message:
        if Header.EVENT_ID in message.headers:
            return message
        return message.with_header(Header.EVENT_ID, self._id_factory())


class StaticHeadersDecorator:
    """Add a fixed set of headers to every message."""

    def __init__(self, headers: Mapping[str, Any]) -> None:
        self._headers = dict(headers)

    def decorate(self, message: Message) -> Message:
        return message.with_headers(self._headers)


__all__ = [
    "MessageDecorator",
    "MessageDecoratorChain",
    "DefaultHeadersDecorator",
    "EventIdDecorator",
    "StaticHeadersDecorator",
]
