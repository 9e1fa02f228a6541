"""
Message envelopes and commits.

A Message wraps one event payload with the headers recorded alongside it.
A Commit is the ordered group of messages appended in one persist call.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


class Header:
    """Standard header names written by the aggregate repository and decorators."""

    EVENT_TYPE = "event_type"
    EVENT_ID = "event_id"
    TIME_OF_RECORDING = "time_of_recording"
    TIME_OF_RECORDING_FORMAT = "%Y-%m-%d %H:%M:%S.%f%z"
    AGGREGATE_ROOT_ID = "aggregate_root_id"
    AGGREGATE_ROOT_TYPE = "aggregate_root_type"
    AGGREGATE_ROOT_VERSION = "aggregate_root_version"


def _freeze(headers: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(headers or {}))


@dataclass(frozen=True)
class Message:
    """
    An event payload plus its headers.

    Messages are immutable; decorators return new messages via
    with_header() / with_headers().

    Attributes:
        event: The domain event payload
        headers: Read-only mapping of header name to value
    """

    event: Any
    headers: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze(self.headers))

    def header(self, name: str, default: Any = None) -> Any:
        return self.headers.get(name, default)

    def with_header(self, name: str, value: Any) -> Message:
        return Message(self.event, {**self.headers, name: value})

    def with_headers(self, headers: Mapping[str, Any]) -> Message:
        return Message(self.event, {**self.headers, **headers})

    @property
    def aggregate_root_id(self) -> Any:
        return self.headers.get(Header.AGGREGATE_ROOT_ID)

    @property
    def aggregate_version(self) -> int:
        return int(self.headers.get(Header.AGGREGATE_ROOT_VERSION, 0))

    def __repr__(self) -> str:
        return f"Message(event={self.event!r}, headers={dict(self.headers)!r})"


@dataclass(frozen=True)
class Commit:
    """
    Messages appended together against one aggregate.

    Attributes:
        aggregate_root_id: The aggregate the messages belong to
        expected_version: Aggregate version before the commit
        messages: Messages in recording order
    """

    aggregate_root_id: Any
    expected_version: int
    messages: tuple[Message, ...] = ()

    @property
    def events(self) -> tuple[Any, ...]:
        """Event payloads in recording order."""
        return tuple(message.event for message in self.messages)

    @property
    def new_version(self) -> int:
        return self.expected_version + len(self.messages)

    @property
    def is_empty(self) -> bool:
        return not self.messages

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)


__all__ = ["Header", "Message", "Commit"]
