"""
Unit tests for synchronous message dispatch.

Tests cover:
- Messages are delivered in order, each to every consumer in order
- Plain callables work as consumers
- The first consumer failure stops dispatch and propagates
- No-op dispatch (no messages or no consumers)
- Span creation through the injected tracer
- CollectingMessageConsumer and SerializingMessageConsumer
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from eventscenario.dispatch import (
    CollectingMessageConsumer,
    MessageConsumer,
    SerializingMessageConsumer,
    SynchronousMessageDispatcher,
)
from eventscenario.events import DomainEvent
from eventscenario.exceptions import SerializationError
from eventscenario.messages import Header, Message
from eventscenario.observability import ATTR_CONSUMER_COUNT, ATTR_EVENT_COUNT, MockTracer
from tests.fixtures import CounterIncremented, DocumentOpened, DocumentRenamed


class RecordingConsumer:
    """Consumer that writes (name, event) into a shared journal."""

    def __init__(self, name: str, journal: list) -> None:
        self.name = name
        self.journal = journal

    def handle(self, message: Message) -> None:
        self.journal.append((self.name, message.event))


class ExplodingConsumer:
    def handle(self, message: Message) -> None:
        raise RuntimeError("consumer failed")


class TestSynchronousMessageDispatcher:
    """Tests for delivery order and failure propagation."""

    def test_message_major_order(self):
        """Every consumer sees message one before any consumer sees message two."""
        journal: list = []
        first = DocumentRenamed(name="a")
        second = DocumentRenamed(name="b")
        dispatcher = SynchronousMessageDispatcher(
            RecordingConsumer("x", journal),
            RecordingConsumer("y", journal),
            enable_tracing=False,
        )

        dispatcher.dispatch(Message(first), Message(second))

        assert journal == [("x", first), ("y", first), ("x", second), ("y", second)]

    def test_plain_callable_consumer(self):
        received: list[Message] = []
        message = Message(DocumentRenamed(name="a"))

        SynchronousMessageDispatcher(received.append, enable_tracing=False).dispatch(message)

        assert received == [message]

    def test_first_failure_propagates_and_stops(self):
        journal: list = []
        dispatcher = SynchronousMessageDispatcher(
            RecordingConsumer("before", journal),
            ExplodingConsumer(),
            RecordingConsumer("after", journal),
            enable_tracing=False,
        )
        first = DocumentRenamed(name="a")

        with pytest.raises(RuntimeError, match="consumer failed"):
            dispatcher.dispatch(Message(first), Message(DocumentRenamed(name="b")))

        assert journal == [("before", first)]

    def test_no_consumers_is_a_no_op(self):
        tracer = MockTracer()

        SynchronousMessageDispatcher(tracer=tracer).dispatch(Message(DocumentRenamed(name="a")))

        assert tracer.spans == []

    def test_no_messages_is_a_no_op(self):
        tracer = MockTracer()
        collector = CollectingMessageConsumer()

        SynchronousMessageDispatcher(collector, tracer=tracer).dispatch()

        assert collector.messages == []
        assert tracer.spans == []

    def test_dispatch_span(self):
        tracer = MockTracer()
        dispatcher = SynchronousMessageDispatcher(
            CollectingMessageConsumer(), CollectingMessageConsumer(), tracer=tracer
        )

        dispatcher.dispatch(Message(DocumentRenamed(name="a")), Message(DocumentRenamed(name="b")))

        assert tracer.spans == [
            (
                "eventscenario.dispatcher.dispatch",
                {ATTR_EVENT_COUNT: 2, ATTR_CONSUMER_COUNT: 2},
            )
        ]

    def test_consumers_property_is_a_copy(self):
        collector = CollectingMessageConsumer()
        dispatcher = SynchronousMessageDispatcher(collector, enable_tracing=False)

        dispatcher.consumers.clear()

        assert dispatcher.consumers == [collector]

    def test_consumers_satisfy_protocol(self):
        assert isinstance(CollectingMessageConsumer(), MessageConsumer)
        assert isinstance(SerializingMessageConsumer(), MessageConsumer)


class TestCollectingMessageConsumer:
    def test_collects_messages_and_events(self):
        collector = CollectingMessageConsumer()
        event = DocumentRenamed(name="a")

        collector.handle(Message(event, {"x": 1}))

        assert collector.events == [event]
        assert collector.messages[0].header("x") == 1

    def test_clear(self):
        collector = CollectingMessageConsumer()
        collector.handle(Message(DocumentRenamed(name="a")))

        collector.clear()

        assert collector.messages == []


class NotSerializable:
    pass


class EventWithAwkwardPayload(DomainEvent):
    amount: Decimal
    at: datetime


class TestSerializingMessageConsumer:
    """Tests for the JSON round-trip check."""

    def test_accepts_domain_event_with_uuid_headers(self):
        message = Message(
            DocumentOpened(document_id=uuid4()),
            {Header.AGGREGATE_ROOT_ID: uuid4(), Header.AGGREGATE_ROOT_VERSION: 1},
        )

        SerializingMessageConsumer().handle(message)

    def test_accepts_decimal_and_datetime_payload(self):
        event = EventWithAwkwardPayload(amount=Decimal("1.50"), at=datetime.now(UTC))

        SerializingMessageConsumer().handle(Message(event))

    def test_accepts_dataclass_payload(self):
        SerializingMessageConsumer().handle(Message(CounterIncremented(increment=2)))

    def test_rejects_unserializable_payload(self):
        with pytest.raises(SerializationError) as exc_info:
            SerializingMessageConsumer().handle(Message(NotSerializable()))

        assert exc_info.value.event_type == "NotSerializable"
        assert "NotSerializable" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_opaque_header_values_are_accepted(self):
        """Aggregate ids of any type render through str()."""
        message = Message(
            DocumentRenamed(name="a"),
            {Header.AGGREGATE_ROOT_ID: SkuId("A1"), "other": NotSerializable()},
        )

        SerializingMessageConsumer().handle(message)

    def test_payload_with_to_dict_is_accepted(self):
        SerializingMessageConsumer().handle(Message(SlottedRenamed("a")))


class SkuId:
    """Value-object id with no JSON form of its own."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SkuId) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value


class SlottedRenamed:
    """Slotted, non-dataclass event that exposes to_dict()."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SlottedRenamed) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def to_dict(self) -> dict:
        return {"name": self.name}
