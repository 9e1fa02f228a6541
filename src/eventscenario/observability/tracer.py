"""
Span tracing for the message log, the aggregate repository and dispatch.

Each of those components takes an optional ``tracer`` argument and
otherwise builds one with create_tracer(__name__, enable_tracing). The
scenario harness wires everything with enable_tracing=False, so a test run
never touches the OpenTelemetry API; a MockTracer handed to a component
records which spans it opened.

Example:
    >>> tracer = MockTracer()
    >>> log = InMemoryMessageRepository(tracer=tracer)
    >>> log.append(account_id, commit)
    >>> tracer.span_names
    ['eventscenario.message_repository.append']
"""

from __future__ import annotations

import contextlib
from collections.abc import Generator
from contextlib import AbstractContextManager
from typing import Any, Protocol, runtime_checkable

from opentelemetry import trace
from opentelemetry.trace import Span


@runtime_checkable
class Tracer(Protocol):
    """
    What a component needs to open spans around its operations.

    Span names are dotted and start with ``eventscenario.``; attribute
    keys come from eventscenario.observability.attributes.
    """

    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> AbstractContextManager[Span | None]:
        """
        Open a span for the duration of a with block.

        Args:
            name: Span name, e.g. "eventscenario.repository.persist"
            attributes: Attributes to set on the span

        Returns:
            Context manager yielding the span, or None when nothing is recorded
        """
        ...

    @property
    def enabled(self) -> bool:
        """Whether building span attributes is worth the effort."""
        ...


class NullTracer:
    """Tracer used when tracing is switched off. Spans yield None."""

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Generator[None, None, None]:
        yield None

    @property
    def enabled(self) -> bool:
        return False


class OpenTelemetryTracer:
    """
    Opens spans through the OpenTelemetry API.

    Spans go to whatever TracerProvider the application configured; with
    no provider configured the API hands out non-recording spans.

    Args:
        tracer_name: Instrumentation scope, normally the calling module's __name__
    """

    def __init__(self, tracer_name: str) -> None:
        self._tracer = trace.get_tracer(tracer_name)

    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> AbstractContextManager[Span | None]:
        return self._tracer.start_as_current_span(
            name,
            attributes=attributes or {},
        )

    @property
    def enabled(self) -> bool:
        return True


class MockTracer:
    """
    Records (name, attributes) for every span opened, in order.

    Example:
        >>> tracer = MockTracer()
        >>> dispatcher = SynchronousMessageDispatcher(consumer, tracer=tracer)
        >>> dispatcher.dispatch(message)
        >>> tracer.span_names
        ['eventscenario.dispatcher.dispatch']
        >>> tracer.spans[0][1][ATTR_CONSUMER_COUNT]
        1
    """

    def __init__(self) -> None:
        self.spans: list[tuple[str, dict[str, Any] | None]] = []

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Generator[None, None, None]:
        self.spans.append((name, attributes))
        yield None

    @property
    def enabled(self) -> bool:
        # Components only compute attributes for enabled tracers
        return True

    @property
    def span_names(self) -> list[str]:
        return [name for name, _ in self.spans]

    def clear(self) -> None:
        """Forget the spans recorded so far."""
        self.spans.clear()


def create_tracer(
    name: str,
    enable_tracing: bool = True,
) -> Tracer:
    """
    Pick the tracer a component falls back to when none is injected.

    Args:
        name: Instrumentation scope for the OpenTelemetry tracer
        enable_tracing: False yields a NullTracer

    Returns:
        OpenTelemetryTracer when enabled, NullTracer otherwise
    """
    if enable_tracing:
        return OpenTelemetryTracer(name)
    return NullTracer()


__all__ = [
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
]
