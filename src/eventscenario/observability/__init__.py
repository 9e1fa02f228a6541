"""
Observability utilities for eventscenario.

Tracing is composition-based: repositories and dispatchers accept a Tracer
and fall back to create_tracer(__name__, enable_tracing).
"""

from eventscenario.observability.attributes import (
    ATTR_AGGREGATE_ID,
    ATTR_AGGREGATE_TYPE,
    ATTR_CONSUMER_COUNT,
    ATTR_CONSUMER_NAME,
    ATTR_EVENT_COUNT,
    ATTR_EVENT_TYPE,
    ATTR_EXPECTED_VERSION,
    ATTR_VERSION,
)
from eventscenario.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
)

__all__ = [
    # Tracer
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
    # Attributes
    "ATTR_AGGREGATE_ID",
    "ATTR_AGGREGATE_TYPE",
    "ATTR_EVENT_TYPE",
    "ATTR_EVENT_COUNT",
    "ATTR_VERSION",
    "ATTR_EXPECTED_VERSION",
    "ATTR_CONSUMER_NAME",
    "ATTR_CONSUMER_COUNT",
]
