"""
Standard span attributes for eventscenario.

Example:
    >>> from eventscenario.observability.attributes import ATTR_AGGREGATE_ID
    >>>
    >>> with tracer.span(
    ...     "eventscenario.repository.persist",
    ...     {ATTR_AGGREGATE_ID: str(aggregate_root_id)},
    ... ):
    ...     pass
"""

# =============================================================================
# Aggregate Attributes
# =============================================================================

ATTR_AGGREGATE_ID = "eventscenario.aggregate.id"
"""Identifier of the aggregate instance (string)."""

ATTR_AGGREGATE_TYPE = "eventscenario.aggregate.type"
"""Type name of the aggregate (e.g., 'Order', 'User')."""

# =============================================================================
# Event Attributes
# =============================================================================

ATTR_EVENT_TYPE = "eventscenario.event.type"
"""Type name of the event (e.g., 'OrderCreated')."""

ATTR_EVENT_COUNT = "eventscenario.event.count"
"""Number of events in an operation (integer)."""

# =============================================================================
# Version Attributes
# =============================================================================

ATTR_VERSION = "eventscenario.version"
"""Current version of an aggregate (integer)."""

ATTR_EXPECTED_VERSION = "eventscenario.expected_version"
"""Version before a commit (integer)."""

# =============================================================================
# Dispatch Attributes
# =============================================================================

ATTR_CONSUMER_NAME = "eventscenario.consumer.name"
"""Name of the message consumer being invoked (string)."""

ATTR_CONSUMER_COUNT = "eventscenario.consumer.count"
"""Number of consumers registered with a dispatcher (integer)."""


__all__ = [
    "ATTR_AGGREGATE_ID",
    "ATTR_AGGREGATE_TYPE",
    "ATTR_EVENT_TYPE",
    "ATTR_EVENT_COUNT",
    "ATTR_VERSION",
    "ATTR_EXPECTED_VERSION",
    "ATTR_CONSUMER_NAME",
    "ATTR_CONSUMER_COUNT",
]
