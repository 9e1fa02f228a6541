"""Library exceptions for the eventscenario package."""

from typing import Any


class EventScenarioError(Exception):
    """Base exception for eventscenario library."""

    pass


class HarnessConfigurationError(EventScenarioError):
    """
    Raised when a scenario is wired or driven incorrectly.

    This signals a broken test rather than a domain failure, so the
    scenario controller never captures it as the outcome of ``when``.
    """

    pass


class ScenarioPhaseError(HarnessConfigurationError):
    """Raised when a scenario step is called out of order."""

    def __init__(self, operation: str, phase: str, allowed: list[str]) -> None:
        self.operation = operation
        self.phase = phase
        self.allowed = allowed
        super().__init__(
            f"Cannot call {operation}() while the scenario is {phase}; "
            f"allowed phases: {', '.join(allowed)}"
        )


class AggregateNotFoundError(EventScenarioError):
    """Raised when an aggregate has no recorded history."""

    def __init__(self, aggregate_root_id: Any, aggregate_root_type: str | None = None) -> None:
        self.aggregate_root_id = aggregate_root_id
        self.aggregate_root_type = aggregate_root_type
        type_info = f" of type {aggregate_root_type}" if aggregate_root_type else ""
        super().__init__(f"Aggregate{type_info} not found: {aggregate_root_id}")


class UnhandledEventError(EventScenarioError):
    """
    Raised when an event has no registered handler and strict mode is enabled.

    This error occurs in DeclarativeAggregate when an event type is applied
    that has no @handles decorator and the class has
    unregistered_event_handling set to "error".

    Attributes:
        event_type: The name of the event type that wasn't handled
        handler_class: Name of the aggregate class
        available_handlers: List of event type names that have handlers
    """

    def __init__(
        self,
        event_type: str,
        handler_class: str,
        available_handlers: list[str],
    ) -> None:
        self.event_type = event_type
        self.handler_class = handler_class
        self.available_handlers = available_handlers
        handlers_str = ", ".join(available_handlers) if available_handlers else "none"
        super().__init__(
            f"No handler registered for event type '{event_type}' "
            f"in {handler_class}. "
            f"Available handlers: {handlers_str}. "
            f"Add @handles({event_type}) decorator or set "
            f"unregistered_event_handling='ignore' or 'warn'."
        )


class SerializationError(EventScenarioError):
    """Raised when a recorded event cannot be serialized."""

    def __init__(self, event_type: str, message: str) -> None:
        self.event_type = event_type
        super().__init__(f"Serialization error for {event_type}: {message}")


class FailedToDetectExpectedFailure(AssertionError):
    """Raised when a scenario expected a failure that ``when`` never raised."""

    def __init__(self, expected: BaseException) -> None:
        self.expected = expected
        super().__init__(
            f"Expected failure {type(expected).__name__}({str(expected)!r}) was not raised."
        )

    @classmethod
    def expected_failure(cls, expected: BaseException) -> "FailedToDetectExpectedFailure":
        return cls(expected)


class DomainFailure(EventScenarioError):
    """
    Convenience base for domain errors that carry a numeric code.

    Any exception can be used as a scenario failure; this class only adds
    the ``code`` attribute that the failure matcher compares.

    Example:
        >>> class AccountFrozen(DomainFailure):
        ...     pass
        >>> raise AccountFrozen("account is frozen", code=423)
    """

    def __init__(self, message: str = "", code: int = 0) -> None:
        self.code = code
        super().__init__(message)


__all__ = [
    "EventScenarioError",
    "HarnessConfigurationError",
    "ScenarioPhaseError",
    "AggregateNotFoundError",
    "UnhandledEventError",
    "SerializationError",
    "FailedToDetectExpectedFailure",
    "DomainFailure",
]
