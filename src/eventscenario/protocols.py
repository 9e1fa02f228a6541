"""
Protocol definitions for the eventscenario library.

Protocols:
- EventSourcedAggregate: what the aggregate repository needs from an aggregate
- CommandHandler: what a scenario needs from the test driving it
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EventSourcedAggregate(Protocol):
    """
    Protocol for aggregates the repository can persist.

    AggregateRoot satisfies it; so does any object exposing the same
    members.
    """

    @property
    def aggregate_root_id(self) -> Any: ...

    @property
    def version(self) -> int: ...

    def release_events(self) -> list[Any]:
        """Return and clear the events recorded since the last release."""
        ...


@runtime_checkable
class CommandHandler(Protocol):
    """
    Protocol for the object a scenario's when() step invokes.

    Test cases implement handle() to translate the arguments passed to
    when() into calls on the aggregate under test.

    Example:
        >>> class TestAccount(AggregateRootTestCase):
        ...     def handle(self, command: str, *args) -> None:
        ...         account = self.retrieve_aggregate_root(self.aggregate_root_id)
        ...         getattr(account, command)(*args)
        ...         self.persist_aggregate_root(account)
    """

    def handle(self, *arguments: Any) -> None:
        """
        Execute the behaviour under test.

        Raises:
            Exception: Domain failures, captured by the scenario
        """
        ...


__all__ = [
    "EventSourcedAggregate",
    "CommandHandler",
]
