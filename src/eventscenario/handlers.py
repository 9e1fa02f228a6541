"""
Event handler decorators.

The @handles decorator marks DeclarativeAggregate methods as the appliers
for a specific event type.

Example:
    >>> from eventscenario.handlers import handles
    >>> # or: from eventscenario import handles
"""

from collections.abc import Callable
from typing import Any, TypeVar

# Preserves the exact type of the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handles(event_type: type) -> Callable[[F], F]:
    """
    Decorator to mark a method as the handler for a specific event type.

    The event type is attached to the function and discovered when the
    aggregate class is created.

    Args:
        event_type: The event class this handler applies

    Example:
        >>> class Account(DeclarativeAggregate):
        ...     @handles(AccountOpened)
        ...     def _on_opened(self, event: AccountOpened) -> None:
        ...         self.owner = event.owner
    """

    def decorator(func: F) -> F:
        func._handles_event_type = event_type  # type: ignore[attr-defined]
        return func

    return decorator


def get_handled_event_type(func: Callable[..., Any]) -> type | None:
    """Return the event type a function was decorated with, if any."""
    return getattr(func, "_handles_event_type", None)


__all__ = ["handles", "get_handled_event_type"]
