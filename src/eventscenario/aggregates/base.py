"""
Base classes for event-sourced aggregates.

Aggregates are the consistency boundaries in event sourcing.
They maintain their state by applying events and record new events
when commands are executed.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Self

from eventscenario.exceptions import UnhandledEventError

# "ignore" | "warn" | "error"
UnregisteredEventHandling = str

logger = logging.getLogger(__name__)


class AggregateRoot(ABC):
    """
    Base class for event-sourced aggregate roots.

    Aggregates:
    - Maintain their state by applying events
    - Queue recorded events until a repository persists them
    - Enforce business rules before recording anything

    Subclasses must implement `_apply(event)`.

    Example:
        >>> class Account(AggregateRoot):
        ...     aggregate_type = "Account"
        ...
        ...     def __init__(self, aggregate_root_id):
        ...         super().__init__(aggregate_root_id)
        ...         self.balance = 0
        ...
        ...     @classmethod
        ...     def open(cls, account_id) -> "Account":
        ...         account = cls.new(account_id)
        ...         account.record_that(AccountOpened(account_id=account_id))
        ...         return account
        ...
        ...     def _apply(self, event) -> None:
        ...         if isinstance(event, MoneyDeposited):
        ...             self.balance += event.amount

    Attributes:
        aggregate_type: String identifier for this aggregate type; defaults
                        to the class name
        aggregate_root_id: Identity of this aggregate instance
        version: Number of events applied, recorded or replayed
    """

    aggregate_type: str = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("aggregate_type"):
            cls.aggregate_type = cls.__name__

    def __init__(self, aggregate_root_id: Any) -> None:
        """
        Initialize aggregate root.

        Args:
            aggregate_root_id: Unique identifier for this aggregate
        """
        self._aggregate_root_id = aggregate_root_id
        self._version = 0
        self._recorded_events: list[Any] = []

    @classmethod
    def new(cls, aggregate_root_id: Any) -> Self:
        """Create an aggregate with no history."""
        return cls(aggregate_root_id)

    @classmethod
    def reconstitute_from_events(cls, aggregate_root_id: Any, events: Iterable[Any]) -> Self:
        """
        Rebuild an aggregate by replaying its history.

        Args:
            aggregate_root_id: Identity of the aggregate
            events: Historical events in recording order

        Returns:
            Aggregate with every event applied and nothing uncommitted
        """
        aggregate = cls(aggregate_root_id)
        for event in events:
            aggregate.apply_event(event)
        return aggregate

    @property
    def aggregate_root_id(self) -> Any:
        """Get the unique identifier for this aggregate."""
        return self._aggregate_root_id

    @property
    def version(self) -> int:
        """Get the current version (number of events applied)."""
        return self._version

    @property
    def uncommitted_events(self) -> list[Any]:
        """
        Get events recorded but not yet released.

        Returns a copy to prevent external modification.
        """
        return self._recorded_events.copy()

    @property
    def has_uncommitted_events(self) -> bool:
        """Check if there are events waiting to be persisted."""
        return len(self._recorded_events) > 0

    def apply_event(self, event: Any) -> None:
        """
        Apply an event to the aggregate's state and bump its version.

        Used directly when replaying history; record_that() calls it for
        new events.
        """
        self._apply(event)
        self._version += 1

    def record_that(self, event: Any) -> None:
        """
        Apply a new event and queue it for persistence.

        Example:
            >>> def deposit(self, amount: int) -> None:
            ...     if amount <= 0:
            ...         raise InvalidAmount(amount)
            ...     self.record_that(MoneyDeposited(amount=amount))
        """
        self.apply_event(event)
        self._recorded_events.append(event)

    def release_events(self) -> list[Any]:
        """
        Clear and return all uncommitted events.

        Called by the repository when persisting.

        Returns:
            Events in the order they were recorded
        """
        events = self._recorded_events.copy()
        self._recorded_events.clear()
        return events

    @abstractmethod
    def _apply(self, event: Any) -> None:
        """
        Apply event to update aggregate state.

        Args:
            event: The domain event to apply
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"id={self._aggregate_root_id}, "
            f"version={self._version}, "
            f"uncommitted={len(self._recorded_events)})"
        )

    def __eq__(self, other: object) -> bool:
        """Check equality based on aggregate ID."""
        if not isinstance(other, AggregateRoot):
            return NotImplemented
        return self._aggregate_root_id == other._aggregate_root_id

    def __hash__(self) -> int:
        return hash(self._aggregate_root_id)


class DeclarativeAggregate(AggregateRoot, ABC):
    """
    Aggregate that uses decorators to register event handlers.

    Attributes:
        unregistered_event_handling: Controls behavior when an event has no
            registered handler. Options:
            - "ignore": Silently ignore unhandled events (default)
            - "warn": Log a warning for unhandled events
            - "error": Raise UnhandledEventError for unhandled events

    Example:
        >>> class Account(DeclarativeAggregate):
        ...     unregistered_event_handling = "error"
        ...
        ...     @handles(AccountOpened)
        ...     def _on_opened(self, event: AccountOpened) -> None:
        ...         self.open = True
    """

    unregistered_event_handling: UnregisteredEventHandling = "ignore"

    _event_handlers: dict[type, str] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Initialize handler registry for each subclass."""
        super().__init_subclass__(**kwargs)
        cls._event_handlers = {}
        for name in dir(cls):
            try:
                method = getattr(cls, name)
            except AttributeError:
                continue
            if hasattr(method, "_handles_event_type"):
                cls._event_handlers[method._handles_event_type] = name

    def _apply(self, event: Any) -> None:
        """
        Apply event using registered handlers.

        Raises:
            UnhandledEventError: If unregistered_event_handling="error" and no handler found
        """
        handler_name = self._event_handlers.get(type(event))
        if handler_name:
            getattr(self, handler_name)(event)
        else:
            self._handle_unregistered_event(event)

    def _handle_unregistered_event(self, event: Any) -> None:
        event_type = type(event)
        available_handlers = [et.__name__ for et in self._event_handlers]

        if self.unregistered_event_handling == "error":
            raise UnhandledEventError(
                event_type=event_type.__name__,
                handler_class=self.__class__.__name__,
                available_handlers=available_handlers,
            )
        elif self.unregistered_event_handling == "warn":
            logger.warning(
                "No handler registered for event type %s in %s. Available handlers: %s.",
                event_type.__name__,
                self.__class__.__name__,
                ", ".join(available_handlers) if available_handlers else "none",
                extra={
                    "event_type": event_type.__name__,
                    "handler_class": self.__class__.__name__,
                    "available_handlers": available_handlers,
                },
            )
        # "ignore" mode: do nothing


__all__ = [
    "AggregateRoot",
    "DeclarativeAggregate",
    "UnregisteredEventHandling",
]
