"""Domain event base class."""

from eventscenario.events.base import DomainEvent, event_type_name

__all__ = ["DomainEvent", "event_type_name"]
