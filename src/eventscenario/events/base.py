"""
Base class for domain events.

Events are immutable records of things that have happened in the system.
Unlike a persisted envelope, an event carries only its payload: ids,
versions and recording timestamps live in Message headers, so two events
with the same type and the same field values compare equal.
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict


class DomainEvent(BaseModel):
    """
    Base class for domain event payloads.

    Events are frozen pydantic models. Equality is structural: pydantic
    compares the concrete class and every field, which is exactly what
    scenario assertions rely on.

    The event_type class variable defaults to the class name and is used
    for the event_type header when the event is recorded.

    Example:
        >>> class OrderPlaced(DomainEvent):
        ...     order_id: UUID
        ...     total: Decimal
        ...
        >>> OrderPlaced(order_id=oid, total=Decimal("10")) == OrderPlaced(
        ...     order_id=oid, total=Decimal("10")
        ... )
        True
    """

    model_config = ConfigDict(frozen=True)

    event_type: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "event_type" not in cls.__dict__ or not cls.__dict__["event_type"]:
            cls.event_type = cls.__name__

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the payload to a JSON-compatible dictionary.

        Returns:
            Dictionary with UUIDs, datetimes and decimals rendered as strings
        """
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """
        Create event from dictionary.

        Raises:
            ValidationError: If data doesn't match event schema
        """
        return cls.model_validate(data)

    def __str__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self)
        return f"{self.event_type}({fields})"


def event_type_name(event: object) -> str:
    """Return the type name recorded for an event, DomainEvent or not."""
    name = getattr(type(event), "event_type", None)
    if isinstance(name, str) and name:
        return name
    return type(event).__name__


__all__ = ["DomainEvent", "event_type_name"]
