"""
JSON serialization utilities for recorded messages.

Used by SerializingMessageConsumer to prove that every event a scenario
records could be written to a real store.

Example:
    >>> from eventscenario.serialization import json_dumps, json_loads
    >>> from uuid import uuid4
    >>>
    >>> json_str = json_dumps({"id": uuid4()})
    >>> parsed = json_loads(json_str)
"""

import dataclasses
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel


class EventScenarioJSONEncoder(json.JSONEncoder):
    """
    JSON encoder that handles the value types events commonly carry.

    Supports UUIDs, datetimes and dates (ISO 8601), decimals (string),
    enums (value), pydantic models (JSON-mode dump), dataclasses and any
    object exposing a to_dict() method.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, datetime | date):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        to_dict = getattr(obj, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        return super().default(obj)


class HeaderJSONEncoder(EventScenarioJSONEncoder):
    """
    Encoder for message headers.

    Header values such as aggregate ids are opaque: anything the base
    encoder can't render is written as str(value), the way a store keeps
    ids in a text column.
    """

    def default(self, obj: Any) -> Any:
        try:
            return super().default(obj)
        except TypeError:
            return str(obj)


def json_dumps(obj: Any, cls: type[json.JSONEncoder] = EventScenarioJSONEncoder) -> str:
    """Serialize obj to a JSON string (EventScenarioJSONEncoder by default)."""
    return json.dumps(obj, cls=cls)


def json_loads(s: str) -> Any:
    """
    Deserialize a JSON string.

    UUID and datetime strings are NOT converted back to their original
    types; that's the application's responsibility.
    """
    return json.loads(s)


__all__ = [
    "EventScenarioJSONEncoder",
    "HeaderJSONEncoder",
    "json_dumps",
    "json_loads",
]
