"""Serialization helpers for eventscenario."""

from eventscenario.serialization.json import (
    EventScenarioJSONEncoder,
    HeaderJSONEncoder,
    json_dumps,
    json_loads,
)

__all__ = [
    "EventScenarioJSONEncoder",
    "HeaderJSONEncoder",
    "json_dumps",
    "json_loads",
]
