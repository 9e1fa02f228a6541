"""
Shared test fixtures for the eventscenario library.

Usage:
    from tests.fixtures import (
        DocumentAggregate,
        DocumentOpened,
        DocumentRenamed,
        CounterAggregate,
        CounterIncremented,
    )
"""

from tests.fixtures.aggregates import CounterAggregate, DocumentAggregate
from tests.fixtures.events import (
    CounterIncremented,
    CounterReset,
    DocumentArchived,
    DocumentIsArchived,
    DocumentLinked,
    DocumentNotOpen,
    DocumentOpened,
    DocumentRenamed,
    InvalidDocumentName,
    SpecificInvalidDocumentName,
)
from tests.fixtures.handlers import DocumentCommandHandler

__all__ = [
    # Aggregates
    "DocumentAggregate",
    "CounterAggregate",
    # Events
    "DocumentOpened",
    "DocumentRenamed",
    "DocumentLinked",
    "DocumentArchived",
    "CounterIncremented",
    "CounterReset",
    # Failures
    "DocumentNotOpen",
    "InvalidDocumentName",
    "DocumentIsArchived",
    "SpecificInvalidDocumentName",
    # Handlers
    "DocumentCommandHandler",
]
