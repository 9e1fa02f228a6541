"""
Shared test event types and domain failures.

- Document events: DocumentOpened, DocumentRenamed, DocumentLinked, DocumentArchived
- Counter events: CounterIncremented, CounterReset
- Failures: DocumentNotOpen, InvalidDocumentName, DocumentArchivedFailure
"""

from dataclasses import dataclass
from uuid import UUID

from eventscenario.events.base import DomainEvent
from eventscenario.exceptions import DomainFailure

# =============================================================================
# Document Events - the aggregate used by most scenario tests
# =============================================================================


class DocumentOpened(DomainEvent):
    """A document was opened."""

    document_id: UUID


class DocumentRenamed(DomainEvent):
    """A document was given a new name."""

    name: str


class DocumentLinked(DomainEvent):
    """A document now links to another document."""

    target_id: UUID


class DocumentArchived(DomainEvent):
    """A document was archived."""

    event_type = "document_archived"


# =============================================================================
# Counter Events - plain dataclasses, not DomainEvent subclasses
# =============================================================================


@dataclass(frozen=True)
class CounterIncremented:
    """Event for incrementing a counter."""

    increment: int = 1


@dataclass(frozen=True)
class CounterReset:
    """Event for resetting a counter to zero."""


# =============================================================================
# Domain Failures
# =============================================================================


class DocumentNotOpen(DomainFailure):
    """Raised when a command needs an open document."""


class InvalidDocumentName(DomainFailure):
    """Raised when a document name is rejected."""


class DocumentIsArchived(DomainFailure):
    """Raised when an archived document is changed."""


class SpecificInvalidDocumentName(InvalidDocumentName):
    """A more specific naming failure, for kind-matching tests."""
