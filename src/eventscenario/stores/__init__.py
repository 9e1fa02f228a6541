"""Message repositories: the abstract contract and the in-memory log."""

from eventscenario.stores.in_memory import InMemoryMessageRepository
from eventscenario.stores.interface import MessageRepository

__all__ = [
    "MessageRepository",
    "InMemoryMessageRepository",
]
