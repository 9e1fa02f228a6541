"""
Message repository interface.

The aggregate repository is written against this contract, so a durable
store and the in-memory log used by scenarios are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Any

from eventscenario.messages import Commit, Message


class MessageRepository(ABC):
    """
    Abstract store of recorded messages, grouped by aggregate.

    Implementations append commits and return an aggregate's full history
    in recording order.

    Example:
        >>> repository.append(order_id, Commit(order_id, 0, (message,)))
        >>> [m.event for m in repository.history(order_id)]
        [OrderPlaced(...)]
    """

    @abstractmethod
    def append(self, aggregate_root_id: Any, commit: Commit) -> None:
        """
        Append a commit's messages to an aggregate's history.

        Args:
            aggregate_root_id: The aggregate the commit belongs to
            commit: Messages to append, in order
        """
        pass

    @abstractmethod
    def history(self, aggregate_root_id: Any) -> tuple[Message, ...]:
        """
        Get every message recorded for an aggregate.

        Args:
            aggregate_root_id: The aggregate to read

        Returns:
            Messages in recording order; empty if the aggregate is unknown
        """
        pass

    def retrieve_all(self, aggregate_root_id: Any) -> tuple[Any, ...]:
        """Event payloads of history(aggregate_root_id)."""
        return tuple(message.event for message in self.history(aggregate_root_id))

    def version_of(self, aggregate_root_id: Any) -> int:
        """Number of messages recorded for an aggregate."""
        return len(self.history(aggregate_root_id))


__all__ = ["MessageRepository"]
