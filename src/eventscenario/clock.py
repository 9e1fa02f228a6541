"""
Time sources for recording messages.

Production wiring uses SystemClock. Scenarios use TestClock, which holds a
single instant that only moves when a test asks it to, so recorded headers
are deterministic.

Example:
    >>> clock = TestClock(datetime(2024, 1, 1, tzinfo=UTC))
    >>> clock.now()
    datetime.datetime(2024, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
    >>> clock.advance(30)
    >>> clock.now().second
    30
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for anything that can tell the current time."""

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


def _as_utc(instant: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


class TestClock:
    """
    Controllable clock for scenario execution.

    The clock starts at the given instant (or the current UTC time truncated
    to whole seconds) and stays there until advance(), move_to() or tick()
    is called. now() never changes the clock.

    Args:
        start: Initial instant. Naive datetimes are interpreted as UTC.
    """

    # Keep pytest from collecting this class as a test
    __test__ = False

    def __init__(self, start: datetime | None = None) -> None:
        if start is None:
            start = datetime.now(UTC).replace(microsecond=0)
        self._now = _as_utc(start)

    def now(self) -> datetime:
        """Return the current simulated instant."""
        return self._now

    def advance(self, delta: timedelta | float) -> None:
        """
        Move the clock forward.

        Args:
            delta: A timedelta or a number of seconds

        Raises:
            ValueError: If delta is negative
        """
        if not isinstance(delta, timedelta):
            delta = timedelta(seconds=delta)
        if delta < timedelta(0):
            raise ValueError(f"Cannot move a TestClock backwards by advancing ({delta})")
        self._now = self._now + delta

    def move_to(self, instant: datetime) -> None:
        """Set the clock to an explicit instant."""
        self._now = _as_utc(instant)

    def tick(self) -> None:
        """Resynchronise the clock with the wall clock."""
        self._now = datetime.now(UTC)

    def __repr__(self) -> str:
        return f"TestClock(now={self._now.isoformat()})"


__all__ = ["Clock", "SystemClock", "TestClock"]
