"""
Instant sources for TimeProvider.

A Clock returns the current instant as a timezone-aware UTC datetime.
Localization happens in TimeProvider, never here.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for anything that can read the current instant."""

    def now(self) -> datetime:
        """Return the current instant as an aware UTC datetime."""
        ...


class SystemClock:
    """Host wall clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock pinned to a single instant, for tests and replays.

    Args:
        instant: Aware datetime in any zone; stored as UTC

    Raises:
        ValueError: If `instant` is naive
    """

    def __init__(self, instant: datetime):
        self._instant = self._to_utc(instant)

    @staticmethod
    def _to_utc(instant: datetime) -> datetime:
        if instant.tzinfo is None or instant.utcoffset() is None:
            raise ValueError(f"FixedClock needs an aware datetime, got {instant!r}")
        return instant.astimezone(timezone.utc)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        """Move the clock to another instant."""
        self._instant = self._to_utc(instant)

    def advance(self, delta: timedelta) -> None:
        self._instant = self._instant + delta
