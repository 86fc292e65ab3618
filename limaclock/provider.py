"""
TimeProvider - current date/time readings in one fixed timezone.

Every reading takes exactly one sample from the injected Clock and converts
it with the IANA zone rules from `zoneinfo`. The aggregate reading
(`current_moment`) derives all of its fields from that single sample.
"""

import logging
import threading
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from limaclock.clock import Clock, SystemClock
from limaclock.constants import DEFAULT_TZ_NAME
from limaclock.domain import (
    CalendarDate,
    MomentSnapshot,
    WallTime,
    WeekdayIndex,
    weekday_index,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class TimezoneConfigError(ValueError):
    """Raised when a timezone name is not in the zone database."""

    pass


def resolve_timezone(tz: str | ZoneInfo) -> ZoneInfo:
    """
    Turn a zone name into a ZoneInfo.

    Raises:
        TimezoneConfigError: If the name is unknown or malformed
    """
    if isinstance(tz, ZoneInfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneConfigError(f"Unknown timezone: {tz!r}") from e


# =============================================================================
# TimeProvider
# =============================================================================


class TimeProvider:
    """
    Reads the clock and reports local wall-clock values for one timezone.

    Usage:
        provider = TimeProvider()  # America/Lima, system clock
        provider.current_date()    # "2024-03-07"
        provider.current_moment()  # MomentSnapshot(...)
    """

    def __init__(
        self,
        timezone: str | ZoneInfo = DEFAULT_TZ_NAME,
        clock: Clock | None = None,
    ):
        self._tz = resolve_timezone(timezone)
        self._clock = clock or SystemClock()
        logger.debug(
            f"TimeProvider ready | tz={self._tz.key} | clock={type(self._clock).__name__}"
        )

    @property
    def timezone(self) -> ZoneInfo:
        return self._tz

    @property
    def clock(self) -> Clock:
        return self._clock

    def now(self) -> datetime:
        """One clock sample converted to the provider's timezone."""
        return self._clock.now().astimezone(self._tz)

    def current_date(self) -> str:
        """Local date as YYYY-MM-DD."""
        return CalendarDate.from_datetime(self.now()).text

    def current_time(self) -> str:
        """Local time as HH:MM:SS."""
        return WallTime.from_datetime(self.now()).text

    def current_weekday(self) -> WeekdayIndex:
        """Local weekday, 0 = Sunday through 6 = Saturday."""
        return weekday_index(self.now())

    def current_moment(self) -> MomentSnapshot:
        """Date, time, weekday and timestamp from a single clock sample."""
        snapshot = MomentSnapshot.from_datetime(self.now())
        logger.debug(f"MOMENT | {snapshot.date} {snapshot.time} | weekday={snapshot.weekday}")
        return snapshot


# =============================================================================
# Module-level convenience functions
# =============================================================================

_default_provider: TimeProvider | None = None
_default_lock = threading.Lock()


def get_default_provider() -> TimeProvider:
    """Shared provider for the default timezone, created on first use."""
    global _default_provider

    if _default_provider is None:
        with _default_lock:
            if _default_provider is None:
                _default_provider = TimeProvider()
    return _default_provider


def current_date() -> str:
    return get_default_provider().current_date()


def current_time() -> str:
    return get_default_provider().current_time()


def current_weekday() -> WeekdayIndex:
    return get_default_provider().current_weekday()


def current_moment() -> MomentSnapshot:
    return get_default_provider().current_moment()
