"""
limaclock - wall-clock readings in a fixed timezone (America/Lima, UTC-5).

Main entry points:
- TimeProvider: readings for one timezone from an injectable Clock
- current_date / current_time / current_weekday / current_moment:
  shortcuts on a shared America/Lima provider
- format_date_for_display / format_time_for_display: display helpers

Example usage:
    from limaclock import TimeProvider, format_date_for_display

    provider = TimeProvider()
    moment = provider.current_moment()
    print(format_date_for_display(moment.date), moment.time)
"""

__version__ = "0.1.0"

from .clock import Clock, SystemClock, FixedClock
from .domain import CalendarDate, WallTime, MomentSnapshot, WeekdayIndex
from .provider import (
    TimeProvider,
    TimezoneConfigError,
    resolve_timezone,
    get_default_provider,
    current_date,
    current_time,
    current_weekday,
    current_moment,
)
from .formatting import format_date_for_display, format_time_for_display
from .config import ClockSettings

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "CalendarDate",
    "WallTime",
    "MomentSnapshot",
    "WeekdayIndex",
    "TimeProvider",
    "TimezoneConfigError",
    "resolve_timezone",
    "get_default_provider",
    "current_date",
    "current_time",
    "current_weekday",
    "current_moment",
    "format_date_for_display",
    "format_time_for_display",
    "ClockSettings",
]
