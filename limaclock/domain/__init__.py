"""Value types for limaclock.

Pure, immutable (frozen Pydantic) models with no I/O.

Usage:
    from limaclock.domain import CalendarDate, WallTime, MomentSnapshot
"""

from .time import (
    WeekdayIndex,
    weekday_index,
    CalendarDate,
    WallTime,
    MomentSnapshot,
)

__all__ = [
    "WeekdayIndex",
    "weekday_index",
    "CalendarDate",
    "WallTime",
    "MomentSnapshot",
]
