"""
Display formatters for date and time text.

Both functions are best-effort: they never validate and never raise for a
string argument. Use CalendarDate.parse / WallTime.parse for strict input.
"""

from limaclock.constants import (
    DATE_SEPARATOR,
    DISPLAY_DATE_SEPARATOR,
    TIME_DISPLAY_WIDTH,
)


def format_date_for_display(date: str) -> str:
    """
    Reorder YYYY-MM-DD into DD/MM/YYYY.

    Missing parts come out empty and extra parts are dropped,
    e.g. "2024-03" -> "/03/2024".
    """
    parts = date.split(DATE_SEPARATOR)
    year, month, day = (parts + ["", ""])[:3]
    return DISPLAY_DATE_SEPARATOR.join((day, month, year))


def format_time_for_display(time: str) -> str:
    """First 8 characters (HH:MM:SS); shorter input is returned as is."""
    return time[:TIME_DISPLAY_WIDTH]
