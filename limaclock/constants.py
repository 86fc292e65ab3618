"""Shared constants for limaclock.

Centralizes values used across multiple modules to ensure consistency.
"""

from zoneinfo import ZoneInfo

# Timezone for all wall-clock values (UTC-5, no DST)
DEFAULT_TZ_NAME = "America/Lima"
DEFAULT_TZ = ZoneInfo(DEFAULT_TZ_NAME)

# Text layouts
DATE_SEPARATOR = "-"
DISPLAY_DATE_SEPARATOR = "/"
TIME_SEPARATOR = ":"
TIME_DISPLAY_WIDTH = 8  # HH:MM:SS

# Environment variable read by ClockSettings.from_env()
TZ_ENV_VAR = "LIMACLOCK_TZ"
