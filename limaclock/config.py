"""Runtime configuration for limaclock."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from limaclock.clock import Clock
from limaclock.constants import DEFAULT_TZ_NAME, TZ_ENV_VAR
from limaclock.provider import TimeProvider, resolve_timezone


class ClockSettings(BaseModel):
    """Timezone configuration shared by every reading."""
    model_config = ConfigDict(frozen=True)

    timezone: str = DEFAULT_TZ_NAME

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        # TimezoneConfigError is a ValueError, so pydantic reports it as a ValidationError
        resolve_timezone(value)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClockSettings":
        """Read settings from the environment (LIMACLOCK_TZ)."""
        env = os.environ if environ is None else environ
        tz_name = env.get(TZ_ENV_VAR, "").strip()
        if not tz_name:
            return cls()
        return cls(timezone=tz_name)

    def provider(self, clock: Clock | None = None) -> TimeProvider:
        return TimeProvider(timezone=self.timezone, clock=clock)
