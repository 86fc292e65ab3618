import re
from datetime import datetime
from typing import Annotated, NewType

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from limaclock.constants import (
    DATE_SEPARATOR,
    DISPLAY_DATE_SEPARATOR,
    TIME_SEPARATOR,
)

# 0 = Sunday ... 6 = Saturday
WeekdayIndex = NewType("WeekdayIndex", int)

_DATE_RE = re.compile(r"^(\d+)-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{2}):(\d{2}):(\d{2})$")


def weekday_index(moment: datetime) -> WeekdayIndex:
    """Sunday-based weekday of a (localized) datetime."""
    return WeekdayIndex(moment.isoweekday() % 7)


class CalendarDate(BaseModel):
    """A local calendar day."""
    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=0)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "CalendarDate":
        return cls(year=moment.year, month=moment.month, day=moment.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Strictly parse `YYYY-MM-DD`.

        Raises:
            ValueError: If the text is not date-shaped or a field is out of range
        """
        match = _DATE_RE.match(text)
        if match is None:
            raise ValueError(f"Not a YYYY-MM-DD date: {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year=year, month=month, day=day)

    @computed_field
    @property
    def text(self) -> str:
        """Serialized form, e.g. 2024-03-07."""
        return f"{self.year}{DATE_SEPARATOR}{self.month:02d}{DATE_SEPARATOR}{self.day:02d}"

    def display(self) -> str:
        """Display form, e.g. 07/03/2024."""
        return DISPLAY_DATE_SEPARATOR.join(
            (f"{self.day:02d}", f"{self.month:02d}", str(self.year))
        )

    def __str__(self) -> str:
        return self.text


class WallTime(BaseModel):
    """A local wall-clock time, second resolution."""
    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    second: int = Field(ge=0, le=59)

    @classmethod
    def from_datetime(cls, moment: datetime) -> "WallTime":
        return cls(hour=moment.hour, minute=moment.minute, second=moment.second)

    @classmethod
    def parse(cls, text: str) -> "WallTime":
        """
        Strictly parse `HH:MM:SS`.

        Raises:
            ValueError: If the text is not time-shaped or a field is out of range
        """
        match = _TIME_RE.match(text)
        if match is None:
            raise ValueError(f"Not an HH:MM:SS time: {text!r}")
        hour, minute, second = (int(part) for part in match.groups())
        return cls(hour=hour, minute=minute, second=second)

    @computed_field
    @property
    def text(self) -> str:
        """Serialized form, e.g. 14:05:09."""
        return TIME_SEPARATOR.join(
            f"{part:02d}" for part in (self.hour, self.minute, self.second)
        )

    def display(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class MomentSnapshot(BaseModel):
    """
    Date, time and weekday of one instant in a fixed timezone.

    All fields come from `timestamp`; construction fails if they disagree.
    """
    model_config = ConfigDict(frozen=True)

    date: str
    time: str
    weekday: Annotated[int, Field(ge=0, le=6)]
    timestamp: datetime

    @classmethod
    def from_datetime(cls, moment: datetime) -> "MomentSnapshot":
        """Build a snapshot from a single localized reading."""
        return cls(
            date=CalendarDate.from_datetime(moment).text,
            time=WallTime.from_datetime(moment).text,
            weekday=weekday_index(moment),
            timestamp=moment,
        )

    @model_validator(mode="after")
    def check_consistent(self) -> "MomentSnapshot":
        expected_date = CalendarDate.from_datetime(self.timestamp).text
        expected_time = WallTime.from_datetime(self.timestamp).text
        expected_weekday = weekday_index(self.timestamp)
        if (self.date, self.time, self.weekday) != (expected_date, expected_time, expected_weekday):
            raise ValueError(
                f"Snapshot fields ({self.date}, {self.time}, {self.weekday}) "
                f"do not match timestamp {self.timestamp.isoformat()}"
            )
        return self

    @property
    def calendar_date(self) -> CalendarDate:
        return CalendarDate.from_datetime(self.timestamp)

    @property
    def wall_time(self) -> WallTime:
        return WallTime.from_datetime(self.timestamp)
