"""Local calendar-day helpers.

Every aggregation works on local calendar days named by ``YYYY-MM-DD``
strings. Parsed days are anchored at noon so that date-only comparisons
are never shifted by DST transitions or sub-second rounding.
"""

import re
from datetime import MAXYEAR, MINYEAR, date, datetime, time
from typing import Optional, Union

from pydantic import BaseModel, Field

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

ANCHOR_TIME = time(12, 0, 0)

_DAY_ID_PATTERN = re.compile(r"(\d+)-(\d+)-(\d+)", re.ASCII)


class CalendarDay(BaseModel):
    """A local calendar day."""

    year: int = Field(..., ge=1, le=9999, description="Calendar year")
    month: int = Field(..., ge=1, le=12, description="Month of year (1-12)")
    day: int = Field(..., ge=1, le=31, description="Day of month")

    model_config = {"frozen": True}

    @property
    def anchor(self) -> datetime:
        """The day at noon local time."""
        return datetime.combine(self.as_date(), ANCHOR_TIME)

    @property
    def month_index(self) -> int:
        """Zero-based month (Jan=0 ... Dec=11)."""
        return self.month - 1

    @property
    def weekday_index(self) -> int:
        """Weekday with Sunday=0 ... Saturday=6."""
        # date.weekday() is Monday=0
        return (self.as_date().weekday() + 1) % 7

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


def to_local_day_id(value: Union[date, datetime, CalendarDay]) -> str:
    """Format a day as ``YYYY-MM-DD`` from its local calendar fields.

    Args:
        value: A date, a (naive or aware) datetime, or a CalendarDay.
            Datetimes are not converted to UTC first.

    Returns:
        Zero-padded day identifier.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_local_day_id(text: Optional[str]) -> Optional[CalendarDay]:
    """Parse a strict numeric ``Y-M-D`` identifier.

    Args:
        text: Day identifier such as ``2024-01-05``.

    Returns:
        The CalendarDay, or None when a component is missing, zero,
        non-numeric, or the triple does not name a real day.
    """
    if not isinstance(text, str):
        return None
    match = _DAY_ID_PATTERN.fullmatch(text.strip())
    if match is None:
        return None

    try:
        year, month, day = (int(part) for part in match.groups())
        if not year or not month or not day:
            return None
        date(year, month, day)
    except (ValueError, OverflowError):
        return None
    return CalendarDay(year=year, month=month, day=day)


def is_supported_year(year: int) -> bool:
    return MINYEAR <= year <= MAXYEAR


def start_of_year(year: int) -> datetime:
    """Jan 1 of ``year`` at local midnight.

    Raises:
        ValueError: If ``year`` is outside 1..9999.
    """
    return datetime(year, 1, 1, 0, 0, 0)


def end_of_day(value: Union[date, datetime]) -> datetime:
    """The last second of ``value``'s local calendar day."""
    return datetime(value.year, value.month, value.day, 23, 59, 59)
