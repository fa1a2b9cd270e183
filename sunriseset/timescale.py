"""Conversions between calendar dates, Julian days and Julian centuries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone
from typing import Optional, Tuple, Union

import erfa

__all__ = [
    "J2000",
    "DAYS_PER_CENTURY",
    "MINUTES_PER_DAY",
    "Instant",
    "to_centuries",
    "from_centuries",
    "to_instant",
    "julian_day_number",
    "calendar_date",
    "day_of_year",
    "resolve_when",
]

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0
MINUTES_PER_DAY = 1440.0


@dataclass(frozen=True, order=True)
class Instant:
    """A UTC moment as ``day number + minutes / 1440``.

    ``julian_day`` is anchored on the integer Julian Day Number of a civil
    date, so an integral value is 00:00 UTC of that date.
    """

    julian_day: float

    @property
    def day_number(self) -> int:
        return math.floor(self.julian_day)

    @property
    def minutes_of_day(self) -> float:
        return (self.julian_day - self.day_number) * MINUTES_PER_DAY

    def to_datetime(self) -> datetime:
        """Return the instant as a timezone-aware UTC datetime."""

        year, month, day, fraction = erfa.jd2cal(self.julian_day, -0.5)
        midnight = datetime(int(year), int(month), int(day), tzinfo=UTC)
        return midnight + timedelta(days=float(fraction))

    def to_local(self, offset: timedelta) -> datetime:
        return self.to_datetime().astimezone(timezone(offset))


def to_centuries(julian_day: float) -> float:
    """Convert a Julian day to Julian centuries since J2000.0."""

    return (julian_day - J2000) / DAYS_PER_CENTURY


def from_centuries(t: float) -> float:
    """Convert Julian centuries since J2000.0 back to a Julian day."""

    return t * DAYS_PER_CENTURY + J2000


def to_instant(reference_julian_day: float, minutes_of_day: float) -> Instant:
    """Anchor *minutes_of_day* on the integer day of *reference_julian_day*.

    Negative minutes or minutes past 1440 roll into the neighbouring dates.
    """

    return Instant(math.floor(reference_julian_day) + minutes_of_day / MINUTES_PER_DAY)


def julian_day_number(value: date) -> float:
    """Return the Julian Day Number of a civil date (2000-01-01 -> 2451545)."""

    djm0, djm = erfa.cal2jd(value.year, value.month, value.day)
    return float(djm0) + float(djm) + 0.5


def calendar_date(julian_day: float) -> date:
    """Return the civil date whose Julian Day Number is ``floor(julian_day)``."""

    year, month, day, _ = erfa.jd2cal(float(math.floor(julian_day)), -0.5)
    return date(int(year), int(month), int(day))


def day_of_year(julian_day: float) -> int:
    """Return the 1-based ordinal day within the year of *julian_day*."""

    return calendar_date(julian_day).timetuple().tm_yday


def resolve_when(when: Union[date, datetime]) -> Tuple[float, timedelta]:
    """Split *when* into its Julian Day Number and a display UTC offset.

    Aware datetimes contribute their own civil date and offset; naive
    datetimes and plain dates are treated as UTC.
    """

    offset: Optional[timedelta] = None
    if isinstance(when, datetime):
        offset = when.utcoffset()
        when = when.date()
    if not isinstance(when, date):
        raise TypeError(f"Expected a date or datetime, got {type(when).__name__}")
    return julian_day_number(when), offset or timedelta(0)
