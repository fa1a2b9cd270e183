"""Two-pass solver for the UTC time of solar events on a given day."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from . import ephemeris
from .errors import NoCrossingError
from .hour_angle import hour_angle
from .timescale import MINUTES_PER_DAY, Instant, from_centuries, to_centuries, to_instant
from .values import Crossing, Location, SunCondition

__all__ = [
    "Found",
    "NotFound",
    "EventResult",
    "solar_noon_utc_minutes",
    "event_utc_minutes",
    "solve_event",
    "solar_noon",
]


@dataclass(frozen=True)
class Found:
    """An event located on the day it was solved for."""

    julian_day: float
    instant: Instant


@dataclass(frozen=True)
class NotFound:
    """The sun does not cross the zenith angle on ``julian_day``."""

    julian_day: float
    condition: SunCondition


EventResult = Union[Found, NotFound]


def solar_noon_utc_minutes(t: float, longitude: float) -> float:
    """Return solar noon in minutes from 00:00 UTC for the day of *t*.

    Parameters
    ----------
    t:
        Julian centuries since J2000.0 at the day number of the date.
    longitude:
        Observer longitude in degrees, east positive.
    """

    t_noon = to_centuries(from_centuries(t) - longitude / 360.0)
    eq_time = ephemeris.equation_of_time_minutes(t_noon)
    noon = 720.0 - longitude * 4.0 - eq_time

    t_refined = to_centuries(from_centuries(t) - 0.5 + noon / MINUTES_PER_DAY)
    eq_time = ephemeris.equation_of_time_minutes(t_refined)
    return 720.0 - longitude * 4.0 - eq_time


def _utc_minutes_at(t: float, location: Location, zenith: float, crossing: Crossing) -> float:
    eq_time = ephemeris.equation_of_time_minutes(t)
    solar_dec = ephemeris.declination(t)
    angle = hour_angle(solar_dec, location.latitude, zenith, crossing)
    delta = -location.longitude - math.degrees(angle)
    return 720.0 + 4.0 * delta - eq_time


def event_utc_minutes(
    julian_day: float, location: Location, zenith: float, crossing: Crossing
) -> float:
    """Return the event time in minutes from 00:00 UTC of *julian_day*.

    Raises
    ------
    NoCrossingError
        If either refinement pass finds no crossing.
    """

    noon = solar_noon_utc_minutes(to_centuries(julian_day), location.longitude)
    # First pass uses the declination at solar noon rather than the start of day.
    minutes = _utc_minutes_at(
        to_centuries(julian_day + noon / MINUTES_PER_DAY), location, zenith, crossing
    )
    return _utc_minutes_at(
        to_centuries(julian_day + minutes / MINUTES_PER_DAY), location, zenith, crossing
    )


def solve_event(
    julian_day: float, location: Location, zenith: float, crossing: Crossing
) -> EventResult:
    """Locate a rise or set through *zenith* on *julian_day*."""

    try:
        minutes = event_utc_minutes(julian_day, location, zenith, crossing)
    except NoCrossingError as exc:
        return NotFound(julian_day=julian_day, condition=exc.condition)
    return Found(julian_day=julian_day, instant=to_instant(julian_day, minutes))


def solar_noon(julian_day: float, location: Location) -> Instant:
    return to_instant(
        julian_day, solar_noon_utc_minutes(to_centuries(julian_day), location.longitude)
    )
