"""Fallback search for days without a sunrise or sunset near the poles."""

from __future__ import annotations

import json
import logging
from typing import Iterator

from .config import DEFAULT_POLAR_SEARCH_DAYS
from .errors import PolarSearchExhausted
from .events import Found, NotFound, solve_event
from .timescale import day_of_year
from .values import SUN_RISE_SET, Crossing, Location, SunCondition

__all__ = [
    "POLAR_LATITUDE",
    "YEAR_SEARCH_DAYS",
    "candidate_days",
    "condition_step",
    "search_event",
    "use_recent_sunrise",
    "use_next_sunrise",
    "resolve_sunrise",
    "resolve_sunset",
    "resolve_band",
]

LOGGER = logging.getLogger(__name__)

POLAR_LATITUDE = 66.4
YEAR_SEARCH_DAYS = 366

BACKWARD = -1
FORWARD = 1


def use_recent_sunrise(latitude: float, doy: int) -> bool:
    """Northern spring/summer or southern autumn/winter."""

    return (latitude > POLAR_LATITUDE and 79 < doy < 267) or (
        latitude < -POLAR_LATITUDE and (doy < 83 or doy > 263)
    )


def use_next_sunrise(latitude: float, doy: int) -> bool:
    """Northern autumn/winter or southern spring/summer."""

    return (latitude > POLAR_LATITUDE and (doy < 83 or doy > 263)) or (
        latitude < -POLAR_LATITUDE and 79 < doy < 267
    )


def candidate_days(start: float, step: int, limit: int) -> Iterator[float]:
    """Yield ``start + step * k`` for ``k = 1 .. limit``."""

    for offset in range(1, limit + 1):
        yield start + step * offset


def search_event(
    julian_day: float,
    location: Location,
    zenith: float,
    crossing: Crossing,
    step: int,
    limit: int = DEFAULT_POLAR_SEARCH_DAYS,
) -> Found:
    """Step away from *julian_day* one day at a time until the event occurs.

    Raises
    ------
    PolarSearchExhausted
        If none of the *limit* days visited has a crossing.
    """

    for candidate in candidate_days(julian_day, step, limit):
        result = solve_event(candidate, location, zenith, crossing)
        if isinstance(result, Found):
            LOGGER.debug(
                json.dumps(
                    {
                        "event": "polar_fallback",
                        "crossing": crossing.value,
                        "zenith": zenith,
                        "requested_jd": julian_day,
                        "found_jd": candidate,
                        "days": abs(candidate - julian_day),
                    }
                )
            )
            return result
    raise PolarSearchExhausted(
        f"No {crossing.value} through zenith {zenith} within {limit} days "
        f"{'before' if step < 0 else 'after'} JD {julian_day} at {location}"
    )


def condition_step(condition: SunCondition, crossing: Crossing) -> int:
    """Search direction implied by why a crossing is missing.

    While the sun stays above the zenith angle the last rise lies behind and
    the next set ahead; while it stays below, the reverse.
    """

    above = condition is SunCondition.ALWAYS_ABOVE
    if crossing is Crossing.RISE:
        return BACKWARD if above else FORWARD
    return FORWARD if above else BACKWARD


def _log_condition_step(missing: NotFound, location: Location, crossing: Crossing) -> None:
    LOGGER.debug(
        json.dumps(
            {
                "event": "polar_fallback_by_condition",
                "crossing": crossing.value,
                "jd": missing.julian_day,
                "lat": location.latitude,
                "condition": missing.condition.value,
            }
        )
    )


def resolve_sunrise(
    missing: NotFound, location: Location, limit: int = DEFAULT_POLAR_SEARCH_DAYS
) -> Found:
    """Return the nearest sunrise for a day that has none.

    Latitudes just inside the polar circles, where the seasonal windows
    do not apply, take the direction from ``missing.condition``.
    """

    doy = day_of_year(missing.julian_day)
    if use_recent_sunrise(location.latitude, doy):
        step = BACKWARD
    elif use_next_sunrise(location.latitude, doy):
        step = FORWARD
    else:
        _log_condition_step(missing, location, Crossing.RISE)
        step = condition_step(missing.condition, Crossing.RISE)
    return search_event(
        missing.julian_day, location, SUN_RISE_SET, Crossing.RISE, step, limit
    )


def resolve_sunset(
    missing: NotFound, location: Location, limit: int = DEFAULT_POLAR_SEARCH_DAYS
) -> Found:
    """Return the nearest sunset for a day that has none."""

    doy = day_of_year(missing.julian_day)
    # A period that needs an earlier sunrise needs a later sunset, and vice versa.
    if use_recent_sunrise(location.latitude, doy):
        step = FORWARD
    elif use_next_sunrise(location.latitude, doy):
        step = BACKWARD
    else:
        _log_condition_step(missing, location, Crossing.SET)
        step = condition_step(missing.condition, Crossing.SET)
    return search_event(
        missing.julian_day, location, SUN_RISE_SET, Crossing.SET, step, limit
    )


def resolve_band(
    missing: NotFound,
    location: Location,
    zenith: float,
    crossing: Crossing,
    limit: int = YEAR_SEARCH_DAYS,
) -> Found:
    """Resolve a missing twilight event from the reason it was missing."""

    step = condition_step(missing.condition, crossing)
    return search_event(missing.julian_day, location, zenith, crossing, step, limit)
