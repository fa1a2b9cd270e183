"""Hour angle of the sun at a given zenith angle."""

from __future__ import annotations

import math

from .errors import NoCrossingError
from .values import SUN_RISE_SET, Crossing, SunCondition

__all__ = ["hour_angle_sunrise", "hour_angle_sunset", "hour_angle"]


def hour_angle_sunrise(
    declination: float, latitude: float, zenith: float = SUN_RISE_SET
) -> float:
    """Return the hour angle of the rising sun in radians.

    Parameters
    ----------
    declination:
        Solar declination in degrees.
    latitude:
        Observer latitude in degrees.
    zenith:
        Zenith angle in degrees that defines the horizon.

    Raises
    ------
    NoCrossingError
        If the sun never reaches *zenith* (continuous day or night).
    """

    lat_rad = math.radians(latitude)
    dec_rad = math.radians(declination)
    argument = math.cos(math.radians(zenith)) / (
        math.cos(lat_rad) * math.cos(dec_rad)
    ) - math.tan(lat_rad) * math.tan(dec_rad)
    if argument > 1.0:
        raise NoCrossingError(argument, SunCondition.ALWAYS_BELOW)
    if argument < -1.0:
        raise NoCrossingError(argument, SunCondition.ALWAYS_ABOVE)
    return math.acos(argument)


def hour_angle_sunset(
    declination: float, latitude: float, zenith: float = SUN_RISE_SET
) -> float:
    """Return the hour angle of the setting sun in radians."""

    return -hour_angle_sunrise(declination, latitude, zenith)


def hour_angle(
    declination: float, latitude: float, zenith: float, crossing: Crossing
) -> float:
    if crossing is Crossing.RISE:
        return hour_angle_sunrise(declination, latitude, zenith)
    return hour_angle_sunset(declination, latitude, zenith)
