"""Low-precision solar position (NOAA) as functions of Julian centuries.

Every function takes ``t``, the number of Julian centuries since J2000.0,
and returns degrees unless stated otherwise.
"""

from __future__ import annotations

import math

__all__ = [
    "geometric_mean_longitude",
    "geometric_mean_anomaly",
    "orbital_eccentricity",
    "equation_of_center",
    "true_longitude",
    "true_anomaly",
    "radius_vector_au",
    "apparent_longitude",
    "mean_obliquity",
    "corrected_obliquity",
    "right_ascension",
    "declination",
    "equation_of_time_minutes",
]


def _omega(t: float) -> float:
    """Longitude of the moon's ascending node, used by the nutation terms."""

    return math.radians(125.04 - 1934.136 * t)


def geometric_mean_longitude(t: float) -> float:
    """Geometric mean longitude of the sun, normalized into ``[0, 360)``."""

    l0 = math.fmod(280.46646 + t * (36000.76983 + 0.0003032 * t), 360.0)
    if l0 < 0.0:
        l0 += 360.0
    # fmod of a tiny negative value can round up to exactly 360.
    if l0 >= 360.0:
        l0 -= 360.0
    return l0


def geometric_mean_anomaly(t: float) -> float:
    """Geometric mean anomaly of the sun (not normalized)."""

    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def orbital_eccentricity(t: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""

    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> float:
    m = math.radians(geometric_mean_anomaly(t))
    return (
        math.sin(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2.0 * m) * (0.019993 - 0.000101 * t)
        + math.sin(3.0 * m) * 0.000289
    )


def true_longitude(t: float) -> float:
    return geometric_mean_longitude(t) + equation_of_center(t)


def true_anomaly(t: float) -> float:
    return geometric_mean_anomaly(t) + equation_of_center(t)


def radius_vector_au(t: float) -> float:
    """Sun-Earth distance in astronomical units."""

    e = orbital_eccentricity(t)
    v = math.radians(true_anomaly(t))
    return (1.000001018 * (1.0 - e * e)) / (1.0 + e * math.cos(v))


def apparent_longitude(t: float) -> float:
    """True longitude corrected for nutation and aberration."""

    return true_longitude(t) - 0.00569 - 0.00478 * math.sin(_omega(t))


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic."""

    seconds = 21.448 - t * (46.815 + t * (0.00059 - 0.001813 * t))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def corrected_obliquity(t: float) -> float:
    return mean_obliquity(t) + 0.00256 * math.cos(_omega(t))


def right_ascension(t: float) -> float:
    """Apparent right ascension of the sun in ``(-180, 180]``."""

    epsilon = math.radians(corrected_obliquity(t))
    lam = math.radians(apparent_longitude(t))
    return math.degrees(math.atan2(math.cos(epsilon) * math.sin(lam), math.cos(lam)))


def declination(t: float) -> float:
    """Apparent declination of the sun."""

    epsilon = math.radians(corrected_obliquity(t))
    lam = math.radians(apparent_longitude(t))
    return math.degrees(math.asin(math.sin(epsilon) * math.sin(lam)))


def equation_of_time_minutes(t: float) -> float:
    """Apparent minus mean solar time, in minutes of time."""

    epsilon = math.radians(corrected_obliquity(t))
    l0 = math.radians(geometric_mean_longitude(t))
    e = orbital_eccentricity(t)
    m = math.radians(geometric_mean_anomaly(t))
    y = math.tan(epsilon / 2.0) ** 2

    sin2l0 = math.sin(2.0 * l0)
    sinm = math.sin(m)
    cos2l0 = math.cos(2.0 * l0)
    sin4l0 = math.sin(4.0 * l0)
    sin2m = math.sin(2.0 * m)

    radians = (
        y * sin2l0
        - 2.0 * e * sinm
        + 4.0 * e * y * sinm * cos2l0
        - 0.5 * y * y * sin4l0
        - 1.25 * e * e * sin2m
    )
    # One degree of rotation is four minutes of time.
    return math.degrees(radians) * 4.0
