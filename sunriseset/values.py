"""Value types shared by the solar event solvers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .errors import InvalidLocationError

__all__ = [
    "Location",
    "Crossing",
    "SunCondition",
    "SUN_RISE_SET",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "ZENITH_ANGLES",
    "DEFAULT_LOCATION",
]

# Zenith angles in degrees. 0.833 allows for refraction and the solar semi-diameter.
SUN_RISE_SET = 90.833
CIVIL_TWILIGHT = 96.0
NAUTICAL_TWILIGHT = 102.0
ASTRONOMICAL_TWILIGHT = 108.0

ZENITH_ANGLES: Dict[str, float] = {
    "official": SUN_RISE_SET,
    "civil": CIVIL_TWILIGHT,
    "nautical": NAUTICAL_TWILIGHT,
    "astronomical": ASTRONOMICAL_TWILIGHT,
}


class Crossing(str, Enum):
    """Direction in which the sun crosses a zenith angle."""

    RISE = "rise"
    SET = "set"


class SunCondition(str, Enum):
    """Why a day has no crossing for a zenith angle."""

    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"


@dataclass(frozen=True)
class Location:
    """Observer position in degrees (north and east positive)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        # Comparisons against NaN are false, so NaN fails both checks.
        if not -90.0 <= self.latitude <= 90.0:
            raise InvalidLocationError(
                f"Latitude must be within [-90, 90] degrees, got {self.latitude}"
            )
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidLocationError(
                f"Longitude must be within [-180, 180] degrees, got {self.longitude}"
            )


DEFAULT_LOCATION = Location(
    latitude=-(36.0 + 59.0 / 60.0 + 27.60 / 3600.0),
    longitude=174.0 + 29.0 / 60.0 + 13.20 / 3600.0,
)
