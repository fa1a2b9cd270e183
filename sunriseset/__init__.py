"""NOAA sunrise, sunset and twilight calculations."""

from .errors import (
    InvalidLocationError,
    NoCrossingError,
    PolarFallbackError,
    PolarSearchExhausted,
    SunRiseSetError,
)
from .report import TwilightReport
from .timescale import Instant
from .values import DEFAULT_LOCATION, ZENITH_ANGLES, Crossing, Location

__version__ = "0.9.2"

__all__ = [
    "TwilightReport",
    "Location",
    "Instant",
    "Crossing",
    "DEFAULT_LOCATION",
    "ZENITH_ANGLES",
    "SunRiseSetError",
    "NoCrossingError",
    "PolarFallbackError",
    "PolarSearchExhausted",
    "InvalidLocationError",
    "__version__",
]
