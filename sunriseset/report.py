"""Sunrise, sunset, solar noon and twilight times for one date and place."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Tuple, Union

from . import polar
from .config import Settings, load_settings
from .events import Found, NotFound, EventResult, solar_noon, solve_event
from .timescale import Instant, resolve_when, to_centuries
from .values import (
    SUN_RISE_SET,
    ZENITH_ANGLES,
    Crossing,
    Location,
    SunCondition,
)

__all__ = ["TwilightReport", "EVENT_LABELS", "TWILIGHT_FIELDS"]

LOGGER = logging.getLogger(__name__)

# Report fields in chronological order with their text labels.
EVENT_LABELS: Tuple[Tuple[str, str], ...] = (
    ("astronomical_twilight_start", "Astro Twilight"),
    ("nautical_twilight_start", "Nautical Twilight"),
    ("civil_twilight_start", "Civil Twilight"),
    ("sunrise", "Sun Rises"),
    ("solar_noon", "Solar Noon"),
    ("sunset", "Sun Sets"),
    ("civil_twilight_end", "End of Civil Twilight"),
    ("nautical_twilight_end", "End of Nautical Twilight"),
    ("astronomical_twilight_end", "End of Astro Twilight"),
)

# Start and end fields for each twilight definition in ZENITH_ANGLES.
TWILIGHT_FIELDS: Dict[str, Tuple[str, str]] = {
    "official": ("sunrise", "sunset"),
    "civil": ("civil_twilight_start", "civil_twilight_end"),
    "nautical": ("nautical_twilight_start", "nautical_twilight_end"),
    "astronomical": ("astronomical_twilight_start", "astronomical_twilight_end"),
}

_STATUS = {
    SunCondition.ALWAYS_ABOVE: "polar_day",
    SunCondition.ALWAYS_BELOW: "polar_night",
}


@dataclass(frozen=True)
class TwilightReport:
    """Solar events for a civil date at a location, all in UTC.

    Sunrise, sunset and solar noon are always present: days without a
    sunrise or sunset fall back to the nearest day that has one.  Twilight
    events stay ``None`` on days without the matching crossing unless the
    per-band fallback is enabled in :class:`~sunriseset.config.Settings`.
    """

    julian_day: float
    location: Location
    utc_offset: timedelta
    astronomical_twilight_start: Optional[Instant]
    nautical_twilight_start: Optional[Instant]
    civil_twilight_start: Optional[Instant]
    sunrise: Instant
    solar_noon: Instant
    sunset: Instant
    civil_twilight_end: Optional[Instant]
    nautical_twilight_end: Optional[Instant]
    astronomical_twilight_end: Optional[Instant]
    status: str = "ok"

    @classmethod
    def compute(
        cls,
        when: Union[date, datetime],
        location: Optional[Location] = None,
        settings: Optional[Settings] = None,
    ) -> "TwilightReport":
        """Compute the report for the civil date of *when*.

        Raises
        ------
        InvalidLocationError
            Raised by :class:`Location` for out-of-range coordinates.
        PolarSearchExhausted
            If a missing sunrise or sunset is not found within the search bound.
        """

        settings = settings or load_settings()
        location = location or settings.default_location
        julian_day, offset = resolve_when(when)

        sunrise = solve_event(julian_day, location, SUN_RISE_SET, Crossing.RISE)
        sunset = solve_event(julian_day, location, SUN_RISE_SET, Crossing.SET)

        fields = {}
        for name, zenith in ZENITH_ANGLES.items():
            if zenith == SUN_RISE_SET:
                continue
            for field_name, crossing in zip(TWILIGHT_FIELDS[name], Crossing):
                result = solve_event(julian_day, location, zenith, crossing)
                fields[field_name] = cls._band_instant(
                    result, location, zenith, crossing, settings
                )

        status = "ok"
        for result in (sunrise, sunset):
            if isinstance(result, NotFound):
                status = _STATUS[result.condition]
                break

        if isinstance(sunrise, NotFound):
            sunrise = polar.resolve_sunrise(
                sunrise, location, settings.polar_search_days
            )
            cls._log_fallback("sunrise", julian_day, sunrise)
        if isinstance(sunset, NotFound):
            sunset = polar.resolve_sunset(
                sunset, location, settings.polar_search_days
            )
            cls._log_fallback("sunset", julian_day, sunset)

        noon = solar_noon(julian_day, location)
        LOGGER.debug(
            json.dumps(
                {
                    "event": "report",
                    "jd": julian_day,
                    "t": to_centuries(julian_day),
                    "lat": location.latitude,
                    "lon": location.longitude,
                    "status": status,
                }
            )
        )
        return cls(
            julian_day=julian_day,
            location=location,
            utc_offset=offset,
            sunrise=sunrise.instant,
            solar_noon=noon,
            sunset=sunset.instant,
            status=status,
            **fields,
        )

    @classmethod
    def today(
        cls, location: Optional[Location] = None, settings: Optional[Settings] = None
    ) -> "TwilightReport":
        """Report for the current local date."""

        return cls.compute(datetime.now().astimezone(), location, settings)

    now = today

    @staticmethod
    def _band_instant(
        result: EventResult,
        location: Location,
        zenith: float,
        crossing: Crossing,
        settings: Settings,
    ) -> Optional[Instant]:
        if isinstance(result, Found):
            return result.instant
        if not settings.twilight_fallback:
            return None
        return polar.resolve_band(result, location, zenith, crossing).instant

    @staticmethod
    def _log_fallback(name: str, julian_day: float, found: Found) -> None:
        LOGGER.info(
            json.dumps(
                {
                    "event": "polar_fallback",
                    "field": name,
                    "requested_jd": julian_day,
                    "found_jd": found.julian_day,
                }
            )
        )

    def twilight(self, name: str) -> Tuple[Optional[Instant], Optional[Instant]]:
        """Return the start and end of a twilight definition such as ``"civil"``."""

        start, end = TWILIGHT_FIELDS[name]
        return getattr(self, start), getattr(self, end)

    def events(self) -> List[Tuple[str, Optional[Instant]]]:
        """Return ``(field, instant)`` pairs in chronological order."""

        return [(name, getattr(self, name)) for name, _ in EVENT_LABELS]

    def local(self, name: str) -> Optional[datetime]:
        instant = getattr(self, name)
        if instant is None:
            return None
        return instant.to_local(self.utc_offset)

    def __str__(self) -> str:
        lines = []
        for name, label in EVENT_LABELS:
            moment = self.local(name)
            text = "Not Found" if moment is None else moment.strftime("%H:%M:%S %d-%m")
            lines.append(f"{label} {text}")
        return "\n".join(lines) + "\n"
