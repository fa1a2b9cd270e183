"""Environment-driven settings for reports and the HTTP service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .values import DEFAULT_LOCATION, Location

__all__ = ["Settings", "load_settings", "DEFAULT_POLAR_SEARCH_DAYS", "DEFAULT_CORS_ORIGINS"]

# Longer than any polar night or day for latitudes within about ±89.5°.
DEFAULT_POLAR_SEARCH_DAYS = 190
DEFAULT_CORS_ORIGINS = ("http://localhost:8000",)

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Tunables for report construction."""

    default_location: Location = DEFAULT_LOCATION
    polar_search_days: int = DEFAULT_POLAR_SEARCH_DAYS
    twilight_fallback: bool = False
    cors_origins: Tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)

    def __post_init__(self) -> None:
        if self.polar_search_days < 1:
            raise ValueError(
                f"polar_search_days must be positive, got {self.polar_search_days}"
            )


def _float_env(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from ``SUNRISESET_*`` environment variables."""

    env = os.environ if env is None else env

    location = Location(
        latitude=_float_env(env, "SUNRISESET_DEFAULT_LAT", DEFAULT_LOCATION.latitude),
        longitude=_float_env(env, "SUNRISESET_DEFAULT_LON", DEFAULT_LOCATION.longitude),
    )
    search_days = int(
        _float_env(env, "SUNRISESET_POLAR_SEARCH_DAYS", DEFAULT_POLAR_SEARCH_DAYS)
    )
    fallback = env.get("SUNRISESET_TWILIGHT_FALLBACK", "").strip().lower() in _TRUE_VALUES
    origins_raw = env.get("SUNRISESET_CORS_ORIGINS")
    if origins_raw:
        origins = tuple(item.strip() for item in origins_raw.split(",") if item.strip())
    else:
        origins = DEFAULT_CORS_ORIGINS

    return Settings(
        default_location=location,
        polar_search_days=search_days,
        twilight_fallback=fallback,
        cors_origins=origins,
    )
