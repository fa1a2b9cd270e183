"""Pydantic models for API requests and responses."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Twilight(str, Enum):
    """Enumeration of supported twilight definitions."""

    official = "official"
    civil = "civil"
    nautical = "nautical"
    astronomical = "astronomical"


class SunQueryParams(BaseModel):
    """Validated query parameters for the ``/sun`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    lon: float = Field(..., ge=-180.0, le=180.0, description="Longitude in degrees, east positive")
    date_utc: date = Field(..., alias="date", description="UTC calendar date (YYYY-MM-DD)")
    offset_hours: Optional[float] = Field(
        None,
        description="Optional fixed offset in hours applied to derive local times",
    )
    twilight: Twilight = Field(Twilight.official, description="Twilight definition")
    twilight_fallback: bool = Field(
        False, description="Resolve missing twilight events from neighbouring days"
    )

    @field_validator("offset_hours")
    @classmethod
    def validate_offset_hours(cls, value: Optional[float]) -> Optional[float]:
        if value is None:
            return value
        if not -24.0 <= value <= 24.0:
            raise ValueError("offset_hours must be within ±24 hours")
        return value


class SunResponse(BaseModel):
    """Successful sunrise/sunset response payload."""

    ok: bool = True
    status: str = Field(..., description="polar_day / polar_night when sunrise or sunset fell back")
    date_utc: date = Field(..., description="Requested UTC date")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    twilight: Twilight = Field(..., description="Twilight definition for dawn/dusk")
    dawn_utc: Optional[str] = Field(
        None, description="Start of the selected twilight in UTC (ISO-8601)"
    )
    dusk_utc: Optional[str] = Field(
        None, description="End of the selected twilight in UTC (ISO-8601)"
    )
    events_utc: Dict[str, Optional[str]] = Field(
        ..., description="Every report event in UTC, chronological"
    )
    offset_hours: Optional[float] = Field(
        None, description="User-specified offset in hours"
    )
    events_local: Optional[Dict[str, Optional[str]]] = Field(
        None, description="Every report event in local time when offset provided"
    )
    source: Literal["NOAA"] = Field("NOAA", description="Solar position model")


class HealthResponse(BaseModel):
    """Health-check response."""

    ok: bool = True
    version: str


class ErrorResponse(BaseModel):
    """Error payload."""

    ok: bool = False
    code: str
    error: str
