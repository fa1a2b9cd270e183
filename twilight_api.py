"""FastAPI application exposing sunrise, sunset and twilight computations."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import replace
from datetime import UTC, timedelta
from typing import Annotated, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from models import ErrorResponse, HealthResponse, SunQueryParams, SunResponse
from sunriseset import Location, SunRiseSetError, TwilightReport, __version__
from sunriseset.config import load_settings
from sunriseset.timescale import Instant

logging.basicConfig(level=logging.INFO, format="%(message)s")
LOGGER = logging.getLogger("twilight-api")

APP_DESCRIPTION = "Sunrise, sunset and twilight times from the NOAA solar position algorithm"

SETTINGS = load_settings()

app = FastAPI(
    title="SunRiseSet API",
    description=APP_DESCRIPTION,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _format_utc(instant: Optional[Instant]) -> Optional[str]:
    if instant is None:
        return None
    return instant.to_datetime().astimezone(UTC).isoformat().replace("+00:00", "Z")


def _format_local(instant: Optional[Instant], offset_hours: Optional[float]) -> Optional[str]:
    if instant is None or offset_hours is None:
        return None
    return instant.to_local(timedelta(hours=offset_hours)).isoformat()


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    payload = ErrorResponse(code=code, error=message)
    LOGGER.error(json.dumps({"event": "error", "code": code, "message": message}))
    return JSONResponse(status_code=status_code, content=payload.model_dump())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = ", ".join(error["msg"] for error in exc.errors())
    return _error_response(422, "validation_error", messages)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    detail = exc.detail
    if isinstance(detail, dict):
        message = detail.get("error") or detail.get("message") or str(detail)
    elif isinstance(detail, list):
        message = ", ".join(str(item) for item in detail)
    else:
        message = str(detail)
    return _error_response(exc.status_code, f"http_{exc.status_code}", message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled exception", exc_info=exc)
    return _error_response(500, "internal_error", "Unhandled server error")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(ok=True, version=__version__)


@app.get(
    "/sun",
    response_model=SunResponse,
    responses={
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def sun_endpoint(params: Annotated[SunQueryParams, Query()]) -> SunResponse:
    start_time = time.perf_counter()
    settings = SETTINGS
    if params.twilight_fallback:
        settings = replace(settings, twilight_fallback=True)
    try:
        report = TwilightReport.compute(
            params.date_utc,
            Location(latitude=params.lat, longitude=params.lon),
            settings,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except SunRiseSetError as exc:
        raise HTTPException(status_code=500, detail=str(exc))

    duration_ms = (time.perf_counter() - start_time) * 1000.0

    events = report.events()
    dawn, dusk = report.twilight(params.twilight.value)
    events_local = None
    if params.offset_hours is not None:
        events_local = {
            name: _format_local(instant, params.offset_hours) for name, instant in events
        }

    response = SunResponse(
        status=report.status,
        date_utc=params.date_utc,
        latitude=params.lat,
        longitude=params.lon,
        twilight=params.twilight,
        dawn_utc=_format_utc(dawn),
        dusk_utc=_format_utc(dusk),
        events_utc={name: _format_utc(instant) for name, instant in events},
        offset_hours=params.offset_hours,
        events_local=events_local,
    )

    LOGGER.info(
        json.dumps(
            {
                "event": "sun",
                "lat": params.lat,
                "lon": params.lon,
                "date": params.date_utc.isoformat(),
                "twilight": params.twilight.value,
                "status": response.status,
                "duration_ms": round(duration_ms, 3),
            }
        )
    )
    return response
