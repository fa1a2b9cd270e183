"""Command-line entry point: ``python -m sunriseset``."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from .config import load_settings
from .errors import SunRiseSetError
from .report import TwilightReport
from .values import Location


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sunriseset", description="Print sunrise, sunset and twilight times."
    )
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="YYYY-MM-DD")
    parser.add_argument("--lat", type=float, default=None, help="latitude, north positive")
    parser.add_argument("--lon", type=float, default=None, help="longitude, east positive")
    parser.add_argument("--tz", type=float, default=None, help="display offset from UTC in hours")
    parser.add_argument(
        "--twilight-fallback",
        action="store_true",
        help="search neighbouring days for missing twilight events",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING, format="%(message)s"
    )

    settings = load_settings()
    if args.twilight_fallback:
        settings = replace(settings, twilight_fallback=True)
    default = settings.default_location

    try:
        location = Location(
            latitude=default.latitude if args.lat is None else args.lat,
            longitude=default.longitude if args.lon is None else args.lon,
        )
        if args.tz is None:
            when = datetime.now().astimezone()
            if args.date is not None:
                when = datetime.combine(args.date, datetime.min.time(), tzinfo=when.tzinfo)
        else:
            tz = timezone(timedelta(hours=args.tz))
            day = args.date or datetime.now(tz).date()
            when = datetime.combine(day, datetime.min.time(), tzinfo=tz)
        report = TwilightReport.compute(when, location, settings)
    except (ValueError, SunRiseSetError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(str(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
