from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from hypothesis import given, strategies as st

from sunriseset import ephemeris
from sunriseset.errors import NoCrossingError
from sunriseset.hour_angle import hour_angle, hour_angle_sunrise, hour_angle_sunset
from sunriseset.timescale import (
    Instant,
    day_of_year,
    from_centuries,
    julian_day_number,
    resolve_when,
    to_centuries,
    to_instant,
)
from sunriseset.values import SUN_RISE_SET, Crossing, SunCondition


def test_julian_day_number_of_j2000_epoch_date():
    assert julian_day_number(date(2000, 1, 1)) == 2451545.0
    assert to_centuries(2451545.0) == 0.0
    assert to_centuries(2451545.0 + 36525.0) == pytest.approx(1.0)


@given(st.floats(min_value=1_000_000.0, max_value=4_000_000.0))
def test_centuries_round_trip(jd: float) -> None:
    assert from_centuries(to_centuries(jd)) == pytest.approx(jd, abs=1e-6)


def test_to_instant_uses_integer_day_as_anchor():
    assert to_instant(2451545.7, 360.0) == Instant(2451545.25)
    assert to_instant(2451545.0, -60.0).julian_day == pytest.approx(2451545.0 - 1 / 24)
    assert to_instant(2451545.0, 1500.0).day_number == 2451546


def test_instant_to_datetime():
    six = Instant(2451545.25).to_datetime()
    assert abs(six - datetime(2000, 1, 1, 6, tzinfo=UTC)) < timedelta(milliseconds=1)
    assert six.tzinfo is UTC
    rolled = Instant(2451545.0 - 1 / 24).to_datetime()
    assert abs(rolled - datetime(1999, 12, 31, 23, tzinfo=UTC)) < timedelta(seconds=1)
    assert Instant(2451545.25).minutes_of_day == pytest.approx(360.0)


def test_instant_ordering():
    assert Instant(2451545.1) < Instant(2451545.2)


def test_day_of_year():
    assert day_of_year(julian_day_number(date(2020, 3, 20))) == 80
    assert day_of_year(julian_day_number(date(2021, 12, 31)) + 0.9) == 365


def test_resolve_when_keeps_local_date_and_offset():
    tz = datetime(2020, 3, 20, 23, 30).astimezone().tzinfo
    aware = datetime(2020, 3, 20, 23, 30, tzinfo=tz)
    jd, offset = resolve_when(aware)
    assert jd == julian_day_number(date(2020, 3, 20))
    assert offset == aware.utcoffset()
    assert resolve_when(date(2020, 3, 20))[1] == timedelta(0)
    with pytest.raises(TypeError):
        resolve_when("2020-03-20")  # type: ignore[arg-type]


def test_epoch_values():
    assert ephemeris.geometric_mean_longitude(0.0) == pytest.approx(280.46646)
    assert ephemeris.geometric_mean_anomaly(0.0) == pytest.approx(357.52911)
    assert ephemeris.orbital_eccentricity(0.0) == pytest.approx(0.016708634)
    assert ephemeris.mean_obliquity(0.0) == pytest.approx(23.4392911, abs=1e-7)


def test_sun_position_on_2000_01_01():
    assert ephemeris.declination(0.0) == pytest.approx(-23.03, abs=0.05)
    assert ephemeris.right_ascension(0.0) == pytest.approx(-78.7, abs=0.1)
    assert ephemeris.equation_of_time_minutes(0.0) == pytest.approx(-3.3, abs=0.1)
    assert ephemeris.radius_vector_au(0.0) == pytest.approx(0.9833, abs=5e-4)


def test_true_quantities_share_equation_of_center():
    t = 0.2
    center = ephemeris.equation_of_center(t)
    assert ephemeris.true_longitude(t) == pytest.approx(
        ephemeris.geometric_mean_longitude(t) + center
    )
    assert ephemeris.true_anomaly(t) == pytest.approx(
        ephemeris.geometric_mean_anomaly(t) + center
    )
    assert abs(center) < 2.0


def test_corrected_obliquity_stays_near_mean():
    for t in (-1.0, 0.0, 0.21, 1.0):
        delta = ephemeris.corrected_obliquity(t) - ephemeris.mean_obliquity(t)
        assert abs(delta) <= 0.00256 + 1e-12


@given(st.floats(min_value=-10.0, max_value=10.0))
def test_geometric_mean_longitude_is_normalized(t: float) -> None:
    value = ephemeris.geometric_mean_longitude(t)
    assert 0.0 <= value < 360.0


@given(st.floats(min_value=-2.0, max_value=2.0))
def test_declination_bounded_by_obliquity(t: float) -> None:
    assert abs(ephemeris.declination(t)) <= ephemeris.corrected_obliquity(t) + 1e-9


def test_hour_angle_at_equator_on_equinox():
    assert hour_angle_sunrise(0.0, 0.0, 90.0) == pytest.approx(math.pi / 2)
    assert hour_angle_sunset(0.0, 0.0, 90.0) == pytest.approx(-math.pi / 2)
    assert hour_angle(5.0, 40.0, SUN_RISE_SET, Crossing.SET) == pytest.approx(
        -hour_angle(5.0, 40.0, SUN_RISE_SET, Crossing.RISE)
    )


def test_hour_angle_grows_with_zenith():
    angles = [hour_angle_sunrise(10.0, 45.0, zenith) for zenith in (90.833, 96, 102, 108)]
    assert angles == sorted(angles)


def test_hour_angle_domain_failure_reports_condition():
    with pytest.raises(NoCrossingError) as polar_day:
        hour_angle_sunrise(23.0, 78.0)
    assert polar_day.value.condition is SunCondition.ALWAYS_ABOVE
    assert polar_day.value.argument < -1.0

    with pytest.raises(NoCrossingError) as polar_night:
        hour_angle_sunset(-23.0, 78.0)
    assert polar_night.value.condition is SunCondition.ALWAYS_BELOW
    assert isinstance(polar_night.value, ValueError)
