import math

import pytest

from tacsim.playback.baseline import BaselineCache
from tacsim.playback.resolver import knots_to_degrees_per_second, position_at, vessel_position_at
from tacsim.playback.vessel import LatLng, VesselKinematics


def test_knots_conversion():
    # 60 kn = 1 degree of latitude per hour
    assert knots_to_degrees_per_second(60.0) == pytest.approx(1.0 / 3600.0)
    assert knots_to_degrees_per_second(0.0) == 0.0


def test_due_east_hawaii(hawaii):
    # 30 kn for an hour = 0.5 deg of arc, stretched by 1/cos(19.5 deg)
    out = position_at(hawaii, 90.0, 30.0, 3600.0)
    assert out.lat == 19.5
    assert out.lng == pytest.approx(-155.5 + 0.5 / math.cos(math.radians(19.5)))
    assert out.lng == pytest.approx(-154.97, abs=0.01)


def test_due_north_moves_latitude_only(hawaii):
    out = position_at(hawaii, 0.0, 30.0, 3600.0)
    assert out.lat == pytest.approx(20.0)
    assert out.lng == pytest.approx(-155.5, abs=1e-12)


def test_due_south_and_west(hawaii):
    south = position_at(hawaii, 180.0, 60.0, 1800.0)
    assert south.lat == pytest.approx(19.0)
    assert south.lng == pytest.approx(-155.5, abs=1e-12)

    west = position_at(hawaii, 270.0, 30.0, 3600.0)
    assert west.lat == pytest.approx(19.5, abs=1e-12)
    assert west.lng < -155.5


def test_zero_speed_returns_baseline(hawaii):
    for course in range(0, 360, 15):
        for elapsed in (0.0, 1.0, 3600.0, 1e7):
            out = position_at(hawaii, float(course), 0.0, elapsed)
            assert out == LatLng(*hawaii)


def test_deterministic(hawaii):
    a = position_at(hawaii, 37.3, 17.25, 1234.5)
    b = position_at(hawaii, 37.3, 17.25, 1234.5)
    assert a == b


def test_course_is_wrapped(hawaii):
    assert position_at(hawaii, 450.0, 20.0, 600.0) == position_at(hawaii, 90.0, 20.0, 600.0)
    assert position_at(hawaii, -90.0, 20.0, 600.0) == position_at(hawaii, 270.0, 20.0, 600.0)


@pytest.mark.parametrize("speed", [float('nan'), -5.0, float('inf')])
def test_malformed_speed_is_neutral(hawaii, speed):
    assert position_at(hawaii, 45.0, speed, 600.0) == LatLng(*hawaii)


def test_malformed_elapsed_is_neutral(hawaii):
    assert position_at(hawaii, 45.0, 10.0, float('nan')) == LatLng(*hawaii)
    assert position_at(hawaii, 45.0, 10.0, -60.0) == LatLng(*hawaii)


def test_malformed_course_counts_as_north(hawaii):
    assert position_at(hawaii, float('nan'), 10.0, 600.0) == position_at(hawaii, 0.0, 10.0, 600.0)


def test_nan_baseline_is_zeroed():
    out = position_at((float('nan'), float('nan')), 90.0, 0.0, 10.0)
    assert out == LatLng(0.0, 0.0)


def test_accepts_baseline_objects():
    cache = BaselineCache()
    b = cache.ensure_baseline('a', (10.0, 20.0))
    assert position_at(b, 90.0, 12.0, 300.0) == position_at((10.0, 20.0), 90.0, 12.0, 300.0)


def test_vessel_position_at_uses_baseline(hawaii):
    cache = BaselineCache()
    v = VesselKinematics('ddg-51', 90.0, 30.0, hawaii)
    first = vessel_position_at(v, 3600.0, cache)
    # host moves the icon; replay stays anchored at the session start
    moved = v.moved_to(0.0, 0.0)
    assert vessel_position_at(moved, 3600.0, cache) == first


def test_vessel_position_at_tolerates_bad_record(hawaii):
    cache = BaselineCache()
    v = VesselKinematics('bad', float('nan'), float('nan'), hawaii)
    assert vessel_position_at(v, 600.0, cache) == LatLng(*hawaii)
