"""Tests for great-circle bearing and haversine distance."""
from __future__ import annotations

import math

import pytest

from ais_core.geometry import EARTH_RADIUS, bearing, bearing_distance, distance
from ais_core.utils import WrapTo360

POINTS = [
    (0.0, 0.0),
    (59.9, 10.7),
    (-33.86, 151.21),
    (89.9, -179.9),
    (-89.9, 179.9),
    (37.77, -122.42),
]


class TestBearing:
    @pytest.mark.parametrize("p1", POINTS)
    @pytest.mark.parametrize("p2", POINTS)
    def test_always_in_range(self, p1, p2):
        b = bearing(*p1, *p2)
        assert 0.0 <= b < 360.0

    def test_cardinal_directions_from_equator(self):
        assert bearing(0, 0, 1, 0) == pytest.approx(0.0, abs=1e-9)
        assert bearing(0, 0, 0, 1) == pytest.approx(90.0)
        assert bearing(0, 0, -1, 0) == pytest.approx(180.0)
        assert bearing(0, 0, 0, -1) == pytest.approx(270.0)

    def test_coincident_points_give_zero(self):
        assert bearing(59.9, 10.7, 59.9, 10.7) == 0.0

    def test_slightly_west_of_north_stays_below_360(self):
        b = bearing(0, 0, 1, -1e-12)
        assert 0.0 <= b < 360.0

    def test_wrap_helper_never_returns_360(self):
        assert WrapTo360(-1e-17) == 0.0
        assert WrapTo360(360.0) == 0.0
        assert WrapTo360(-90.0) == pytest.approx(270.0)


class TestDistance:
    @pytest.mark.parametrize("p", POINTS)
    def test_zero_for_same_point(self, p):
        assert distance(*p, *p) == 0.0

    @pytest.mark.parametrize("p1", POINTS)
    @pytest.mark.parametrize("p2", POINTS)
    def test_symmetric_and_non_negative(self, p1, p2):
        d12 = distance(*p1, *p2)
        d21 = distance(*p2, *p1)
        assert d12 >= 0.0
        assert d12 == pytest.approx(d21, rel=1e-9, abs=1e-6)

    def test_one_degree_of_latitude(self):
        expected = EARTH_RADIUS * math.radians(1.0)
        assert distance(0, 0, 1, 0) == pytest.approx(expected, rel=1e-9)

    def test_antipodal_points_are_half_circumference(self):
        d = distance(0, 0, 0, 180)
        assert not math.isnan(d)
        assert d == pytest.approx(math.pi * EARTH_RADIUS, rel=1e-9)

    def test_nearly_antipodal_points_do_not_produce_nan(self):
        d = distance(45.0, 0.0, -45.0, 180.0 - 1e-12)
        assert not math.isnan(d)
        assert d == pytest.approx(math.pi * EARTH_RADIUS, rel=1e-6)


def test_bearing_distance_pairs_both_results():
    b, d = bearing_distance(0, 0, 0, 1)
    assert b == pytest.approx(90.0)
    assert d == pytest.approx(distance(0, 0, 0, 1))
