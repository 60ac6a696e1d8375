"""Tests for ukcoords.distance module."""

import math

import pytest

from ukcoords.distance import EARTH_RADIUS_M, haversine
from ukcoords.models import GeoPoint


class TestHaversine:
    def test_same_point_is_zero(self, plymouth: GeoPoint):
        assert haversine(plymouth, plymouth).meters == 0.0

    def test_symmetric(self, plymouth: GeoPoint, london: GeoPoint):
        assert haversine(plymouth, london) == haversine(london, plymouth)

    def test_one_degree_of_latitude(self):
        d = haversine(GeoPoint(50.0, -4.0), GeoPoint(51.0, -4.0))
        assert d.meters == pytest.approx(EARTH_RADIUS_M * math.pi / 180)

    def test_one_degree_of_longitude_on_equator(self):
        d = haversine(GeoPoint(0.0, 10.0), GeoPoint(0.0, 11.0))
        assert d.meters == pytest.approx(111_194.93, abs=0.01)

    def test_antipodes(self):
        d = haversine(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0))
        assert d.meters == pytest.approx(EARTH_RADIUS_M * math.pi)

    def test_plymouth_to_london(self, plymouth: GeoPoint, london: GeoPoint):
        d = haversine(plymouth, london)
        assert 300_000 < d.meters < 330_000
        assert d.miles == pytest.approx(d.meters / 1609.344)

    def test_distinct_points_non_zero(self):
        assert haversine(GeoPoint(50.0, -4.0), GeoPoint(50.0, -4.000001)).meters > 0
