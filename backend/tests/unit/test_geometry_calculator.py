"""Unit tests for distance, radius and envelope calculations."""

import math

import pytest

from app.core.exceptions import InvalidDimensionsError
from app.geometry.calculator import (
    distance_m,
    footprint_envelope,
    offset_point,
    radius_from_dimensions,
    within_radius,
)
from app.geometry.types import Footprint, GeoPoint


class TestRadiusFromDimensions:
    def test_three_four_five(self):
        assert radius_from_dimensions(3, 4) == 2.5

    def test_matches_half_diagonal(self):
        for width, length in [(1.0, 1.0), (2.5, 7.0), (10.0, 0.5)]:
            assert radius_from_dimensions(width, length) == pytest.approx(
                math.sqrt(width**2 + length**2) / 2
            )

    def test_monotonic_in_both_inputs(self):
        base = radius_from_dimensions(3, 4)
        assert radius_from_dimensions(3.5, 4) > base
        assert radius_from_dimensions(3, 4.5) > base

    def test_symmetric(self):
        assert radius_from_dimensions(6, 8) == radius_from_dimensions(8, 6)

    @pytest.mark.parametrize("width,length", [(0, 4), (3, 0), (-1, 4), (3, -2)])
    def test_non_positive_dimensions_rejected(self, width, length):
        with pytest.raises(InvalidDimensionsError) as exc_info:
            radius_from_dimensions(width, length)
        assert exc_info.value.code == "INVALID_DIMENSIONS"

    def test_footprint_create_validates(self, origin):
        with pytest.raises(InvalidDimensionsError):
            Footprint.create(origin, 0, 3)

    @pytest.mark.parametrize(
        "width,length",
        [(math.nan, 3), (4, math.nan), (math.inf, 3), (4, -math.inf)],
    )
    def test_non_finite_dimensions_rejected(self, origin, width, length):
        with pytest.raises(InvalidDimensionsError):
            radius_from_dimensions(width, length)
        with pytest.raises(InvalidDimensionsError):
            Footprint.create(origin, width, length)

    def test_footprint_radius(self, origin):
        assert Footprint.create(origin, 4, 3).radius == 2.5


class TestDistance:
    def test_same_point_is_zero(self, origin):
        assert distance_m(origin, origin) == 0.0

    def test_one_degree_latitude(self):
        a = GeoPoint(lat=0.0, lng=0.0)
        b = GeoPoint(lat=1.0, lng=0.0)
        assert distance_m(a, b) == pytest.approx(111_195, abs=1)

    def test_symmetric(self, origin, point_at):
        other = point_at(35, 12)
        assert distance_m(origin, other) == pytest.approx(distance_m(other, origin))

    def test_city_block_offsets(self, origin, point_at):
        assert distance_m(origin, point_at(8)) == pytest.approx(8.0, abs=1e-6)
        assert distance_m(origin, point_at(0, 30)) == pytest.approx(30.0, abs=0.01)
        assert distance_m(origin, point_at(30, 40)) == pytest.approx(50.0, abs=0.05)


class TestWithinRadius:
    def test_inside(self, origin, point_at):
        assert within_radius(origin, point_at(10), 10.5) is True

    def test_outside(self, origin, point_at):
        assert within_radius(origin, point_at(10), 9.5) is False

    def test_boundary_inclusive(self, origin, point_at):
        assert within_radius(origin, point_at(10), 10.0) is True

    def test_negative_radius(self, origin):
        assert within_radius(origin, origin, -1.0) is False


class TestOffsetPoint:
    def test_north_moves_latitude_only(self, origin):
        moved = offset_point(origin, north_m=100)
        assert moved.lng == origin.lng
        assert moved.lat > origin.lat


class TestFootprintEnvelope:
    def test_envelope_contains_center(self, origin):
        envelope = footprint_envelope(origin, 4, 3)
        west, south, east, north = envelope.bounds
        assert west < origin.lng < east
        assert south < origin.lat < north

    def test_envelope_extent_in_meters(self, origin):
        west, south, east, north = footprint_envelope(origin, 10, 20).bounds
        sw = GeoPoint(lat=south, lng=west)
        nw = GeoPoint(lat=north, lng=west)
        se = GeoPoint(lat=south, lng=east)
        assert distance_m(sw, nw) == pytest.approx(20.0, abs=0.1)
        assert distance_m(sw, se) == pytest.approx(10.0, abs=0.1)

    def test_envelope_rejects_bad_dimensions(self, origin):
        with pytest.raises(InvalidDimensionsError):
            footprint_envelope(origin, -1, 3)
