"""Unit tests for space boundary containment."""

import pytest

from app.core.exceptions import FootprintExceedsSpaceError, OutOfBoundsError, SpaceNotFoundError
from app.geometry.boundary import BoundaryChecker, evaluate_containment
from app.geometry.types import Footprint, GeoPoint, SpaceBoundary


@pytest.fixture
def checker():
    return BoundaryChecker()


class TestEvaluateContainment:
    def test_clean_accept_scenario(self, space_100m, point_at):
        footprint = Footprint(center=point_at(90), width=4, length=3)

        result = evaluate_containment(footprint, space_100m)

        assert result.within is True
        assert result.required_radius_m == 2.5
        assert result.available_radius_m == 97.5
        assert result.distance_m == pytest.approx(90.0, abs=1e-6)

    def test_exact_boundary_is_accepted(self, space_20m, point_at):
        # radius 5, so the center may sit exactly 15m out
        footprint = Footprint(center=point_at(15), width=6, length=8)

        assert evaluate_containment(footprint, space_20m).within is True

    def test_one_meter_further_is_rejected(self, space_20m, point_at):
        footprint = Footprint(center=point_at(16), width=6, length=8)

        assert evaluate_containment(footprint, space_20m).within is False

    def test_footprint_larger_than_space(self, origin):
        space = SpaceBoundary(space_id="tiny", center=origin, allowed_radius=4.0)
        result = evaluate_containment(Footprint(center=origin, width=6, length=8), space)

        assert result.within is False
        assert result.exceeds_capacity is True


class TestBoundaryChecker:
    def test_out_of_bounds_scenario(self, checker, space_20m, point_at):
        footprint = Footprint(center=point_at(17), width=6, length=8)

        with pytest.raises(OutOfBoundsError) as exc_info:
            checker.ensure_within(footprint, space_20m)

        error = exc_info.value
        assert error.code == "OUT_OF_BOUNDS"
        assert error.context["required_radius_m"] == 5.0
        assert error.context["available_radius_m"] == 15.0
        assert error.context["distance_m"] == 17.0
        assert "5.00m radius" in error.detail

    def test_exceeds_capacity_is_a_distinct_error(self, checker, origin):
        space = SpaceBoundary(space_id="tiny", center=origin, allowed_radius=5.0)
        footprint = Footprint(center=origin, width=6, length=8)

        with pytest.raises(FootprintExceedsSpaceError) as exc_info:
            checker.ensure_within(footprint, space)

        assert exc_info.value.code == "FOOTPRINT_EXCEEDS_SPACE"
        assert isinstance(exc_info.value, OutOfBoundsError)

    def test_within_returns_result(self, checker, space_100m, origin):
        result = checker.ensure_within(Footprint(center=origin, width=4, length=3), space_100m)
        assert result.within is True

    def test_far_away_point(self, checker, space_100m):
        footprint = Footprint(center=GeoPoint(lat=40.80, lng=-74.0060), width=4, length=3)

        with pytest.raises(OutOfBoundsError):
            checker.ensure_within(footprint, space_100m)


class FakeSpaces:
    def __init__(self, *spaces):
        self.spaces = {s.space_id: s for s in spaces}

    async def get_space(self, space_id):
        return self.spaces.get(space_id)


class TestCheckSpace:
    @pytest.mark.asyncio
    async def test_returns_loaded_space(self, space_100m, origin):
        checker = BoundaryChecker(FakeSpaces(space_100m))

        space = await checker.check_space("space-1", Footprint(center=origin, width=4, length=3))

        assert space is space_100m

    @pytest.mark.asyncio
    async def test_unknown_space(self, origin):
        checker = BoundaryChecker(FakeSpaces())

        with pytest.raises(SpaceNotFoundError):
            await checker.check_space("missing", Footprint(center=origin, width=4, length=3))

    @pytest.mark.asyncio
    async def test_loaded_space_is_enforced(self, space_20m, point_at):
        checker = BoundaryChecker(FakeSpaces(space_20m))

        with pytest.raises(OutOfBoundsError):
            await checker.check_space("space-2", Footprint(center=point_at(17), width=6, length=8))
