"""Geofencing: does a footprint fit inside its space?"""

import logging
from typing import Optional, Protocol

from app.core.exceptions import FootprintExceedsSpaceError, OutOfBoundsError, SpaceNotFoundError
from app.geometry.calculator import DISTANCE_EPSILON_M, distance_m
from app.geometry.types import BoundaryCheckResult, Footprint, SpaceBoundary

logger = logging.getLogger(__name__)


class SpaceLookup(Protocol):
    async def get_space(self, space_id: str) -> Optional[SpaceBoundary]:
        ...


def evaluate_containment(footprint: Footprint, space: SpaceBoundary) -> BoundaryCheckResult:
    """Measure a footprint against a space without raising.

    The footprint fits when its whole circle lies inside the space circle:
    ``distance(centers) <= allowed_radius - footprint_radius``.
    """
    required = footprint.radius
    distance = distance_m(footprint.center, space.center)
    available = space.allowed_radius - required

    within = required < space.allowed_radius and distance <= available + DISTANCE_EPSILON_M

    return BoundaryCheckResult(
        within=within,
        distance_m=distance,
        required_radius_m=required,
        allowed_radius_m=space.allowed_radius,
    )


class BoundaryChecker:
    """Raises when a footprint leaves its space's allowed radius."""

    def __init__(self, spaces: Optional[SpaceLookup] = None):
        self.spaces = spaces

    async def check_space(self, space_id: str, footprint: Footprint) -> SpaceBoundary:
        """Load a space and ensure the footprint fits inside it."""
        if self.spaces is None:
            raise RuntimeError("BoundaryChecker has no space lookup")
        space = await self.spaces.get_space(space_id)
        if space is None:
            raise SpaceNotFoundError(space_id)
        self.ensure_within(footprint, space)
        return space

    def ensure_within(self, footprint: Footprint, space: SpaceBoundary) -> BoundaryCheckResult:
        result = evaluate_containment(footprint, space)

        if result.exceeds_capacity:
            logger.info(
                f"Footprint radius {result.required_radius_m:.2f}m exceeds space "
                f"{space.space_id} capacity {space.allowed_radius:.2f}m"
            )
            raise FootprintExceedsSpaceError(
                result.distance_m, result.required_radius_m, result.allowed_radius_m
            )

        if not result.within:
            logger.info(
                f"Footprint out of bounds for space {space.space_id}: "
                f"{result.distance_m:.2f}m > {result.available_radius_m:.2f}m"
            )
            raise OutOfBoundsError(
                result.distance_m, result.required_radius_m, result.allowed_radius_m
            )

        return result
