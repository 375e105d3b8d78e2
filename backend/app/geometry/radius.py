"""Radius derivation for rectangular vendor footprints."""

import math

from app.core.exceptions import InvalidDimensionsError


def valid_dimensions(width: float, length: float) -> bool:
    """Both sides present, finite and positive."""
    return all(
        side is not None and math.isfinite(side) and side > 0
        for side in (width, length)
    )


def radius_from_dimensions(width: float, length: float) -> float:
    """Approximate a width x length rectangle by its circumscribed circle.

    The radius is half the rectangle's diagonal, so the circle covers the
    rectangle in any orientation.

    Args:
        width: Footprint width in meters, must be finite and positive
        length: Footprint length in meters, must be finite and positive

    Returns:
        Radius in meters
    """
    if not valid_dimensions(width, length):
        raise InvalidDimensionsError(width, length)
    return math.sqrt(width**2 + length**2) / 2
