"""Geometry engine package for street vendor permitting.

Provides distance and radius math, reservation window overlap, conflict
detection, space boundary containment and permit validity evaluation.
"""

from app.geometry.types import (
    Footprint,
    GeoPoint,
    PermitStatus,
    RequestStatus,
    SpaceBoundary,
    TimeWindow,
)
from app.geometry.boundary import BoundaryChecker
from app.geometry.conflicts import ConflictDetector, find_conflicts
from app.geometry.permits import PermitValidityEvaluator

__all__ = [
    "Footprint",
    "GeoPoint",
    "PermitStatus",
    "RequestStatus",
    "SpaceBoundary",
    "TimeWindow",
    "BoundaryChecker",
    "ConflictDetector",
    "find_conflicts",
    "PermitValidityEvaluator",
]
