"""Spatial-temporal conflict detection.

A proposed footprint conflicts with an existing APPROVED reservation when the
two windows overlap and the circles around both footprints touch or intersect:

    distance(centers) <= proposed_radius + candidate_radius

Every candidate's radius is derived from its own stored width and length.
"""

import logging
from typing import Iterable, Optional, Protocol

from app.core.exceptions import SpatialTemporalConflictError
from app.geometry.calculator import DISTANCE_EPSILON_M, distance_m
from app.geometry.temporal import windows_overlap
from app.geometry.types import (
    ConflictDetail,
    Footprint,
    RequestStatus,
    ReservationRecord,
    TimeWindow,
)

logger = logging.getLogger(__name__)


class ReservationLookup(Protocol):
    """Read access to committed reservations."""

    async def list_approved_reservations(
        self,
        space_id: Optional[str],
        window: Optional[TimeWindow] = None,
    ) -> list[ReservationRecord]:
        ...


def is_spatial_conflict(distance: float, radius_a: float, radius_b: float) -> bool:
    """Touching circles count as conflicting."""
    return distance <= radius_a + radius_b + DISTANCE_EPSILON_M


def find_conflicts(
    footprint: Footprint,
    window: TimeWindow,
    candidates: Iterable[ReservationRecord],
    exclude_request_id: Optional[str] = None,
) -> list[ConflictDetail]:
    """Return every candidate that overlaps the proposal in space and time.

    Args:
        footprint: Proposed footprint
        window: Proposed reservation window
        candidates: Existing reservations; only APPROVED ones are considered
        exclude_request_id: Skip this reservation (used when re-checking a
            request against its own space at approval time)

    Returns:
        Conflicts in candidate order, empty when the proposal is clean
    """
    proposed_radius = footprint.radius
    conflicts: list[ConflictDetail] = []

    for candidate in candidates:
        if candidate.status != RequestStatus.APPROVED:
            continue
        if exclude_request_id is not None and candidate.request_id == exclude_request_id:
            continue
        if not windows_overlap(window, candidate.window):
            continue

        candidate_radius = candidate.footprint.radius
        separation = proposed_radius + candidate_radius
        distance = distance_m(footprint.center, candidate.footprint.center)

        logger.debug(
            f"Candidate {candidate.request_id}: distance={distance:.2f}m "
            f"required={separation:.2f}m"
        )

        if is_spatial_conflict(distance, proposed_radius, candidate_radius):
            conflicts.append(
                ConflictDetail(
                    request_id=candidate.request_id,
                    vendor_id=candidate.vendor_id,
                    center=candidate.footprint.center,
                    window=candidate.window,
                    distance_m=distance,
                    required_separation_m=separation,
                    candidate_radius_m=candidate_radius,
                )
            )

    return conflicts


class ConflictDetector:
    """Accept/reject decision for a footprint against approved reservations."""

    def __init__(self, lookup: ReservationLookup):
        self.lookup = lookup

    async def check(
        self,
        space_id: Optional[str],
        footprint: Footprint,
        window: TimeWindow,
        exclude_request_id: Optional[str] = None,
    ) -> list[ConflictDetail]:
        candidates = await self.lookup.list_approved_reservations(space_id, window)
        conflicts = find_conflicts(footprint, window, candidates, exclude_request_id)

        logger.info(
            f"Conflict check for space={space_id}: {len(candidates)} candidate(s), "
            f"{len(conflicts)} conflict(s)"
        )
        return conflicts

    async def ensure_no_conflicts(
        self,
        space_id: Optional[str],
        footprint: Footprint,
        window: TimeWindow,
        exclude_request_id: Optional[str] = None,
    ) -> None:
        """Raise SpatialTemporalConflictError carrying the full conflict set."""
        conflicts = await self.check(space_id, footprint, window, exclude_request_id)
        if conflicts:
            raise SpatialTemporalConflictError(conflicts)
