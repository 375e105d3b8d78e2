"""Vendor space request submission.

Validation order: dimensions, time window, space lookup, boundary
containment, then conflict detection. The conflict check and the insert run
under the space's submission lock.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.exceptions import ReservationNotFoundError
from app.geometry.boundary import BoundaryChecker
from app.geometry.conflicts import ConflictDetector
from app.geometry.types import Footprint, GeoPoint, RequestStatus, SpaceBoundary, TimeWindow
from app.infrastructure.locks import SpaceLockManager
from app.models.database.space_request import SpaceRequest
from app.models.schemas.space_request import SpaceRequestCreate
from app.repositories.space_repository import SpaceRepository
from app.repositories.space_request_repository import SpaceRequestRepository

logger = logging.getLogger(__name__)


def calculate_price(footprint: Footprint, space: Optional[SpaceBoundary]) -> float:
    """Price is the footprint radius times the space's per-meter rate."""
    if space is None or not space.price_per_radius:
        return 0.0
    return round(footprint.radius * space.price_per_radius, 2)


def initial_status(space: Optional[SpaceBoundary]) -> RequestStatus:
    """Requests on owned spaces go to the owner first."""
    if space is not None and space.owner_id:
        return RequestStatus.OWNER_PENDING
    return RequestStatus.PENDING


class SubmissionService:
    def __init__(self, session: AsyncSession, locks: SpaceLockManager, settings: Settings):
        self.settings = settings
        self.locks = locks
        self.space_repo = SpaceRepository(session)
        self.request_repo = SpaceRequestRepository(session)
        self.boundary_checker = BoundaryChecker(self.space_repo)
        self.conflict_detector = ConflictDetector(self.request_repo)

    async def submit(self, payload: SpaceRequestCreate) -> SpaceRequest:
        """Validate and persist a new request.

        Raises InvalidDimensionsError, InvalidTimeWindowError,
        SpaceNotFoundError, OutOfBoundsError or SpatialTemporalConflictError.
        """
        footprint = Footprint.create(GeoPoint(payload.lat, payload.lng), payload.width, payload.length)
        window = TimeWindow.create(payload.start_time, payload.end_time)

        space: Optional[SpaceBoundary] = None
        if payload.space_id:
            space = await self.boundary_checker.check_space(payload.space_id, footprint)

        async with self.locks.hold(payload.space_id):
            if space is not None or self.settings.check_standalone_conflicts:
                await self.conflict_detector.ensure_no_conflicts(payload.space_id, footprint, window)

            status = initial_status(space)
            request = await self.request_repo.create(
                vendor_id=payload.vendor_id,
                space_id=payload.space_id,
                lat=payload.lat,
                lng=payload.lng,
                max_width=footprint.width,
                max_length=footprint.length,
                start_time=window.start,
                end_time=window.end,
                total_price=calculate_price(footprint, space),
                status=status,
            )

        logger.info(
            f"Vendor {payload.vendor_id} submitted request {request.id} "
            f"for space {payload.space_id or 'standalone'} as {status.value}"
        )
        return request

    async def get_request(self, request_id: str) -> SpaceRequest:
        request = await self.request_repo.get_by_id(request_id)
        if not request:
            raise ReservationNotFoundError(request_id)
        return request

    async def list_vendor_requests(self, vendor_id: str) -> list[SpaceRequest]:
        return await self.request_repo.list_by_vendor(vendor_id)
