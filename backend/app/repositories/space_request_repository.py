"""Space request repository for database operations."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.geometry.types import RequestStatus, ReservationRecord, TimeWindow
from app.models.database.space_request import SpaceRequest


class SpaceRequestRepository:
    """Data access for space requests. Also serves as the reservation lookup."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        vendor_id: str,
        space_id: Optional[str],
        lat: float,
        lng: float,
        max_width: float,
        max_length: float,
        start_time: datetime,
        end_time: datetime,
        total_price: float = 0.0,
        status: RequestStatus = RequestStatus.PENDING,
    ) -> SpaceRequest:
        request = SpaceRequest(
            vendor_id=vendor_id,
            space_id=space_id,
            center_lat=lat,
            center_lng=lng,
            max_width=max_width,
            max_length=max_length,
            total_price=total_price,
            start_time=start_time,
            end_time=end_time,
            status=status.value,
        )
        self.session.add(request)
        await self.session.commit()
        await self.session.refresh(request)
        return request

    async def get_by_id(self, request_id: str) -> Optional[SpaceRequest]:
        result = await self.session.execute(select(SpaceRequest).where(SpaceRequest.id == request_id))
        return result.scalar_one_or_none()

    async def list_by_vendor(self, vendor_id: str) -> list[SpaceRequest]:
        result = await self.session.execute(
            select(SpaceRequest)
            .where(SpaceRequest.vendor_id == vendor_id)
            .order_by(SpaceRequest.submitted_at.desc())
        )
        return list(result.scalars().all())

    async def list_approved_reservations(
        self,
        space_id: Optional[str],
        window: Optional[TimeWindow] = None,
    ) -> list[ReservationRecord]:
        """APPROVED requests on a space; ``None`` selects standalone requests.

        When a window is given only requests overlapping it are returned.
        """
        query = select(SpaceRequest).where(SpaceRequest.status == RequestStatus.APPROVED.value)

        if space_id is None:
            query = query.where(SpaceRequest.space_id.is_(None))
        else:
            query = query.where(SpaceRequest.space_id == space_id)

        if window is not None:
            query = query.where(
                SpaceRequest.start_time < window.end,
                SpaceRequest.end_time > window.start,
            )

        result = await self.session.execute(query.order_by(SpaceRequest.start_time))
        return [row.to_record() for row in result.scalars().all()]

    async def update(self, request: SpaceRequest, **updates: Any) -> SpaceRequest:
        for key, value in updates.items():
            setattr(request, key, value)
        await self.session.commit()
        await self.session.refresh(request)
        return request
