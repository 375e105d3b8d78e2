"""Permit repository for database operations."""

from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.geometry.types import PermitRecord, PermitStatus
from app.models.database.permit import Permit
from app.models.database.space import Space
from app.models.database.space_request import SpaceRequest


class PermitRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    def add(
        self,
        permit_id: str,
        request_id: str,
        qr_payload: str,
        valid_from: datetime,
        valid_to: datetime,
    ) -> Permit:
        """Stage a permit in the current transaction without committing."""
        permit = Permit(
            id=permit_id,
            request_id=request_id,
            qr_payload=qr_payload,
            valid_from=valid_from,
            valid_to=valid_to,
            status=PermitStatus.VALID.value,
        )
        self.session.add(permit)
        return permit

    async def get_by_id(self, permit_id: str) -> Optional[Permit]:
        result = await self.session.execute(select(Permit).where(Permit.id == permit_id))
        return result.scalar_one_or_none()

    async def get_by_qr_payload(self, qr_payload: str) -> Optional[Permit]:
        result = await self.session.execute(select(Permit).where(Permit.qr_payload == qr_payload))
        return result.scalar_one_or_none()

    async def get_by_request_id(self, request_id: str) -> Optional[Permit]:
        result = await self.session.execute(select(Permit).where(Permit.request_id == request_id))
        return result.scalar_one_or_none()

    async def get_record(self, permit: Permit) -> PermitRecord:
        """Join a permit with its reservation and space."""
        result = await self.session.execute(
            select(SpaceRequest, Space)
            .outerjoin(Space, Space.id == SpaceRequest.space_id)
            .where(SpaceRequest.id == permit.request_id)
        )
        request, space = result.one()

        return PermitRecord(
            permit_id=permit.id,
            qr_payload=permit.qr_payload,
            status=PermitStatus(permit.status),
            valid_from=permit.valid_from,
            valid_to=permit.valid_to,
            reservation=request.to_record(),
            space=space.to_boundary() if space else None,
            issued_at=permit.issued_at,
        )

    async def update_status(self, permit: Permit, status: PermitStatus) -> Permit:
        permit.status = status.value
        await self.session.commit()
        await self.session.refresh(permit)
        return permit
