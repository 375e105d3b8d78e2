"""Owner and administrator decisions on space requests.

Owner stage:  OWNER_PENDING -> PENDING | OWNER_REJECTED
Admin stage:  PENDING -> APPROVED | REJECTED, APPROVED -> REJECTED

Approval is the moment a request becomes an obstacle for others, so it
re-runs conflict detection under the space lock and issues the permit in the
same transaction.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    InvalidStatusTransitionError,
    NotSpaceOwnerError,
    ReservationNotFoundError,
)
from app.core.security import PermitTokenSigner
from app.geometry.conflicts import ConflictDetector
from app.geometry.types import RequestStatus
from app.infrastructure.locks import SpaceLockManager
from app.models.database.permit import Permit
from app.models.database.space_request import SpaceRequest
from app.repositories.permit_repository import PermitRepository
from app.repositories.space_repository import SpaceRepository
from app.repositories.space_request_repository import SpaceRequestRepository

logger = logging.getLogger(__name__)

S = RequestStatus

OWNER_TRANSITIONS: dict[RequestStatus, set[RequestStatus]] = {
    S.OWNER_PENDING: {S.PENDING, S.OWNER_REJECTED},
}

ADMIN_TRANSITIONS: dict[RequestStatus, set[RequestStatus]] = {
    S.PENDING: {S.APPROVED, S.REJECTED},
    S.APPROVED: {S.REJECTED},
}


def validate_transition(
    transitions: dict[RequestStatus, set[RequestStatus]],
    current: RequestStatus,
    target: RequestStatus,
) -> None:
    if target not in transitions.get(current, set()):
        raise InvalidStatusTransitionError(current.value, target.value)


class ReviewService:
    def __init__(self, session: AsyncSession, locks: SpaceLockManager, signer: PermitTokenSigner):
        self.session = session
        self.locks = locks
        self.signer = signer
        self.request_repo = SpaceRequestRepository(session)
        self.permit_repo = PermitRepository(session)
        self.space_repo = SpaceRepository(session)
        self.conflict_detector = ConflictDetector(self.request_repo)

    async def _get_request(self, request_id: str) -> SpaceRequest:
        request = await self.request_repo.get_by_id(request_id)
        if not request:
            raise ReservationNotFoundError(request_id)
        return request

    async def _reload(self, request: SpaceRequest) -> SpaceRequest:
        """Re-read a request once its space lock is held."""
        await self.session.refresh(request)
        return request

    async def owner_review(
        self,
        request_id: str,
        owner_id: str,
        approve: bool,
        remarks: Optional[str] = None,
    ) -> SpaceRequest:
        request = await self._get_request(request_id)
        space = await self.space_repo.get_by_id(request.space_id) if request.space_id else None
        if space is None or space.owner_id != owner_id:
            logger.warning(f"{owner_id} is not the owner of the space for request {request_id}")
            raise NotSpaceOwnerError(owner_id, request.space_id)

        target = S.PENDING if approve else S.OWNER_REJECTED

        async with self.locks.hold(request.space_id):
            request = await self._reload(request)
            validate_transition(OWNER_TRANSITIONS, S(request.status), target)

            request = await self.request_repo.update(
                request,
                status=target.value,
                owner_approved_by=owner_id,
                owner_approved_at=datetime.now(timezone.utc),
                remarks=remarks if remarks is not None else request.remarks,
            )

        logger.info(f"Owner {owner_id} moved request {request_id} to {target.value}")
        return request

    async def admin_review(
        self,
        request_id: str,
        reviewer_id: str,
        approve: bool,
        remarks: Optional[str] = None,
    ) -> tuple[SpaceRequest, Optional[Permit]]:
        """Record an administrator decision.

        The status is re-read and validated under the space lock, so two
        concurrent approvals of one request issue a single permit.
        """
        request = await self._get_request(request_id)
        target = S.APPROVED if approve else S.REJECTED
        validate_transition(ADMIN_TRANSITIONS, S(request.status), target)

        async with self.locks.hold(request.space_id):
            request = await self._reload(request)
            validate_transition(ADMIN_TRANSITIONS, S(request.status), target)

            if not approve:
                request = await self.request_repo.update(
                    request,
                    status=target.value,
                    reviewed_by=reviewer_id,
                    reviewed_at=datetime.now(timezone.utc),
                    remarks=remarks if remarks is not None else request.remarks,
                )
                logger.info(f"Admin {reviewer_id} rejected request {request_id}")
                return request, await self.permit_repo.get_by_request_id(request.id)

            await self.conflict_detector.ensure_no_conflicts(
                request.space_id,
                request.footprint,
                request.window,
                exclude_request_id=request.id,
            )

            request.status = target.value
            request.reviewed_by = reviewer_id
            request.reviewed_at = datetime.now(timezone.utc)
            if remarks is not None:
                request.remarks = remarks
            permit = self._issue_permit(request)
            await self.session.commit()

        await self.session.refresh(request)
        await self.session.refresh(permit)
        logger.info(f"Admin {reviewer_id} approved request {request_id}, issued permit {permit.id}")
        return request, permit

    def _issue_permit(self, request: SpaceRequest) -> Permit:
        permit_id = str(uuid.uuid4())
        token = self.signer.sign(
            {
                "sub": permit_id,
                "request_id": request.id,
                "vendor_id": request.vendor_id,
                "space_id": request.space_id,
                "valid_from": request.start_time.isoformat(),
                "valid_to": request.end_time.isoformat(),
            }
        )
        return self.permit_repo.add(
            permit_id=permit_id,
            request_id=request.id,
            qr_payload=token,
            valid_from=request.start_time,
            valid_to=request.end_time,
        )
