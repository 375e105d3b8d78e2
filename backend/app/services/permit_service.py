"""Permit verification and revocation."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidSignatureError, PermitNotFoundError
from app.core.security import PermitTokenSigner
from app.geometry.permits import PermitValidityEvaluator
from app.geometry.types import PermitStatus, PermitValidityResult
from app.models.database.permit import Permit
from app.repositories.permit_repository import PermitRepository

logger = logging.getLogger(__name__)


class PermitService:
    def __init__(self, session: AsyncSession, signer: PermitTokenSigner):
        self.signer = signer
        self.repo = PermitRepository(session)
        self.evaluator = PermitValidityEvaluator()

    async def verify_token(self, qr_code_data: str, now: Optional[datetime] = None) -> PermitValidityResult:
        """Verify a presented QR payload.

        Raises InvalidSignatureError for tokens we did not sign and
        PermitNotFoundError for authentic tokens with no stored permit.
        """
        claims = self.signer.verify(qr_code_data)

        permit = await self.repo.get_by_qr_payload(qr_code_data)
        if not permit:
            logger.warning(f"Authentic token for unknown permit {claims.get('sub')}")
            raise PermitNotFoundError()

        record = await self.repo.get_record(permit)
        return self.evaluator.evaluate(record, signature_valid=True, now=now, claims=claims)

    async def verify_permit_id(self, permit_id: str, now: Optional[datetime] = None) -> PermitValidityResult:
        """Verify a stored permit by id, reporting its signature as a check."""
        permit = await self._get_permit(permit_id)
        record = await self.repo.get_record(permit)

        try:
            claims = self.signer.verify(permit.qr_payload)
            signature_valid = claims.get("sub") == permit.id
        except InvalidSignatureError:
            logger.warning(f"Stored payload for permit {permit_id} failed verification")
            claims, signature_valid = {}, False

        return self.evaluator.evaluate(record, signature_valid=signature_valid, now=now, claims=claims)

    async def revoke(self, permit_id: str) -> Permit:
        permit = await self._get_permit(permit_id)
        permit = await self.repo.update_status(permit, PermitStatus.REVOKED)
        logger.info(f"Revoked permit {permit_id}")
        return permit

    async def _get_permit(self, permit_id: str) -> Permit:
        permit = await self.repo.get_by_id(permit_id)
        if not permit:
            raise PermitNotFoundError(f"Permit not found: {permit_id}")
        return permit
