"""Permit validity evaluation.

A permit is valid only while all of these hold:

1. its own status is VALID (not revoked),
2. now lies inside ``[valid_from, valid_to]`` (both ends inclusive),
3. the reservation it was issued for is still APPROVED,
4. its signed payload is authentic,
5. the reservation footprint still sits inside its space boundary.

An invalid permit is a normal answer, not an error.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from app.geometry.boundary import evaluate_containment
from app.geometry.temporal import window_contains
from app.geometry.types import (
    PermitChecks,
    PermitRecord,
    PermitStatus,
    PermitValidityResult,
    RequestStatus,
)

logger = logging.getLogger(__name__)


class PermitValidityEvaluator:
    def evaluate(
        self,
        permit: PermitRecord,
        signature_valid: bool,
        now: Optional[datetime] = None,
        claims: Optional[dict[str, Any]] = None,
    ) -> PermitValidityResult:
        now = now or datetime.now(timezone.utc)

        checks = PermitChecks(
            permit_status=permit.status == PermitStatus.VALID,
            time_validity=window_contains(permit.valid_from, permit.valid_to, now),
            request_status=permit.reservation.status == RequestStatus.APPROVED,
            signature=signature_valid,
            spatial_correctness=self._spatial_correctness(permit),
        )

        valid = checks.all_passed
        if not valid:
            failed = [name for name, ok in checks.to_dict().items() if not ok]
            logger.info(f"Permit {permit.permit_id} invalid: failed {', '.join(failed)}")

        return PermitValidityResult(
            valid=valid,
            checks=checks,
            permit=permit,
            evaluated_at=now,
            claims=claims or {},
        )

    def _spatial_correctness(self, permit: PermitRecord) -> bool:
        if permit.space is None:
            return True
        return evaluate_containment(permit.reservation.footprint, permit.space).within
