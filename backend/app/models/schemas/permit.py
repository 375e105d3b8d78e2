"""Permit and verification schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.geometry.types import PermitValidityResult
from app.models.database.permit import Permit


class PermitResponse(BaseModel):
    id: str
    request_id: str
    qr_payload: str
    valid_from: datetime
    valid_to: datetime
    status: str
    issued_at: datetime

    model_config = {"from_attributes": True}


class PermitVerifyRequest(BaseModel):
    qr_code_data: str = Field(..., min_length=1)


class PermitChecksResponse(BaseModel):
    permit_status: bool
    time_validity: bool
    request_status: bool
    signature: bool
    spatial_correctness: bool


class VerifiedPermit(BaseModel):
    permit_id: str
    request_id: str
    vendor_id: str
    space_id: Optional[str] = None
    permit_status: str
    request_status: str
    valid_from: datetime
    valid_to: datetime
    issued_at: Optional[datetime] = None


class PermitVerifyResponse(BaseModel):
    valid: bool
    checks: PermitChecksResponse
    permit: VerifiedPermit
    evaluated_at: datetime
    claims: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: PermitValidityResult) -> "PermitVerifyResponse":
        record = result.permit
        return cls(
            valid=result.valid,
            checks=PermitChecksResponse(**result.checks.to_dict()),
            permit=VerifiedPermit(
                permit_id=record.permit_id,
                request_id=record.reservation.request_id,
                vendor_id=record.reservation.vendor_id,
                space_id=record.reservation.space_id,
                permit_status=record.status.value,
                request_status=record.reservation.status.value,
                valid_from=record.valid_from,
                valid_to=record.valid_to,
                issued_at=record.issued_at,
            ),
            evaluated_at=result.evaluated_at,
            claims=result.claims,
        )


def permit_response(permit: Optional[Permit]) -> Optional[PermitResponse]:
    return PermitResponse.model_validate(permit) if permit else None
