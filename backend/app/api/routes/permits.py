"""Permit verification endpoints."""

from fastapi import APIRouter, Depends

from app.api.deps import get_permit_service
from app.models.schemas.permit import PermitResponse, PermitVerifyRequest, PermitVerifyResponse
from app.services.permit_service import PermitService

router = APIRouter()


@router.post("/verify", response_model=PermitVerifyResponse)
async def verify_qr_code(
    request: PermitVerifyRequest,
    permit_service: PermitService = Depends(get_permit_service),
) -> PermitVerifyResponse:
    """Verify a scanned QR payload."""
    result = await permit_service.verify_token(request.qr_code_data)
    return PermitVerifyResponse.from_result(result)


@router.get("/{permit_id}/verify", response_model=PermitVerifyResponse)
async def verify_permit(
    permit_id: str,
    permit_service: PermitService = Depends(get_permit_service),
) -> PermitVerifyResponse:
    result = await permit_service.verify_permit_id(permit_id)
    return PermitVerifyResponse.from_result(result)


@router.post("/{permit_id}/revoke", response_model=PermitResponse)
async def revoke_permit(
    permit_id: str,
    permit_service: PermitService = Depends(get_permit_service),
) -> PermitResponse:
    permit = await permit_service.revoke(permit_id)
    return PermitResponse.model_validate(permit)
