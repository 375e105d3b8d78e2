"""Vendor space request endpoints."""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_review_service, get_submission_service
from app.models.schemas.permit import permit_response
from app.models.schemas.space_request import (
    ReviewRequest,
    ReviewResponse,
    SpaceRequestCreate,
    SpaceRequestResponse,
)
from app.services.review_service import ReviewService
from app.services.submission_service import SubmissionService

router = APIRouter()


@router.post("", response_model=SpaceRequestResponse, status_code=status.HTTP_201_CREATED)
async def submit_request(
    request: SpaceRequestCreate,
    submission_service: SubmissionService = Depends(get_submission_service),
) -> SpaceRequestResponse:
    """Submit a footprint and time window for approval."""
    created = await submission_service.submit(request)
    return SpaceRequestResponse.from_model(created)


@router.get("/vendor/{vendor_id}", response_model=list[SpaceRequestResponse])
async def list_vendor_requests(
    vendor_id: str,
    submission_service: SubmissionService = Depends(get_submission_service),
) -> list[SpaceRequestResponse]:
    requests = await submission_service.list_vendor_requests(vendor_id)
    return [SpaceRequestResponse.from_model(r) for r in requests]


@router.get("/{request_id}", response_model=SpaceRequestResponse)
async def get_request(
    request_id: str,
    submission_service: SubmissionService = Depends(get_submission_service),
) -> SpaceRequestResponse:
    request = await submission_service.get_request(request_id)
    return SpaceRequestResponse.from_model(request)


@router.post("/{request_id}/owner-review", response_model=ReviewResponse)
async def owner_review(
    request_id: str,
    review: ReviewRequest,
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    """Space owner accepts or declines a request on their space."""
    updated = await review_service.owner_review(
        request_id, review.reviewer_id, review.approve, review.remarks
    )
    return ReviewResponse(request=SpaceRequestResponse.from_model(updated))


@router.post("/{request_id}/review", response_model=ReviewResponse)
async def admin_review(
    request_id: str,
    review: ReviewRequest,
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    """Administrator decision. Approval issues a permit."""
    updated, permit = await review_service.admin_review(
        request_id, review.reviewer_id, review.approve, review.remarks
    )
    return ReviewResponse(
        request=SpaceRequestResponse.from_model(updated),
        permit=permit_response(permit),
    )
