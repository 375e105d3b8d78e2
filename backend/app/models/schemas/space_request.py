"""Space request (reservation) schemas."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from app.geometry.calculator import footprint_envelope
from app.models.database.space_request import SpaceRequest
from app.models.schemas.permit import PermitResponse


class SpaceRequestCreate(BaseModel):
    """Submission body. Naive timestamps are read as UTC."""

    vendor_id: str
    space_id: Optional[str] = None
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    width: float = Field(..., allow_inf_nan=False, description="Footprint width in meters")
    length: float = Field(..., allow_inf_nan=False, description="Footprint length in meters")
    start_time: datetime
    end_time: datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class Bounds(BaseModel):
    west: float
    south: float
    east: float
    north: float


class SpaceRequestResponse(BaseModel):
    id: str
    vendor_id: str
    space_id: Optional[str] = None
    lat: float
    lng: float
    width: float
    length: float
    derived_radius: float
    bounds: Bounds
    total_price: float
    start_time: datetime
    end_time: datetime
    status: str
    remarks: Optional[str] = None
    submitted_at: datetime
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    owner_approved_by: Optional[str] = None
    owner_approved_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, request: SpaceRequest) -> "SpaceRequestResponse":
        footprint = request.footprint
        west, south, east, north = footprint_envelope(
            footprint.center, footprint.width, footprint.length
        ).bounds
        return cls(
            id=request.id,
            vendor_id=request.vendor_id,
            space_id=request.space_id,
            lat=request.center_lat,
            lng=request.center_lng,
            width=request.max_width,
            length=request.max_length,
            derived_radius=round(footprint.radius, 4),
            bounds=Bounds(west=west, south=south, east=east, north=north),
            total_price=request.total_price,
            start_time=request.start_time,
            end_time=request.end_time,
            status=request.status,
            remarks=request.remarks,
            submitted_at=request.submitted_at,
            reviewed_by=request.reviewed_by,
            reviewed_at=request.reviewed_at,
            owner_approved_by=request.owner_approved_by,
            owner_approved_at=request.owner_approved_at,
        )


class ReviewRequest(BaseModel):
    reviewer_id: str
    decision: Literal["approve", "reject"]
    remarks: Optional[str] = Field(None, max_length=2000)

    @property
    def approve(self) -> bool:
        return self.decision == "approve"


class ReviewResponse(BaseModel):
    request: SpaceRequestResponse
    permit: Optional[PermitResponse] = None
