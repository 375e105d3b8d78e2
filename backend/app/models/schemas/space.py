"""Space request/response schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.database.space import Space


class SpaceCreateRequest(BaseModel):
    owner_id: Optional[str] = None
    space_name: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=500)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    allowed_radius: float = Field(..., allow_inf_nan=False, description="Radius in meters vendors may extend into")
    price_per_radius: float = Field(0.0, ge=0, allow_inf_nan=False)


class SpaceResponse(BaseModel):
    id: str
    owner_id: Optional[str] = None
    space_name: Optional[str] = None
    address: Optional[str] = None
    lat: float
    lng: float
    allowed_radius: float
    price_per_radius: float
    created_at: datetime

    @classmethod
    def from_model(cls, space: Space) -> "SpaceResponse":
        return cls(
            id=space.id,
            owner_id=space.owner_id,
            space_name=space.space_name,
            address=space.address,
            lat=space.center_lat,
            lng=space.center_lng,
            allowed_radius=space.allowed_radius,
            price_per_radius=space.price_per_radius,
            created_at=space.created_at,
        )
