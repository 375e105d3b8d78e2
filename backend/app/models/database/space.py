"""Owner-defined spaces vendors may request within."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.geometry.types import GeoPoint, SpaceBoundary
from app.infrastructure.database import Base
from app.models.database.types import UTCDateTime, utcnow


class Space(Base):
    __tablename__ = "spaces"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True, index=True)
    space_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    center_lat: Mapped[float] = mapped_column(Float, nullable=False)
    center_lng: Mapped[float] = mapped_column(Float, nullable=False)
    allowed_radius: Mapped[float] = mapped_column(Float, nullable=False)
    price_per_radius: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utcnow)

    def to_boundary(self) -> SpaceBoundary:
        return SpaceBoundary(
            space_id=self.id,
            center=GeoPoint(lat=self.center_lat, lng=self.center_lng),
            allowed_radius=self.allowed_radius,
            owner_id=self.owner_id,
            price_per_radius=self.price_per_radius or 0.0,
        )
