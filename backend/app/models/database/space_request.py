"""Vendor space requests (reservations)."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.geometry.types import Footprint, GeoPoint, RequestStatus, ReservationRecord, TimeWindow
from app.infrastructure.database import Base
from app.models.database.types import UTCDateTime, utcnow


class SpaceRequest(Base):
    __tablename__ = "space_requests"
    __table_args__ = (
        Index("ix_space_requests_space_status_window", "space_id", "status", "start_time", "end_time"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    vendor_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    space_id: Mapped[Optional[str]] = mapped_column(ForeignKey("spaces.id"), nullable=True)
    center_lat: Mapped[float] = mapped_column(Float, nullable=False)
    center_lng: Mapped[float] = mapped_column(Float, nullable=False)
    max_width: Mapped[float] = mapped_column(Float, nullable=False)
    max_length: Mapped[float] = mapped_column(Float, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    start_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    end_time: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=RequestStatus.PENDING.value)
    remarks: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utcnow)
    reviewed_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)
    owner_approved_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    owner_approved_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime, nullable=True)

    @property
    def footprint(self) -> Footprint:
        return Footprint(
            center=GeoPoint(lat=self.center_lat, lng=self.center_lng),
            width=self.max_width,
            length=self.max_length,
        )

    @property
    def window(self) -> TimeWindow:
        return TimeWindow(start=self.start_time, end=self.end_time)

    def to_record(self) -> ReservationRecord:
        return ReservationRecord(
            request_id=self.id,
            vendor_id=self.vendor_id,
            space_id=self.space_id,
            footprint=self.footprint,
            window=self.window,
            status=RequestStatus(self.status),
        )
