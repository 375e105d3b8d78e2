"""Permits issued for approved space requests."""

import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.geometry.types import PermitStatus
from app.infrastructure.database import Base
from app.models.database.types import UTCDateTime, utcnow


class Permit(Base):
    __tablename__ = "permits"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    request_id: Mapped[str] = mapped_column(
        ForeignKey("space_requests.id"), nullable=False, unique=True, index=True
    )
    qr_payload: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    valid_from: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    valid_to: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=PermitStatus.VALID.value)
    issued_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utcnow)
