"""Type definitions for the geometry engine.

Contains enums and value objects used throughout the geometry module.
Distances and radii are meters, coordinates are WGS84 degrees and every
timestamp is timezone-aware.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from app.core.exceptions import InvalidDimensionsError, InvalidTimeWindowError
from app.geometry.radius import radius_from_dimensions, valid_dimensions


class RequestStatus(str, Enum):
    """Lifecycle of a space request (reservation)."""

    OWNER_PENDING = "OWNER_PENDING"
    OWNER_REJECTED = "OWNER_REJECTED"
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class PermitStatus(str, Enum):
    """Whether an issued permit is still in force."""

    VALID = "VALID"
    REVOKED = "REVOKED"


@dataclass(frozen=True)
class GeoPoint:
    """A geographic point in degrees."""

    lat: float
    lng: float

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class TimeWindow:
    """A half-open reservation window ``[start, end)``."""

    start: datetime
    end: datetime

    @classmethod
    def create(cls, start: datetime, end: datetime) -> "TimeWindow":
        """Build a window, rejecting ``start >= end``."""
        if start >= end:
            raise InvalidTimeWindowError(start, end)
        return cls(start=start, end=end)

    @property
    def is_degenerate(self) -> bool:
        return self.start >= self.end


@dataclass(frozen=True)
class Footprint:
    """A vendor's physical claim: center plus declared rectangle."""

    center: GeoPoint
    width: float
    length: float

    @classmethod
    def create(cls, center: GeoPoint, width: float, length: float) -> "Footprint":
        if not valid_dimensions(width, length):
            raise InvalidDimensionsError(width, length)
        return cls(center=center, width=float(width), length=float(length))

    @property
    def radius(self) -> float:
        return radius_from_dimensions(self.width, self.length)


@dataclass(frozen=True)
class SpaceBoundary:
    """Owner-defined zone vendors may request within."""

    space_id: str
    center: GeoPoint
    allowed_radius: float
    owner_id: Optional[str] = None
    price_per_radius: float = 0.0


@dataclass(frozen=True)
class ReservationRecord:
    """An existing reservation as seen by the conflict detector."""

    request_id: str
    vendor_id: str
    space_id: Optional[str]
    footprint: Footprint
    window: TimeWindow
    status: RequestStatus


@dataclass
class ConflictDetail:
    """One existing reservation that blocks a proposed footprint."""

    request_id: str
    vendor_id: str
    center: GeoPoint
    window: TimeWindow
    distance_m: float
    required_separation_m: float
    candidate_radius_m: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_id": self.request_id,
            "vendor_id": self.vendor_id,
            "lat": self.center.lat,
            "lng": self.center.lng,
            "start_time": self.window.start.isoformat(),
            "end_time": self.window.end.isoformat(),
            "distance_m": round(self.distance_m, 2),
            "required_separation_m": round(self.required_separation_m, 2),
            "candidate_radius_m": round(self.candidate_radius_m, 2),
        }


@dataclass
class BoundaryCheckResult:
    """Outcome of a containment test against a space boundary."""

    within: bool
    distance_m: float
    required_radius_m: float
    allowed_radius_m: float

    @property
    def available_radius_m(self) -> float:
        return self.allowed_radius_m - self.required_radius_m

    @property
    def exceeds_capacity(self) -> bool:
        return self.required_radius_m >= self.allowed_radius_m


@dataclass
class PermitRecord:
    """A permit joined with the reservation it was issued for."""

    permit_id: str
    qr_payload: str
    status: PermitStatus
    valid_from: datetime
    valid_to: datetime
    reservation: ReservationRecord
    space: Optional[SpaceBoundary] = None
    issued_at: Optional[datetime] = None


@dataclass
class PermitChecks:
    """Individual outcomes of the permit validity predicate."""

    permit_status: bool
    time_validity: bool
    request_status: bool
    signature: bool
    spatial_correctness: bool = True

    @property
    def all_passed(self) -> bool:
        return (
            self.permit_status
            and self.time_validity
            and self.request_status
            and self.signature
            and self.spatial_correctness
        )

    def to_dict(self) -> dict[str, bool]:
        return {
            "permit_status": self.permit_status,
            "time_validity": self.time_validity,
            "request_status": self.request_status,
            "signature": self.signature,
            "spatial_correctness": self.spatial_correctness,
        }


@dataclass
class PermitValidityResult:
    """Structured verification answer for a presented permit."""

    valid: bool
    checks: PermitChecks
    permit: PermitRecord
    evaluated_at: datetime
    claims: dict[str, Any] = field(default_factory=dict)
