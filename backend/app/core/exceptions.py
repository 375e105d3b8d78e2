"""Custom exception classes."""

from typing import Any

from fastapi import HTTPException, status


class StreetPermitException(HTTPException):
    """Base exception for application errors."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        code: str = "STREET_PERMIT_ERROR",
        context: dict[str, Any] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.detail, "code": self.code, **self.context}


class InvalidDimensionsError(StreetPermitException):
    def __init__(self, width: float, length: float):
        self.width = width
        self.length = length
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"width and length must be positive numbers (got {width} x {length})",
            code="INVALID_DIMENSIONS",
        )


class InvalidTimeWindowError(StreetPermitException):
    def __init__(self, start: Any, end: Any):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start_time must be before end_time",
            code="INVALID_TIME_WINDOW",
            context={"start_time": str(start), "end_time": str(end)},
        )


class InvalidRadiusError(StreetPermitException):
    def __init__(self, allowed_radius: float):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"allowed_radius must be a positive number (got {allowed_radius})",
            code="INVALID_RADIUS",
        )


class SpaceNotFoundError(StreetPermitException):
    def __init__(self, space_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Space not found: {space_id}",
            code="SPACE_NOT_FOUND",
        )


class ReservationNotFoundError(StreetPermitException):
    def __init__(self, request_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Space request not found: {request_id}",
            code="RESERVATION_NOT_FOUND",
        )


class OutOfBoundsError(StreetPermitException):
    def __init__(
        self,
        distance_m: float,
        required_radius_m: float,
        allowed_radius_m: float,
        detail: str | None = None,
        code: str = "OUT_OF_BOUNDS",
    ):
        self.distance_m = distance_m
        self.required_radius_m = required_radius_m
        self.allowed_radius_m = allowed_radius_m
        available = allowed_radius_m - required_radius_m
        if detail is None:
            detail = (
                f"Request location must be within space allowed radius ({allowed_radius_m:.2f}m). "
                f"Request size requires {required_radius_m:.2f}m radius from center, "
                f"so the center may be at most {available:.2f}m from the space center "
                f"(it is {distance_m:.2f}m)."
            )
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            code=code,
            context={
                "distance_m": round(distance_m, 2),
                "required_radius_m": round(required_radius_m, 2),
                "allowed_radius_m": round(allowed_radius_m, 2),
                "available_radius_m": round(available, 2),
            },
        )


class FootprintExceedsSpaceError(OutOfBoundsError):
    def __init__(self, distance_m: float, required_radius_m: float, allowed_radius_m: float):
        super().__init__(
            distance_m=distance_m,
            required_radius_m=required_radius_m,
            allowed_radius_m=allowed_radius_m,
            detail=(
                f"Request footprint exceeds space capacity: it needs a {required_radius_m:.2f}m "
                f"radius but the space only allows {allowed_radius_m:.2f}m."
            ),
            code="FOOTPRINT_EXCEEDS_SPACE",
        )


class SpatialTemporalConflictError(StreetPermitException):
    def __init__(self, conflicts: list):
        self.conflicts = conflicts
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=(
                f"Spatial and temporal conflict detected: {len(conflicts)} approved "
                f"request(s) overlap with this time window"
            ),
            code="SPATIAL_TEMPORAL_CONFLICT",
            context={"conflicts": [c.to_dict() for c in conflicts]},
        )


class InvalidStatusTransitionError(StreetPermitException):
    def __init__(self, current: str, target: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot move request from {current} to {target}",
            code="INVALID_STATUS_TRANSITION",
        )


class SpaceBusyError(StreetPermitException):
    def __init__(self, space_id: str | None):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Another submission for space {space_id or 'standalone'} is in progress, retry shortly",
            code="SPACE_BUSY",
        )


class PermitNotFoundError(StreetPermitException):
    def __init__(self, detail: str = "Permit not found"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            code="PERMIT_NOT_FOUND",
        )


class InvalidSignatureError(StreetPermitException):
    def __init__(self, detail: str = "Invalid QR code signature"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            code="INVALID_SIGNATURE",
        )


class NotSpaceOwnerError(StreetPermitException):
    def __init__(self, owner_id: str, space_id: str | None):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"{owner_id} does not own space {space_id or 'standalone'}",
            code="NOT_SPACE_OWNER",
        )
