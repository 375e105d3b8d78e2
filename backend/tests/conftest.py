"""Shared fixtures for engine, service and API tests."""

from datetime import datetime, timedelta, timezone

import pytest

from app.config import Settings
from app.geometry.calculator import offset_point
from app.geometry.types import (
    Footprint,
    GeoPoint,
    RequestStatus,
    ReservationRecord,
    SpaceBoundary,
    TimeWindow,
)
from app.infrastructure.database import Database

DAY1 = datetime(2025, 6, 2, tzinfo=timezone.utc)


def at(hour: int, minute: int = 0, day: datetime = DAY1) -> datetime:
    return day + timedelta(hours=hour, minutes=minute)


def window(start_hour: float, end_hour: float) -> TimeWindow:
    return TimeWindow(
        start=DAY1 + timedelta(hours=start_hour),
        end=DAY1 + timedelta(hours=end_hour),
    )


def make_record(
    request_id: str,
    center: GeoPoint,
    width: float,
    length: float,
    win: TimeWindow,
    status: RequestStatus = RequestStatus.APPROVED,
    space_id: str | None = "space-1",
    vendor_id: str = "vendor-1",
) -> ReservationRecord:
    return ReservationRecord(
        request_id=request_id,
        vendor_id=vendor_id,
        space_id=space_id,
        footprint=Footprint(center=center, width=width, length=length),
        window=win,
        status=status,
    )


@pytest.fixture
def origin() -> GeoPoint:
    """A point in lower Manhattan."""
    return GeoPoint(lat=40.7128, lng=-74.0060)


@pytest.fixture
def space_100m(origin) -> SpaceBoundary:
    return SpaceBoundary(space_id="space-1", center=origin, allowed_radius=100.0)


@pytest.fixture
def space_20m(origin) -> SpaceBoundary:
    return SpaceBoundary(space_id="space-2", center=origin, allowed_radius=20.0)


@pytest.fixture
def point_at(origin):
    """Factory for points a given number of meters north of the origin."""

    def _point_at(north_m: float, east_m: float = 0.0) -> GeoPoint:
        return offset_point(origin, north_m=north_m, east_m=east_m)

    return _point_at


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite://",
        permit_token_secret="test-secret",
        submission_lock_backend="local",
        submission_lock_wait_seconds=0.2,
    )


@pytest.fixture
async def database(test_settings):
    """In-memory SQLite database with all tables created."""
    db = Database(test_settings)
    await db.create_all()
    yield db
    await db.close()


@pytest.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session
