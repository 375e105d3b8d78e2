"""Health check endpoints."""

import logging

from fastapi import APIRouter, Request, status
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str


class ReadyResponse(BaseModel):
    status: str
    database: str
    redis: str
    lock_backend: str


@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    settings = request.app.state.settings
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/health/ready", response_model=ReadyResponse, status_code=status.HTTP_200_OK)
async def ready(request: Request):
    database = getattr(request.app.state, "database", None)
    redis_client = getattr(request.app.state, "redis", None)

    db_status = "disconnected"
    redis_status = "disabled"

    if database:
        try:
            await database.ping()
            db_status = "connected"
        except Exception as e:
            logger.warning(f"Database readiness check failed: {e}")
            db_status = "error"

    if redis_client:
        try:
            await redis_client.ping()
            redis_status = "connected"
        except Exception as e:
            logger.warning(f"Redis readiness check failed: {e}")
            redis_status = "error"

    redis_ok = redis_status in ("connected", "disabled")
    overall = "ready" if db_status == "connected" and redis_ok else "not_ready"
    return ReadyResponse(
        status=overall,
        database=db_status,
        redis=redis_status,
        lock_backend=request.app.state.settings.submission_lock_backend,
    )
