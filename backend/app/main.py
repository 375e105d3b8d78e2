"""FastAPI application entry point."""

import logging
import math
from contextlib import asynccontextmanager
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.api.routes import health, permits, space_requests, spaces
from app.core.exceptions import StreetPermitException
from app.core.security import PermitTokenSigner
from app.infrastructure.database import Database
from app.infrastructure.locks import create_lock_manager
from app.infrastructure.redis import close_redis, create_redis

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    database = Database(settings)
    await database.create_all()
    app.state.database = database

    redis_client = None
    if settings.submission_lock_backend == "redis":
        redis_client = create_redis(settings)
    app.state.redis = redis_client
    app.state.locks = create_lock_manager(settings, redis_client)

    logger.info(
        f"{settings.app_name} {settings.app_version} started "
        f"({settings.environment}, lock backend: {settings.submission_lock_backend})"
    )
    yield

    await database.close()
    await close_redis(redis_client)


async def street_permit_exception_handler(request: Request, exc: StreetPermitException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.detail}")
    else:
        logger.info(f"{exc.code} on {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _finite_json(value: Any) -> Any:
    """Replace NaN and infinities, which strict JSON cannot carry, with strings."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: _finite_json(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite_json(item) for item in value]
    return value


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Validation failed on {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=422,
        content={"detail": _finite_json(jsonable_encoder(exc.errors()))},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Street vendor permitting: space requests, conflict detection and permit verification",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.signer = PermitTokenSigner(settings.permit_token_secret, settings.permit_token_algorithm)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StreetPermitException, street_permit_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(spaces.router, prefix="/api/v1/spaces", tags=["Spaces"])
    app.include_router(space_requests.router, prefix="/api/v1/requests", tags=["Requests"])
    app.include_router(permits.router, prefix="/api/v1/permits", tags=["Permits"])

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
