"""Dependency injection for routes."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings
from app.core.security import PermitTokenSigner
from app.infrastructure.database import get_db
from app.infrastructure.locks import SpaceLockManager
from app.services.permit_service import PermitService
from app.services.review_service import ReviewService
from app.services.space_service import SpaceService
from app.services.submission_service import SubmissionService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_lock_manager(request: Request) -> SpaceLockManager:
    return request.app.state.locks


def get_signer(request: Request) -> PermitTokenSigner:
    return request.app.state.signer


def get_space_service(db: AsyncSession = Depends(get_db)) -> SpaceService:
    return SpaceService(db)


def get_submission_service(
    db: AsyncSession = Depends(get_db),
    locks: SpaceLockManager = Depends(get_lock_manager),
    settings: Settings = Depends(get_app_settings),
) -> SubmissionService:
    return SubmissionService(db, locks, settings)


def get_review_service(
    db: AsyncSession = Depends(get_db),
    locks: SpaceLockManager = Depends(get_lock_manager),
    signer: PermitTokenSigner = Depends(get_signer),
) -> ReviewService:
    return ReviewService(db, locks, signer)


def get_permit_service(
    db: AsyncSession = Depends(get_db),
    signer: PermitTokenSigner = Depends(get_signer),
) -> PermitService:
    return PermitService(db, signer)
