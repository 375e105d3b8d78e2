"""Owner space management."""

import logging
import math

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidRadiusError, SpaceNotFoundError
from app.models.database.space import Space
from app.models.schemas.space import SpaceCreateRequest
from app.repositories.space_repository import SpaceRepository

logger = logging.getLogger(__name__)


class SpaceService:
    def __init__(self, session: AsyncSession):
        self.repo = SpaceRepository(session)

    async def create_space(self, request: SpaceCreateRequest) -> Space:
        radius = request.allowed_radius
        if radius is None or not math.isfinite(radius) or radius <= 0:
            raise InvalidRadiusError(request.allowed_radius)

        space = await self.repo.create(
            lat=request.lat,
            lng=request.lng,
            allowed_radius=request.allowed_radius,
            owner_id=request.owner_id,
            space_name=request.space_name,
            address=request.address,
            price_per_radius=request.price_per_radius,
        )
        logger.info(f"Created space {space.id} (radius {space.allowed_radius}m, owner {space.owner_id})")
        return space

    async def get_space(self, space_id: str) -> Space:
        space = await self.repo.get_by_id(space_id)
        if not space:
            raise SpaceNotFoundError(space_id)
        return space

    async def list_owner_spaces(self, owner_id: str) -> list[Space]:
        return await self.repo.list_by_owner(owner_id)
