"""Space repository for database operations."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.geometry.types import SpaceBoundary
from app.models.database.space import Space


class SpaceRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        lat: float,
        lng: float,
        allowed_radius: float,
        owner_id: Optional[str] = None,
        space_name: Optional[str] = None,
        address: Optional[str] = None,
        price_per_radius: float = 0.0,
    ) -> Space:
        space = Space(
            owner_id=owner_id,
            space_name=space_name,
            address=address,
            center_lat=lat,
            center_lng=lng,
            allowed_radius=allowed_radius,
            price_per_radius=price_per_radius,
        )
        self.session.add(space)
        await self.session.commit()
        await self.session.refresh(space)
        return space

    async def get_by_id(self, space_id: str) -> Optional[Space]:
        result = await self.session.execute(select(Space).where(Space.id == space_id))
        return result.scalar_one_or_none()

    async def get_space(self, space_id: str) -> Optional[SpaceBoundary]:
        space = await self.get_by_id(space_id)
        return space.to_boundary() if space else None

    async def list_by_owner(self, owner_id: str) -> list[Space]:
        result = await self.session.execute(
            select(Space).where(Space.owner_id == owner_id).order_by(Space.created_at.desc())
        )
        return list(result.scalars().all())
