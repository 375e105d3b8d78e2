"""Owner space endpoints."""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_space_service
from app.models.schemas.space import SpaceCreateRequest, SpaceResponse
from app.services.space_service import SpaceService

router = APIRouter()


@router.post("", response_model=SpaceResponse, status_code=status.HTTP_201_CREATED)
async def create_space(
    request: SpaceCreateRequest,
    space_service: SpaceService = Depends(get_space_service),
) -> SpaceResponse:
    """Create a space with an allowed radius around its center."""
    space = await space_service.create_space(request)
    return SpaceResponse.from_model(space)


@router.get("/owner/{owner_id}", response_model=list[SpaceResponse])
async def list_owner_spaces(
    owner_id: str,
    space_service: SpaceService = Depends(get_space_service),
) -> list[SpaceResponse]:
    spaces = await space_service.list_owner_spaces(owner_id)
    return [SpaceResponse.from_model(s) for s in spaces]


@router.get("/{space_id}", response_model=SpaceResponse)
async def get_space(
    space_id: str,
    space_service: SpaceService = Depends(get_space_service),
) -> SpaceResponse:
    space = await space_service.get_space(space_id)
    return SpaceResponse.from_model(space)
