"""ORM models. Importing this package registers every table on Base.metadata."""

from app.models.database.space import Space
from app.models.database.space_request import SpaceRequest
from app.models.database.permit import Permit

__all__ = ["Space", "SpaceRequest", "Permit"]
