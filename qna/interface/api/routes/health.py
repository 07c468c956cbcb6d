"""Health check route."""

from datetime import datetime, timezone
from typing import Literal

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from qna.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness plus the storage and filter modes the process runs with."""

    status: Literal["healthy"] = "healthy"
    timestamp: datetime
    version: str
    storage_backend: str
    profanity_filter: str
    protect_writes: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        storage_backend=settings.storage.backend,
        profanity_filter="apilayer" if settings.profanity.api_key else "passthrough",
        protect_writes=settings.auth.protect_writes,
    )
