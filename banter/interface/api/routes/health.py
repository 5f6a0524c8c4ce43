"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from banter.config import Settings
from banter.persistence.store import KeyValueStore


router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    storage_used_bytes: int
    storage_quota_bytes: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    store: FromDishka[KeyValueStore],
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status and how much of the storage quota is in use
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        storage_used_bytes=await store.usage_bytes(),
        storage_quota_bytes=store.quota_bytes,
    )
