"""Admin moderation endpoints. Every route requires a valid admin token."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import require_admin
from backend.app.db import get_db
from backend.app.models.feature import FeatureRequest
from backend.app.schemas.feature import (
    DeleteResponse,
    FeatureRequestResponse,
    FeatureRequestStats,
    FeatureRequestUpdate,
)
from backend.app.services import feature_service

router = APIRouter(
    prefix="/admin/feature-requests",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=list[FeatureRequestResponse])
async def list_all_feature_requests(db: AsyncSession = Depends(get_db)) -> list[FeatureRequest]:
    return await feature_service.list_all(db)


@router.get("/stats", response_model=FeatureRequestStats)
async def feature_request_stats(db: AsyncSession = Depends(get_db)) -> FeatureRequestStats:
    return FeatureRequestStats(**await feature_service.stats(db))


@router.patch("/{feature_id}", response_model=FeatureRequestResponse)
async def update_feature_request(
    feature_id: str,
    data: FeatureRequestUpdate,
    db: AsyncSession = Depends(get_db),
) -> FeatureRequest:
    return await feature_service.update_feature(
        db,
        feature_id,
        status=data.status,
        priority=data.priority,
        is_hidden=data.is_hidden,
        votes=data.votes,
    )


@router.delete("/{feature_id}", response_model=DeleteResponse)
async def delete_feature_request(
    feature_id: str, db: AsyncSession = Depends(get_db)
) -> DeleteResponse:
    await feature_service.delete_feature(db, feature_id)
    return DeleteResponse(message="Feature request deleted successfully")
