"""Public feature request board: list, submit, vote."""

from fastapi import APIRouter, Depends, Header, Response
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.db import get_db
from backend.app.models.feature import FeatureRequest
from backend.app.schemas.feature import FeatureRequestCreate, FeatureRequestResponse
from backend.app.services import feature_service

router = APIRouter(prefix="/feature-requests", tags=["feature-requests"])


@router.get("", response_model=list[FeatureRequestResponse])
async def list_feature_requests(db: AsyncSession = Depends(get_db)) -> list[FeatureRequest]:
    return await feature_service.list_public(db)


@router.post("", response_model=FeatureRequestResponse, status_code=201)
async def create_feature_request(
    data: FeatureRequestCreate,
    response: Response,
    idempotency_key: str | None = Header(default=None),
    db: AsyncSession = Depends(get_db),
) -> FeatureRequest:
    feature, created = await feature_service.create_feature(
        db,
        title=data.title,
        description=data.description,
        user_name=data.user_name,
        user_email=data.user_email,
        priority=data.priority,
        idempotency_key=idempotency_key,
    )
    if not created:
        # Replay of an earlier submission with the same Idempotency-Key
        response.status_code = 200
    return feature


@router.post("/{feature_id}/vote", response_model=FeatureRequestResponse)
async def vote_feature_request(
    feature_id: str, db: AsyncSession = Depends(get_db)
) -> FeatureRequest:
    return await feature_service.vote_feature(db, feature_id)
