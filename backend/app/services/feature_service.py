"""Feature request lifecycle: submission, voting and moderation.

All functions take the caller's ``AsyncSession`` and leave committing to it
(the ``get_db`` dependency commits once the request succeeds). Store failures
are logged here and re-raised as ``StoreError`` so driver details never reach
the client.
"""

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import case, delete, desc, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.errors import NotFound, StoreError, ValidationError
from backend.app.models.feature import (
    DEFAULT_PRIORITY,
    MAX_VOTES,
    FeatureRequest,
    Priority,
    Status,
)

logger = logging.getLogger(__name__)

_RANKING = (desc(FeatureRequest.votes), desc(FeatureRequest.created_at))


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _clean(value: str | None) -> str | None:
    """Trim optional text; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _touched_at(now: str):
    """SQL expression for updated_at that never falls behind created_at."""
    return case((FeatureRequest.created_at > now, FeatureRequest.created_at), else_=now)


@contextmanager
def _store_errors(message: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s", message)
        raise StoreError(message) from exc


async def _fetch(db: AsyncSession, feature_id: str) -> FeatureRequest | None:
    result = await db.execute(
        select(FeatureRequest)
        .where(FeatureRequest.id == feature_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_feature(
    db: AsyncSession, feature_id: str, error_message: str = "Failed to fetch feature request"
) -> FeatureRequest:
    with _store_errors(error_message):
        feature = await _fetch(db, feature_id)
    if feature is None:
        raise NotFound()
    return feature


async def list_public(db: AsyncSession) -> list[FeatureRequest]:
    """Visible requests, most voted first, newest first among ties."""
    with _store_errors("Failed to fetch feature requests"):
        result = await db.execute(
            select(FeatureRequest).where(FeatureRequest.is_hidden.is_(False)).order_by(*_RANKING)
        )
        return list(result.scalars().all())


async def list_all(db: AsyncSession) -> list[FeatureRequest]:
    """Every request, hidden included. Filtering is the admin console's job."""
    with _store_errors("Failed to fetch feature requests"):
        result = await db.execute(select(FeatureRequest).order_by(*_RANKING))
        return list(result.scalars().all())


async def stats(db: AsyncSession) -> dict[str, int]:
    """Dashboard counters over the full set."""
    with _store_errors("Failed to fetch feature requests"):
        result = await db.execute(
            select(FeatureRequest.status, FeatureRequest.is_hidden, func.count()).group_by(
                FeatureRequest.status, FeatureRequest.is_hidden
            )
        )
        rows = result.all()

    counts = {
        "total": 0,
        "pending": 0,
        "in_progress": 0,
        "completed": 0,
        "rejected": 0,
        "hidden": 0,
    }
    for status, is_hidden, n in rows:
        counts["total"] += n
        counts[Status(status).name.lower()] += n
        if is_hidden:
            counts["hidden"] += n
    return counts


async def create_feature(
    db: AsyncSession,
    title: str | None,
    description: str | None,
    user_name: str | None = None,
    user_email: str | None = None,
    priority: Priority | None = None,
    idempotency_key: str | None = None,
) -> tuple[FeatureRequest, bool]:
    """Submit a new request.

    Status, votes and visibility always start at PENDING / 0 / visible, no
    matter what the submitter sent. Returns ``(feature, created)``; ``created``
    is False when ``idempotency_key`` matched an earlier submission, in which
    case that submission is returned unchanged.
    """
    title = _clean(title)
    description = _clean(description)
    if not title or not description:
        raise ValidationError("Title and description are required")

    idempotency_key = _clean(idempotency_key)
    message = "Failed to create feature request"

    if idempotency_key:
        with _store_errors(message):
            existing = await _by_idempotency_key(db, idempotency_key)
        if existing is not None:
            logger.info("Replayed feature request %s for idempotency key", existing.id)
            return existing, False

    now = _now()
    feature = FeatureRequest(
        id=str(uuid.uuid4()),
        title=title,
        description=description,
        user_name=_clean(user_name),
        user_email=_clean(user_email),
        priority=(priority or DEFAULT_PRIORITY).value,
        status=Status.PENDING.value,
        votes=0,
        is_hidden=False,
        created_at=now,
        updated_at=now,
        idempotency_key=idempotency_key,
    )
    db.add(feature)
    try:
        await db.flush()
    except IntegrityError as exc:
        # A concurrent submission claimed the same key first.
        await db.rollback()
        if idempotency_key:
            with _store_errors(message):
                existing = await _by_idempotency_key(db, idempotency_key)
            if existing is not None:
                return existing, False
        logger.exception("%s", message)
        raise StoreError(message) from exc
    except SQLAlchemyError as exc:
        logger.exception("%s", message)
        raise StoreError(message) from exc

    logger.info("Created feature request %s: %s", feature.id, feature.title)
    return feature, True


async def _by_idempotency_key(db: AsyncSession, key: str) -> FeatureRequest | None:
    result = await db.execute(
        select(FeatureRequest).where(FeatureRequest.idempotency_key == key)
    )
    return result.scalar_one_or_none()


async def vote_feature(db: AsyncSession, feature_id: str) -> FeatureRequest:
    """Add exactly one vote.

    The increment is evaluated by the database in a single UPDATE, so
    concurrent votes on the same request never overwrite each other.
    """
    with _store_errors("Failed to vote on feature request"):
        result = await db.execute(
            update(FeatureRequest)
            .where(FeatureRequest.id == feature_id)
            .values(votes=FeatureRequest.votes + 1, updated_at=_touched_at(_now()))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFound()
        feature = await _fetch(db, feature_id)

    if feature is None:
        raise NotFound()
    return feature


async def update_feature(
    db: AsyncSession,
    feature_id: str,
    status: Status | None = None,
    priority: Priority | None = None,
    is_hidden: bool | None = None,
    votes: int | None = None,
) -> FeatureRequest:
    """Apply an admin's partial update. Arguments left as None are untouched.

    Any status may follow any other; moderators decide the workflow.
    """
    if votes is not None and not 0 <= votes <= MAX_VOTES:
        raise ValidationError(f"Votes must be between 0 and {MAX_VOTES}")

    feature = await get_feature(db, feature_id, "Failed to update feature request")

    if status is not None:
        feature.status = Status(status).value
    if priority is not None:
        feature.priority = Priority(priority).value
    if is_hidden is not None:
        feature.is_hidden = is_hidden
    if votes is not None:
        feature.votes = votes
    feature.updated_at = max(_now(), feature.created_at)

    with _store_errors("Failed to update feature request"):
        await db.flush()

    logger.info("Updated feature request %s", feature_id)
    return feature


async def delete_feature(db: AsyncSession, feature_id: str) -> None:
    """Remove a request permanently.

    A single DELETE with a rowcount check, so of two racing deletes only one
    succeeds.
    """
    with _store_errors("Failed to delete feature request"):
        result = await db.execute(
            delete(FeatureRequest)
            .where(FeatureRequest.id == feature_id)
            .execution_options(synchronize_session=False)
        )
    if result.rowcount == 0:
        raise NotFound()
    logger.info("Deleted feature request %s", feature_id)
