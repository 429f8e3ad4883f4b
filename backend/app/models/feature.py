import enum

from sqlalchemy import Boolean, CheckConstraint, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from backend.app.db import Base


class Priority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class Status(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    REJECTED = "REJECTED"


DEFAULT_PRIORITY = Priority.MEDIUM

# Largest value the INTEGER column can hold.
MAX_VOTES = 2**63 - 1


class FeatureRequest(Base):
    __tablename__ = "feature_requests"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    user_name: Mapped[str | None] = mapped_column(String, nullable=True, default=None)
    user_email: Mapped[str | None] = mapped_column(String, nullable=True, default=None)
    # Enum values are stored as plain strings so the column stays readable in SQLite.
    priority: Mapped[str] = mapped_column(
        String, nullable=False, default=DEFAULT_PRIORITY.value
    )
    status: Mapped[str] = mapped_column(String, nullable=False, default=Status.PENDING.value)
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # ISO 8601 strings, same as every other timestamp in the schema.
    created_at: Mapped[str] = mapped_column(String, nullable=False)
    updated_at: Mapped[str] = mapped_column(String, nullable=False)
    idempotency_key: Mapped[str | None] = mapped_column(String, nullable=True, unique=True)

    __table_args__ = (
        CheckConstraint("votes >= 0", name="ck_feature_requests_votes_non_negative"),
        Index("idx_feature_requests_ranking", "is_hidden", "votes", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<FeatureRequest {self.title!r} ({self.status}, {self.votes} votes)>"
