"""Feature request schemas.

The API speaks camelCase (``isHidden``, ``createdAt``); the store columns are
snake_case. Both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.app.models.feature import MAX_VOTES, Priority, Status


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FeatureRequestCreate(_CamelModel):
    # Blank/missing title and description are rejected by the service, not here,
    # so they surface as a 400 with a readable message.
    title: str | None = None
    description: str | None = None
    user_name: str | None = None
    user_email: str | None = None
    priority: Priority | None = None


class FeatureRequestUpdate(_CamelModel):
    status: Status | None = None
    priority: Priority | None = None
    is_hidden: bool | None = None
    votes: int | None = Field(default=None, ge=0, le=MAX_VOTES)


class FeatureRequestResponse(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    user_name: str | None = None
    user_email: str | None = None
    priority: Priority
    status: Status
    votes: int
    is_hidden: bool
    created_at: str
    updated_at: str


class FeatureRequestStats(_CamelModel):
    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    rejected: int = 0
    hidden: int = 0


class DeleteResponse(BaseModel):
    message: str
