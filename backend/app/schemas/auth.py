"""Admin gate schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AdminLogin(BaseModel):
    username: str
    password: str


class AdminTokenResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_in: int
