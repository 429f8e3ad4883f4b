from backend.app.schemas.auth import AdminLogin, AdminTokenResponse
from backend.app.schemas.feature import (
    DeleteResponse,
    FeatureRequestCreate,
    FeatureRequestResponse,
    FeatureRequestStats,
    FeatureRequestUpdate,
)

__all__ = [
    "AdminLogin",
    "AdminTokenResponse",
    "FeatureRequestCreate",
    "FeatureRequestUpdate",
    "FeatureRequestResponse",
    "FeatureRequestStats",
    "DeleteResponse",
]
