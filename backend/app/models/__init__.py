from backend.app.models.feature import DEFAULT_PRIORITY, FeatureRequest, Priority, Status

__all__ = [
    "DEFAULT_PRIORITY",
    "FeatureRequest",
    "Priority",
    "Status",
]
