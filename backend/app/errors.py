"""Error taxonomy shared by the services and the HTTP layer.

Each error carries the HTTP status it maps to; ``main.py`` turns any
``FeatureBoardError`` into ``{"detail": message}`` with that status.
"""


class FeatureBoardError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FeatureBoardError):
    """Required input missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class Unauthorized(FeatureBoardError):
    status_code = 401
    default_message = "Invalid credentials"


class NotFound(FeatureBoardError):
    status_code = 404
    default_message = "Feature request not found"


class ConfigError(FeatureBoardError):
    """Server is missing configuration needed to serve the request."""

    status_code = 500
    default_message = "Server misconfigured"


class StoreError(FeatureBoardError):
    """The persistence layer failed. Details are logged, never returned."""

    status_code = 500
    default_message = "Storage failure"
