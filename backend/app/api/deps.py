from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.app.errors import Unauthorized
from backend.app.services.admin_gate import verify_token

# auto_error=False so a missing header surfaces as our 401, not FastAPI's 403.
security_scheme = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> dict:
    """Validate the admin bearer token on every admin call."""
    if credentials is None:
        raise Unauthorized("Admin authentication required")
    return verify_token(credentials.credentials)
