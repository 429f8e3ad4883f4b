from fastapi import APIRouter

from backend.app.schemas.auth import AdminLogin, AdminTokenResponse
from backend.app.services import admin_gate

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/admin", response_model=AdminTokenResponse)
async def admin_login(data: AdminLogin) -> AdminTokenResponse:
    """Check admin credentials and hand out a short-lived bearer token."""
    token, expires_in = admin_gate.login(data.username, data.password)
    return AdminTokenResponse(token=token, expires_in=expires_in)
