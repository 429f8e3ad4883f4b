"""Admin gate: credential check against configuration plus short-lived tokens.

There is no user table and no server-side session. A successful login yields a
signed JWT with an expiry; every admin call re-validates it.
"""

import hmac
import logging
from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import PyJWTError

from backend.app.config import settings
from backend.app.errors import ConfigError, Unauthorized

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"
TOKEN_TYPE = "admin"


def _matches(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def authenticate(username: str, password: str) -> None:
    """Raise unless the credentials exactly match the configured admin account."""
    expected_user = settings.admin_username
    expected_password = settings.admin_password
    if not expected_user or not expected_password:
        logger.error("Admin login attempted but admin credentials are not configured")
        raise ConfigError("Admin credentials not configured")

    # Evaluate both comparisons so timing does not reveal which one failed.
    user_ok = _matches(username, expected_user)
    password_ok = _matches(password, expected_password)
    if not (user_ok and password_ok):
        logger.warning("Rejected admin login for %r", username)
        raise Unauthorized("Invalid credentials")

    logger.info("Admin %r logged in", username)


def issue_token(now: datetime | None = None) -> tuple[str, int]:
    """Create a signed admin token. Returns ``(token, expires_in_seconds)``."""
    now = now or datetime.now(UTC)
    ttl = timedelta(minutes=settings.token_ttl_minutes)
    payload = {
        "sub": ADMIN_SUBJECT,
        "type": TOKEN_TYPE,
        "iat": now,
        "exp": now + ttl,
    }
    token = jwt.encode(payload, settings.token_secret, algorithm=settings.token_algorithm)
    return token, int(ttl.total_seconds())


def login(username: str, password: str) -> tuple[str, int]:
    authenticate(username, password)
    return issue_token()


def verify_token(token: str) -> dict:
    """Decode an admin token; raise ``Unauthorized`` if it is invalid or expired."""
    try:
        payload = jwt.decode(
            token, settings.token_secret, algorithms=[settings.token_algorithm]
        )
    except PyJWTError as exc:
        raise Unauthorized("Invalid or expired token") from exc

    if payload.get("type") != TOKEN_TYPE or payload.get("sub") != ADMIN_SUBJECT:
        raise Unauthorized("Invalid token type")
    return payload
