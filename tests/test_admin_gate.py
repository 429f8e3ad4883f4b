"""Unit tests for the admin gate (credential check + tokens)."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from backend.app.config import settings
from backend.app.errors import ConfigError, Unauthorized
from backend.app.services import admin_gate


def test_authenticate_exact_match(admin_credentials):
    username, password = admin_credentials
    admin_gate.authenticate(username, password)


def test_authenticate_is_case_sensitive(admin_credentials):
    username, password = admin_credentials
    with pytest.raises(Unauthorized):
        admin_gate.authenticate(username.upper(), password)


def test_authenticate_requires_both_settings(monkeypatch):
    monkeypatch.setattr(settings, "admin_username", "admin")
    monkeypatch.setattr(settings, "admin_password", "")
    with pytest.raises(ConfigError):
        admin_gate.authenticate("admin", "")


def test_issued_token_round_trips(admin_credentials):
    token, expires_in = admin_gate.issue_token()
    payload = admin_gate.verify_token(token)
    assert payload["sub"] == "admin"
    assert expires_in == settings.token_ttl_minutes * 60


def test_token_expires(admin_credentials):
    issued = datetime.now(UTC) - timedelta(minutes=settings.token_ttl_minutes + 1)
    token, _ = admin_gate.issue_token(now=issued)
    with pytest.raises(Unauthorized):
        admin_gate.verify_token(token)


def test_token_with_wrong_type_rejected():
    token = jwt.encode(
        {"sub": "admin", "type": "refresh", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        settings.token_secret,
        algorithm=settings.token_algorithm,
    )
    with pytest.raises(Unauthorized, match="Invalid token type"):
        admin_gate.verify_token(token)


def test_login_does_not_issue_token_on_failure(admin_credentials):
    with pytest.raises(Unauthorized):
        admin_gate.login("admin", "nope")
