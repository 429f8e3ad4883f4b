"""Application configuration with environment variable support.

All settings can be overridden via environment variables prefixed with ``FEATUREBOARD_``,
or via a ``.env`` file in the project root. The admin credentials are also read
from the bare ``ADMIN_USERNAME`` / ``ADMIN_PASSWORD`` variables.

Examples::

    FEATUREBOARD_PORT=9000 featureboard start
    FEATUREBOARD_DATABASE_URL=sqlite+aiosqlite:////var/data/board.db featureboard start
    ADMIN_USERNAME=admin ADMIN_PASSWORD=s3cret featureboard start
"""

import secrets
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root: two levels up from this file (backend/app/config.py -> featureboard/)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Feature board configuration — all values overridable via env vars."""

    model_config = SettingsConfigDict(
        env_prefix="FEATUREBOARD_",
        env_file=str(_BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Paths
    data_dir: Path = _BASE_DIR / "data"

    # Database; empty means the SQLite file under data_dir
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FEATUREBOARD_DATABASE_URL", "DATABASE_URL"),
    )

    # Logging
    log_level: str = "INFO"

    # Admin gate
    admin_username: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FEATUREBOARD_ADMIN_USERNAME", "ADMIN_USERNAME"),
    )
    admin_password: str | None = Field(
        default=None,
        validation_alias=AliasChoices("FEATUREBOARD_ADMIN_PASSWORD", "ADMIN_PASSWORD"),
    )
    # Without a configured secret, tokens only live as long as the process.
    token_secret: str = Field(default_factory=lambda: secrets.token_urlsafe(32))
    token_algorithm: str = "HS256"
    token_ttl_minutes: int = 60

    @property
    def db_path(self) -> Path:
        return self.data_dir / "featureboard.db"

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return f"sqlite+aiosqlite:///{self.db_path}"


# Singleton instance — import this everywhere
settings = Settings()
