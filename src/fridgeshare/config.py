"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    database_url: str = Field(
        default="sqlite:///./data/fridgeshare.db",
        description="SQLAlchemy database URL.",
    )
    jwt_secret: str = Field(
        default="dev-secret-key",
        description="Secret used to sign session tokens.",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm.")
    token_expire_days: int = Field(
        default=7,
        ge=1,
        description="Lifetime of issued session tokens, in days.",
    )
    client_dist_path: Optional[Path] = Field(
        default=None,
        description="Directory holding a built frontend bundle (index.html + assets).",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    log_requests: bool = Field(
        default=True,
        description="Emit request access logs when true.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_env_files() -> dict[str, str]:
    """Collect KEY=VALUE pairs from the .env candidates; later files win."""

    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        if not candidate.is_file():
            continue
        for line in candidate.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                values[key.strip()] = value.strip().strip("\"'")
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _read_env_files()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (database_url := _env("FRIDGESHARE_DATABASE_URL")):
        payload["database_url"] = database_url
    if (jwt_secret := _env("FRIDGESHARE_JWT_SECRET") or _env("JWT_SECRET")):
        payload["jwt_secret"] = jwt_secret
    if (jwt_algorithm := _env("FRIDGESHARE_JWT_ALGORITHM")):
        payload["jwt_algorithm"] = jwt_algorithm
    if (expire_days := _env("FRIDGESHARE_TOKEN_EXPIRE_DAYS")):
        try:
            parsed_days = int(expire_days)
        except ValueError:
            parsed_days = 0
        if parsed_days >= 1:
            payload["token_expire_days"] = parsed_days
    if (client_dist := _env("FRIDGESHARE_CLIENT_DIST")):
        payload["client_dist_path"] = Path(client_dist)
    if (cors_origins := _env("FRIDGESHARE_CORS_ORIGINS")):
        origins = [origin.strip() for origin in cors_origins.split(",") if origin.strip()]
        if origins:
            payload["cors_origins"] = origins
    if (log_level := _env("FRIDGESHARE_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("FRIDGESHARE_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("FRIDGESHARE_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
