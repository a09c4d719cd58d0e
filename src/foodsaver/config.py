"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))

DEVELOPMENT_JWT_SECRET = "foodsaver-development-secret"


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    database_path: Path = Field(
        default=Path("./data/foodsaver.db"),
        description="SQLite database location.",
    )
    jwt_secret: str = Field(
        default=DEVELOPMENT_JWT_SECRET,
        description="Secret used to sign bearer tokens.",
    )
    jwt_expires_minutes: int = Field(
        default=60 * 24 * 7,
        description="Lifetime of issued bearer tokens in minutes.",
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
    alert_sweep_enabled: bool = Field(
        default=False,
        description="Run the periodic expiration alert sweep when true.",
    )
    alert_sweep_interval: float = Field(
        default=3600.0,
        description="Seconds between expiration alert sweeps.",
    )
    nearby_default_radius_km: float = Field(
        default=50.0,
        description="Search radius used by the nearby food bank lookup when none is given.",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def uses_development_secret(self) -> bool:
        return self.jwt_secret == DEVELOPMENT_JWT_SECRET


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (db_path := _env("FOODSAVER_DATABASE_PATH")):
        payload["database_path"] = Path(db_path)
    if (jwt_secret := _env("FOODSAVER_JWT_SECRET")):
        payload["jwt_secret"] = jwt_secret
    if (jwt_expires := _env("FOODSAVER_JWT_EXPIRES_MINUTES")):
        try:
            payload["jwt_expires_minutes"] = int(jwt_expires)
        except ValueError:
            pass
    if (log_level := _env("FOODSAVER_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("FOODSAVER_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (log_requests := _env("FOODSAVER_LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    if (sweep_enabled := _env("FOODSAVER_ALERT_SWEEP_ENABLED")):
        payload["alert_sweep_enabled"] = _coerce_bool(sweep_enabled)
    if (sweep_interval := _env("FOODSAVER_ALERT_SWEEP_INTERVAL")):
        try:
            payload["alert_sweep_interval"] = float(sweep_interval)
        except ValueError:
            pass
    if (radius := _env("FOODSAVER_NEARBY_RADIUS_KM")):
        try:
            payload["nearby_default_radius_km"] = float(radius)
        except ValueError:
            pass
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
