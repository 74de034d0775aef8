"""Application configuration and settings management."""

from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PLANNER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Shared Vehicle Journey Planner API"
    api_prefix: str = "/api"
    upstream_base_url: str = Field(
        default="https://poppy.red/api/v3",
        description="Base URL of the fleet, pricing and geozone provider.",
    )
    city_uuid: str = Field(
        default="a88ea9d0-3d5e-4002-8bbf-775313a5973c",
        description="City whose fleet is planned against (defaults to Brussels).",
    )
    vehicle_type: str = Field(
        default="car",
        description="Only vehicles of this model type are eligible for planning.",
    )
    request_timeout_seconds: float = Field(default=10.0, gt=0.0)
    upstream_max_retries: int = Field(default=2, ge=0)
    upstream_backoff_seconds: float = Field(default=0.5, ge=0.0)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("upstream_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: Any) -> str:
        return str(value).rstrip("/")

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
