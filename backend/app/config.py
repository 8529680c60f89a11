"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - PORT defaults to 5000; unknown .env keys are ignored (route groups own them)

Design Decisions:
    - DeploymentMode selects the startup strategy; one code path serves both targets
    - CORS_ORIGINS accepts a JSON list or a comma-separated string
"""

import json
from enum import Enum
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class DeploymentMode(str, Enum):
    """How the process is hosted."""
    STANDALONE = "standalone"
    EMBEDDED = "embedded"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=5000, ge=0, le=65535)
    deployment_mode: DeploymentMode = DeploymentMode.STANDALONE

    # Database
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "storefront"
    mongodb_timeout_ms: int = 5000

    # Media
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_verify: bool = False

    # API
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:5173"]
    upload_dir: str = "uploads"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Accept '["a", "b"]' or 'a, b' from the environment."""
        if not isinstance(v, str):
            return v
        v = v.strip()
        if v.startswith("["):
            return json.loads(v)
        return [origin.strip() for origin in v.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
