"""Runtime configuration for webapp-publisher."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from webapp_publisher.modules.deployment.domain import ResourceMapping
from webapp_publisher.modules.deployment.domain.constants import (
    DEFAULT_MAX_RETRY_TIMES,
    DEFAULT_STAGING_PREFIX,
    LOCAL_SETTINGS_FILE,
)


class Settings(BaseSettings):
    """Configuration values mapped from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEBAPP_PUBLISHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "webapp-publisher"
    version: str = "1.0.0"
    log_level: str = "INFO"

    # Kudu-style SCM endpoint of the target web app
    scm_url: Optional[str] = None
    deploy_username: Optional[str] = None
    deploy_password: Optional[str] = None
    http_timeout: float = 600.0
    verify_ssl: bool = True

    # Publish behaviour
    max_retry_attempts: int = Field(DEFAULT_MAX_RETRY_TIMES, ge=1)
    staging_prefix: str = DEFAULT_STAGING_PREFIX
    excluded_entry: str = LOCAL_SETTINGS_FILE
    resources: List[ResourceMapping] = Field(default_factory=list)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
