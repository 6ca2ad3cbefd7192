"""
Shared configuration management for TasbihKit.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CDN_BASE_URL = "https://cdn.jsdelivr.net/npm/@mdkva/tasbihkit/data"


class TasbihSettings(BaseSettings):
    """Settings read from ``TASBIH_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="TASBIH_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Content delivery
    cdn_base_url: str = Field(default=DEFAULT_CDN_BASE_URL)
    http_timeout: float = Field(default=10.0, gt=0)

    # Observability
    enable_metrics: bool = Field(default=True)


@lru_cache(maxsize=1)
def get_settings() -> TasbihSettings:
    """Get the process-wide settings instance."""
    return TasbihSettings()
