"""
Centralized application configuration using Pydantic v2 BaseSettings.

Loads environment variables and provides sane defaults. This module should be the
single source of truth for configuration across the app. Import and instantiate
`get_settings()` rather than constructing `AppSettings` directly to benefit from
cached settings and env loading.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (parent of state_law_guidance package)
_PROJECT_ROOT = Path(__file__).parent.parent
_PACKAGE_DIR = Path(__file__).parent


class AppSettings(BaseSettings):
    # Pydantic Settings v2 config
    model_config: SettingsConfigDict = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )
    # Server
    app_name: str = Field(default="State Law Guidance")
    debug: bool = Field(default=False)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: Path = Field(default=Path("logs"), alias="LOG_DIR")

    # Reference data
    law_catalog_path: Path = Field(
        default=_PACKAGE_DIR / "data" / "law_catalog.json",
        alias="LAW_CATALOG_PATH",
        description="Versioned JSON file holding jurisdictions and their law records",
    )

    # Differences and notifications
    critical_difference_limit: int = Field(
        default=3,
        alias="CRITICAL_DIFFERENCE_LIMIT",
        description="How many high/critical differences feed a state-change notification",
    )
    notification_max_lines: int = Field(
        default=2,
        alias="NOTIFICATION_MAX_LINES",
        description="Maximum difference lines in a notification body",
    )

    # Production Mode
    production_mode: bool = Field(
        default=False,
        alias="PRODUCTION_MODE",
        description="Enable production mode (disables debug features, enables security measures)",
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        alias="RATE_LIMIT_ENABLED",
        description="Enable rate limiting middleware",
    )
    rate_limit_per_minute: int = Field(
        default=100,
        alias="RATE_LIMIT_PER_MINUTE",
        description="Maximum requests per minute per IP",
    )

    # CORS (Production)
    cors_allowed_origins_raw: str = Field(
        default="",
        alias="CORS_ALLOWED_ORIGINS",
        description="Comma-separated list of allowed CORS origins (required in production)",
    )

    @property
    def cors_allowed_origins(self) -> list[str]:
        """Parse CORS allowed origins from comma-separated string."""
        if not self.cors_allowed_origins_raw:
            return self.cors_allow_origins
        return [
            origin.strip() for origin in self.cors_allowed_origins_raw.split(",") if origin.strip()
        ]

    @model_validator(mode="after")
    def validate_settings(self) -> AppSettings:
        """Validate settings after initialization."""
        if self.production_mode:
            if not self.cors_allowed_origins_raw:
                raise ValueError("CORS_ALLOWED_ORIGINS must be set when PRODUCTION_MODE=true")
            if "*" in self.cors_allowed_origins:
                raise ValueError("CORS_ALLOWED_ORIGINS cannot contain '*' in production mode")
            if self.debug:
                raise ValueError("DEBUG must be false when PRODUCTION_MODE=true")

        if self.rate_limit_per_minute <= 0:
            raise ValueError("RATE_LIMIT_PER_MINUTE must be greater than 0")
        if self.critical_difference_limit < 0:
            raise ValueError("CRITICAL_DIFFERENCE_LIMIT must be >= 0")
        if self.notification_max_lines < 1:
            raise ValueError("NOTIFICATION_MAX_LINES must be at least 1")

        return self


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance (singleton for process).

    Using lru_cache avoids re-parsing env on hot reload but ensures a single
    instance is used in app lifespan and imported modules.
    """
    return AppSettings()  # type: ignore[arg-type]
