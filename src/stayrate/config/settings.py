# src/stayrate/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and a .env file with validation. The
pricing engine itself takes no configuration; these settings drive
display and logging in the simulator entry point.

Files that USE this module:
- stayrate.app (logging setup, display decimals, currency of preset scenarios)
- tests.test_settings (unit tests)

Files that this module USES:
- stayrate.shared.validators (currency code validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from stayrate.shared.validators import validate_currency_code  # Validate ISO currency codes

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Pricing display ---
    default_currency: str = Field(default="AED", alias="STAYRATE_CURRENCY")
    display_decimals: int = Field(default=2, alias="STAYRATE_DISPLAY_DECIMALS", ge=0, le=4)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="STAYRATE_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="STAYRATE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES", ge=1024)  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT", ge=0)

    @field_validator("default_currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency code format."""
        v = v.strip().upper()
        if not validate_currency_code(v):
            raise ValueError("STAYRATE_CURRENCY must be a three-letter currency code")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"STAYRATE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return v


# Global settings instance
settings = Settings()
