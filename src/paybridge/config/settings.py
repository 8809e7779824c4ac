# src/paybridge/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables (and a .env file) with validation.

Files that USE this module:
- paybridge.app (demo amounts and logging configuration)
- paybridge.adapters.payments.legacy (legacy system name and availability)

Files that this module USES:
- paybridge.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from decimal import Decimal  # Fixed-point demo amounts
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from paybridge.shared.validators import (
    validate_log_level,  # Validate logging level names
    validate_system_name,  # Validate legacy backend name format
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Demonstration payments ---
    modern_demo_amount: Decimal = Field(default=Decimal("150.00"), alias="MODERN_DEMO_AMOUNT", ge=0)
    legacy_demo_amount: Decimal = Field(default=Decimal("200.00"), alias="LEGACY_DEMO_AMOUNT", ge=0)

    # --- Legacy backend ---
    legacy_system_name: str = Field(default="legacy-ledger", alias="LEGACY_SYSTEM_NAME")
    legacy_online: bool = Field(default=True, alias="LEGACY_ONLINE")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_stdout: bool = Field(default=True, alias="PAYBRIDGE_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("legacy_system_name")
    @classmethod
    def validate_system_name(cls, v: str) -> str:
        """Validate legacy system name format."""
        if not validate_system_name(v):
            raise ValueError("Invalid LEGACY_SYSTEM_NAME format")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level."""
        if not validate_log_level(v):
            raise ValueError("LOG_LEVEL must be a logging level name such as INFO or DEBUG")
        return v.upper()


# Global settings instance
settings = Settings()
