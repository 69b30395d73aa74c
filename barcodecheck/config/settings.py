"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from BARCODECHECK_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARCODECHECK_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input normalization
    separators: str = Field("-", description="Characters stripped before validation")
    strip_whitespace: bool = Field(True, description="Also strip spaces, tabs and newlines")

    # ISBN-10 check character "X" (value 10)
    isbn10_accept_x: bool = Field(True, description="Accept X/x as an ISBN-10 check character")

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
