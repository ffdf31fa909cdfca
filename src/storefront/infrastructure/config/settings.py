"""Application settings, read from STOREFRONT_* environment variables or .env."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):

    # ── Storage ──
    data_dir: Path = Field(default=Path("data"))

    # ── Catalog formatting ──
    decimal_separator: Literal[".", ","] = "."
    currency: str = "EUR"
    language: Literal["en", "fr"] = "en"

    # ── Logging ──
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        value = value.strip().upper()
        if len(value) != 3 or not value.isalpha():
            raise ValueError(f"Expected a 3-letter currency code, got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {value!r}")
        return value
