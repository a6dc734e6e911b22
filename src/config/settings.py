# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for store, cursor and logging settings.
Every field can be overridden with a ``REITERATOR_``-prefixed env var.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Library settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REITERATOR_",
        extra="ignore",
    )

    # === Slot store ===
    store_backend: Literal["boxed", "chunked"] = "boxed"
    chunk_size: int = 64
    verify_addresses: bool = False

    # === Cursor ===
    max_index: int = sys.maxsize

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("chunk_size")
    @classmethod
    def validate_chunk_size(cls, v: int) -> int:
        """CHUNK_SIZE must be positive."""
        if v <= 0:
            raise ValueError("chunk_size must be > 0")
        return v

    @field_validator("max_index")
    @classmethod
    def validate_max_index(cls, v: int) -> int:
        """MAX_INDEX must be non-negative."""
        if v < 0:
            raise ValueError("max_index must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if self.log_file is not None and self.log_retention == 0:
            errors.append("LOG_FILE requires LOG_RETENTION >= 1")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-cache config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
