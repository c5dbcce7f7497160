"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so the logging side of the library can be tuned per
deployment without code changes:

    RESULTEX_LOG_LEVEL=DEBUG
    RESULTEX_LOG_RENDERER=json
    RESULTEX_LOG_OPERATION_TIMING=false

Nothing here is read at import time; settings are loaded when
configure_from_settings() or ResultexSettings() is called.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ResultexSettings(BaseSettings):
    """
    Logging settings for resultex.

    Load order (highest priority first):
      1. Environment variables (RESULTEX_ prefix)
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="stdlib level name")
    log_renderer: Literal["console", "json"] = Field(default="console")
    log_operation_timing: bool = Field(
        default=True,
        description="Include elapsed seconds in execution.completed events",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any case, store upper-case; reject unknown level names."""
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}"
            )
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
