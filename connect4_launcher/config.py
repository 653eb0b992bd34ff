"""Connect-4 launcher configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LauncherSettings(BaseSettings):
    """Launcher configuration, overridable through CONNECT4_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONNECT4_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Identity ---
    app_name: str = "Connect-4"

    # --- Payload ---
    payload_name: str = "Connect-4.jar"
    temp_prefix: str = "Connect-4-"
    temp_suffix: str = ".jar"
    temp_dir: Optional[Path] = None

    # --- Runtime ---
    java_executable: str = "java"
    java_flag: str = "-jar"

    # --- Console ---
    pause_on_error: bool = True
    log_level: str = Field(default="WARNING")

    @field_validator("temp_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError(f"temp_suffix must start with '.', got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


# Singleton
settings = LauncherSettings()
