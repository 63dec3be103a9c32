"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
process-wide salt registry.

Usage:
    from ecsuid.config import UIDSettings

    # Load from environment variables (ECSUID_*)
    settings = UIDSettings()

    # Or override with explicit values
    settings = UIDSettings(strict_salts=True, log_wraparound=True)
"""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UIDSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for identifier allocation.

    The partition count is deliberately absent: every instance sharing an
    identifier space must agree on it, so it is fixed in code.

    Attributes:
        strict_salts: Reject salts outside the partition space with
            InvalidSaltError instead of accepting them silently.
        log_wraparound: Attach a LoggingObserver so counter and salt
            wraparounds are logged.
        log_level: Level name used for wraparound log records.

    Environment Variables:
        ECSUID_STRICT_SALTS
        ECSUID_LOG_WRAPAROUND
        ECSUID_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="ECSUID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_salts: bool = False
    log_wraparound: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value}")
        return name

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for log_level."""
        level = logging.getLevelName(self.log_level)
        assert isinstance(level, int)
        return level
