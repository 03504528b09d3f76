"""
Configuration management for the Email Extractor.

Uses Pydantic Settings for type-safe configuration loading from environment variables.
All configuration is validated at startup to fail fast on misconfiguration.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default, so the tool runs without any configuration.
    Variables are read with the ``EMAIL_EXTRACTOR_`` prefix, for example
    ``EMAIL_EXTRACTOR_OUTPUT_PATH=/tmp/found.txt``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Input Configuration
    # ==========================================================================
    max_file_size_mb: float = Field(
        default=100.0,
        ge=0.001,
        le=4096.0,
        description="Largest file (in megabytes) that will be loaded into memory",
    )

    # ==========================================================================
    # Output Configuration
    # ==========================================================================
    output_path: Path = Field(
        default=Path("emails.txt"),
        description="File the extracted email addresses are written to",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def max_file_size_bytes(self) -> int:
        """Size limit converted to bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.
    """
    return Settings()
