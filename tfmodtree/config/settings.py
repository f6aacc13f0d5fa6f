"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all tfmodtree settings.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TerraformSettings(BaseSettings):
    """Terraform CLI invocation configuration."""

    model_config = SettingsConfigDict(env_prefix="TERRAFORM_", extra="ignore")

    binary: str = Field(
        default="terraform",
        description="Terraform executable name or path",
    )
    timeout_s: float = Field(
        default=600.0,
        description="Timeout in seconds for each terraform command",
    )
    parallelism: int = Field(
        default=10,
        ge=1,
        description="Limit the number of concurrent operations during plan",
    )


class RenderSettings(BaseSettings):
    """Tree rendering configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    glyphs: Literal["unicode", "ascii"] = Field(
        default="unicode",
        validation_alias="TREE_GLYPHS",
        description="Connector glyph set used to draw the tree",
    )

    @field_validator("glyphs", mode="before")
    @classmethod
    def lowercase_glyphs(cls, v: str) -> str:
        if isinstance(v, str):
            return v.lower()
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        validation_alias="LOG_LEVEL",
        description="Log level for tfmodtree namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from tfmodtree.config import get_settings

        settings = get_settings()
        binary = settings.terraform.binary
        glyphs = settings.render.glyphs
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    terraform: TerraformSettings = Field(default_factory=TerraformSettings)
    render: RenderSettings = Field(default_factory=RenderSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
