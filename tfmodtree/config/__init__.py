"""Configuration module for tfmodtree.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from tfmodtree.config import get_settings

    settings = get_settings()

    # Access Terraform settings
    binary = settings.terraform.binary
    parallelism = settings.terraform.parallelism

    # Access rendering settings
    glyphs = settings.render.glyphs
"""

from tfmodtree.config.settings import (
    LoggingSettings,
    RenderSettings,
    Settings,
    TerraformSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "RenderSettings",
    "Settings",
    "TerraformSettings",
    "get_settings",
    "reset_settings",
]
