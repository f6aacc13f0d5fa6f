"""Tests for centralized configuration settings."""

import pytest
from pydantic import ValidationError

from tfmodtree.config import (
    LoggingSettings,
    RenderSettings,
    Settings,
    TerraformSettings,
    get_settings,
    reset_settings,
)


class TestTerraformSettings:
    """Tests for Terraform configuration."""

    def test_default_values(self):
        settings = TerraformSettings()
        assert settings.binary == "terraform"
        assert settings.timeout_s == 600.0
        assert settings.parallelism == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TERRAFORM_BINARY", "/opt/bin/tofu")
        monkeypatch.setenv("TERRAFORM_TIMEOUT_S", "30")
        monkeypatch.setenv("TERRAFORM_PARALLELISM", "4")

        settings = TerraformSettings()
        assert settings.binary == "/opt/bin/tofu"
        assert settings.timeout_s == 30.0
        assert settings.parallelism == 4

    def test_parallelism_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("TERRAFORM_PARALLELISM", "0")

        with pytest.raises(ValidationError):
            TerraformSettings()


class TestRenderSettings:
    """Tests for rendering configuration."""

    def test_default_values(self):
        assert RenderSettings().glyphs == "unicode"

    def test_glyphs_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("TREE_GLYPHS", "ASCII")

        assert RenderSettings().glyphs == "ascii"

    def test_invalid_glyphs(self, monkeypatch):
        monkeypatch.setenv("TREE_GLYPHS", "emoji")

        with pytest.raises(ValidationError):
            RenderSettings()


class TestLoggingSettings:
    """Tests for logging configuration."""

    def test_default_values(self):
        settings = LoggingSettings()
        assert settings.debug_all is False
        assert settings.log_level == "WARNING"

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert LoggingSettings().log_level == "DEBUG"

    def test_debug_all(self, monkeypatch):
        monkeypatch.setenv("DEBUG_ALL", "true")

        assert LoggingSettings().debug_all is True


class TestSettings:
    """Tests for the root settings and singleton accessor."""

    def test_nested_groups(self):
        settings = Settings()
        assert isinstance(settings.terraform, TerraformSettings)
        assert isinstance(settings.render, RenderSettings)
        assert isinstance(settings.logging, LoggingSettings)

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_reset_settings_picks_up_env(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("TERRAFORM_BINARY", "tofu")
        assert get_settings().terraform.binary == "terraform"

        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.terraform.binary == "tofu"
