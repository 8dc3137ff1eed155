# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================
# Defaults reproduce the fixed server behaviour (port 3000, ./public) and
# invalid values are rejected at startup.
#
# Run with: poetry run pytest tests/test_config.py -v
# =============================================================================

import logging

import pytest
from pydantic import ValidationError

from app.config import PROJECT_ROOT, Settings, get_settings


class TestSettingsDefaults:
    """Tests for default values."""

    def test_listens_on_all_interfaces_port_3000(self, monkeypatch):
        monkeypatch.delenv("API_HOST", raising=False)
        monkeypatch.delenv("API_PORT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.API_HOST == "0.0.0.0"
        assert settings.API_PORT == 3000

    def test_static_dir_is_project_public(self, monkeypatch):
        monkeypatch.delenv("STATIC_DIR", raising=False)

        settings = Settings(_env_file=None)

        assert settings.STATIC_DIR == PROJECT_ROOT / "public"

    def test_form_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.FORM_EXTENDED is True
        assert settings.FORM_DEPTH == 5
        assert settings.FORM_PARAMETER_LIMIT == 1000
        assert settings.MAX_BODY_BYTES == 100 * 1024


class TestSettingsEnvironment:
    """Tests for environment overrides and validation."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "8080")
        monkeypatch.setenv("FORM_EXTENDED", "false")

        settings = Settings(_env_file=None)

        assert settings.API_PORT == 8080
        assert settings.FORM_EXTENDED is False

    def test_port_out_of_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, API_PORT=70000)

    def test_invalid_depth(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, FORM_DEPTH=-1)

    def test_log_level_follows_debug(self):
        assert Settings(_env_file=None, DEBUG=True).log_level == logging.DEBUG
        assert Settings(_env_file=None, DEBUG=False).log_level == logging.INFO

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
