"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from bikemonkey.config import Settings


class TestSettings:
    """Tests for Settings defaults and validation."""

    def test_defaults(self, monkeypatch):
        for name in ("DEBUG", "LOG_LEVEL", "RESULTS_FILE", "HTTP_TIMEOUT"):
            monkeypatch.delenv(f"BIKEMONKEY_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "WARNING"
        assert settings.results_file == "lgfresults.json"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BIKEMONKEY_RESULTS_FILE", "2024.json")
        monkeypatch.setenv("BIKEMONKEY_DEBUG", "1")
        settings = Settings(_env_file=None)
        assert settings.results_file == "2024.json"
        assert settings.debug is True

    def test_log_level_is_normalised(self):
        assert Settings(_env_file=None, log_level="info").log_level == "INFO"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")
