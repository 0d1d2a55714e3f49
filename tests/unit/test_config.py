"""
Unit tests for Config.

Environment variables are set with monkeypatch; load_dotenv is patched
so a developer's local .env file cannot leak into the results.
"""

import pytest
from unittest.mock import patch

from resilient_pages.utils.config import (
    Config,
    DEFAULT_BLOCKING_OVERLAY_SELECTOR,
    DEFAULT_COOKIE_CONSENT_TEXT,
)


ENV_VARS = [
    "BROWSER_HEADLESS", "BROWSER_TIMEOUT", "WAIT_TIMEOUT", "CLICKABLE_TIMEOUT",
    "POLL_INTERVAL", "COOKIE_CONSENT_TEXT", "BLOCKING_OVERLAY_SELECTOR",
    "LOG_LEVEL", "LOG_FILE",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("resilient_pages.utils.config.load_dotenv"):
        yield monkeypatch


class TestConfig:
    """Test suite for Config."""

    def test_defaults(self, clean_env):
        config = Config()

        assert config.browser_headless is False
        assert config.browser_timeout == 30
        assert config.wait_timeout == 15.0
        assert config.clickable_timeout == 10.0
        assert config.poll_interval == 0.5
        assert config.cookie_consent_text == DEFAULT_COOKIE_CONSENT_TEXT
        assert config.blocking_overlay_selector == DEFAULT_BLOCKING_OVERLAY_SELECTOR
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.validate() is True

    def test_reads_environment(self, clean_env):
        clean_env.setenv("BROWSER_HEADLESS", "True")
        clean_env.setenv("WAIT_TIMEOUT", "20")
        clean_env.setenv("POLL_INTERVAL", "0.25")
        clean_env.setenv("COOKIE_CONSENT_TEXT", "Accept all")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("LOG_FILE", "logs/ui.log")

        config = Config()

        assert config.browser_headless is True
        assert config.wait_timeout == 20.0
        assert config.poll_interval == 0.25
        assert config.cookie_consent_text == "Accept all"
        assert config.log_level == "DEBUG"
        assert config.log_file == "logs/ui.log"

    def test_validate_collects_all_errors(self, clean_env):
        clean_env.setenv("WAIT_TIMEOUT", "0")
        clean_env.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValueError) as exc_info:
            Config().validate()

        message = str(exc_info.value)
        assert "WAIT_TIMEOUT must be positive" in message
        assert "LOG_LEVEL must be one of" in message

    def test_poll_interval_must_not_exceed_timeout(self, clean_env):
        clean_env.setenv("WAIT_TIMEOUT", "1")
        clean_env.setenv("POLL_INTERVAL", "2")

        with pytest.raises(ValueError, match="POLL_INTERVAL must not exceed"):
            Config().validate()

    def test_empty_overlay_selector_rejected(self, clean_env):
        clean_env.setenv("BLOCKING_OVERLAY_SELECTOR", "   ")

        with pytest.raises(ValueError, match="BLOCKING_OVERLAY_SELECTOR"):
            Config().validate()
