"""
Configuration management with environment variables.

This module provides centralized configuration for browser sessions and
interaction timing, with validation and type safety.
"""

import os
from typing import Optional
from dotenv import load_dotenv


DEFAULT_COOKIE_CONSENT_TEXT = "TÜM ÇEREZLERİ KABUL ET"
DEFAULT_BLOCKING_OVERLAY_SELECTOR = ".add-to-cart-notification-content"


class Config:
    """
    Application configuration manager.

    Loads configuration from environment variables (and a ``.env`` file
    if present) and provides validated access to the values.

    Attributes:
        browser_headless: Run Chrome without a visible window
        browser_timeout: Page load timeout in seconds
        wait_timeout: Default explicit wait in seconds
        clickable_timeout: Default wait for clickability in seconds
        poll_interval: Delay between condition checks in seconds
        cookie_consent_text: Visible label of the cookie consent button
        blocking_overlay_selector: CSS selector of the overlay force clicks wait out
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path

    Examples:
        >>> config = Config()
        >>> if config.validate():
        ...     print(f"Waiting up to {config.wait_timeout}s per element")
    """

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

        # Browser settings
        self._browser_headless = os.getenv("BROWSER_HEADLESS", "false").lower() == "true"
        self._browser_timeout = int(os.getenv("BROWSER_TIMEOUT", "30"))

        # Wait settings
        self._wait_timeout = float(os.getenv("WAIT_TIMEOUT", "15"))
        self._clickable_timeout = float(os.getenv("CLICKABLE_TIMEOUT", "10"))
        self._poll_interval = float(os.getenv("POLL_INTERVAL", "0.5"))

        # Site specific selectors
        self._cookie_consent_text = os.getenv(
            "COOKIE_CONSENT_TEXT", DEFAULT_COOKIE_CONSENT_TEXT
        )
        self._blocking_overlay_selector = os.getenv(
            "BLOCKING_OVERLAY_SELECTOR", DEFAULT_BLOCKING_OVERLAY_SELECTOR
        )

        # Logging
        self._log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self._log_file = os.getenv("LOG_FILE") or None

    @property
    def browser_headless(self) -> bool:
        """Get whether to run browser in headless mode."""
        return self._browser_headless

    @property
    def browser_timeout(self) -> int:
        """Get page load timeout in seconds."""
        return self._browser_timeout

    @property
    def wait_timeout(self) -> float:
        """Get default explicit wait timeout in seconds."""
        return self._wait_timeout

    @property
    def clickable_timeout(self) -> float:
        """Get default clickability wait timeout in seconds."""
        return self._clickable_timeout

    @property
    def poll_interval(self) -> float:
        """Get delay between condition checks in seconds."""
        return self._poll_interval

    @property
    def cookie_consent_text(self) -> str:
        return self._cookie_consent_text

    @property
    def blocking_overlay_selector(self) -> str:
        return self._blocking_overlay_selector

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self._log_level

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path, if file logging is enabled."""
        return self._log_file

    def validate(self) -> bool:
        """
        Validate configuration values.

        Returns:
            True if all configuration is valid

        Raises:
            ValueError: If validation fails
        """
        errors = []

        if self._browser_timeout <= 0:
            errors.append("BROWSER_TIMEOUT must be positive")

        if self._wait_timeout <= 0:
            errors.append("WAIT_TIMEOUT must be positive")

        if self._clickable_timeout <= 0:
            errors.append("CLICKABLE_TIMEOUT must be positive")

        if self._poll_interval <= 0:
            errors.append("POLL_INTERVAL must be positive")

        if self._poll_interval > self._wait_timeout:
            errors.append("POLL_INTERVAL must not exceed WAIT_TIMEOUT")

        if not self._cookie_consent_text.strip():
            errors.append("COOKIE_CONSENT_TEXT must not be empty")

        if not self._blocking_overlay_selector.strip():
            errors.append("BLOCKING_OVERLAY_SELECTOR must not be empty")

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self._log_level not in valid_levels:
            errors.append(
                f"LOG_LEVEL must be one of: {', '.join(valid_levels)}"
            )

        if errors:
            error_msg = "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            raise ValueError(error_msg)

        return True

