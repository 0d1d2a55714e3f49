"""
Well-known locators used by the base page.

Centralizing them keeps site-specific strings out of the interaction
code and lets a suite override them when the markup changes.

Usage:
    >>> from resilient_pages.automation.selectors import CommonSelectors
    >>> selectors = CommonSelectors.from_config(config)
    >>> driver.find_element(*selectors.cookie_accept_button)
"""

from dataclasses import dataclass
from typing import Tuple

from selenium.webdriver.common.by import By

from ..utils.config import DEFAULT_BLOCKING_OVERLAY_SELECTOR, DEFAULT_COOKIE_CONSENT_TEXT


Locator = Tuple[str, str]


def button_with_text(text: str) -> Locator:
    """
    XPath locator for a button whose text contains ``text``.

    Single quotes in ``text`` are handled with ``concat()`` since XPath 1.0
    has no escape sequence.
    """
    if "'" not in text:
        literal = f"'{text}'"
    else:
        parts = text.split("'")
        literal = "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"
    return (By.XPATH, f"//button[contains(text(), {literal})]")


@dataclass(frozen=True)
class CommonSelectors:
    """Selectors shared by all pages of the application under test."""

    # Cookie consent banner
    cookie_accept_button: Locator = button_with_text(DEFAULT_COOKIE_CONSENT_TEXT)

    # "Added to cart" style notification that intercepts clicks while shown
    blocking_overlay: Locator = (By.CSS_SELECTOR, DEFAULT_BLOCKING_OVERLAY_SELECTOR)

    @classmethod
    def from_config(cls, config) -> 'CommonSelectors':
        """
        Build selectors from the environment backed Config.

        Args:
            config: resilient_pages.utils.config.Config instance
        """
        return cls(
            cookie_accept_button=button_with_text(config.cookie_consent_text),
            blocking_overlay=(By.CSS_SELECTOR, config.blocking_overlay_selector),
        )

