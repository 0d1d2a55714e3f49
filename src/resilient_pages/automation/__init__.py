"""
Page object automation layer.

Usage:
    >>> from resilient_pages.automation import BasePage, Browser, BrowserConfig
    >>>
    >>> class CartPage(BasePage):
    ...     CHECKOUT = (By.ID, "checkout")
    >>>
    >>> with Browser(BrowserConfig.for_ci()) as browser:
    ...     browser.navigate("https://shop.example.com/cart")
    ...     browser.page(CartPage).force_click(CartPage.CHECKOUT)
"""

from .base_page import BasePage
from .browser import Browser
from .browser_config import BrowserConfig
from .interfaces import WebBrowser
from .selectors import CommonSelectors, button_with_text
from .wait_config import WaitConfig

__all__ = [
    "BasePage",
    "Browser",
    "BrowserConfig",
    "WebBrowser",
    "CommonSelectors",
    "button_with_text",
    "WaitConfig",
]
