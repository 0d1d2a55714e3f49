"""
Resilient page objects for Selenium UI suites.

Usage:
    >>> from resilient_pages import BasePage, WaitConfig
    >>> from selenium.webdriver.common.by import By
    >>>
    >>> class ProductPage(BasePage):
    ...     ADD_TO_CART = (By.CSS_SELECTOR, "button.add-to-cart")
    ...
    ...     def add_to_cart(self):
    ...         self.accept_cookie_consent_if_present()
    ...         return self.safe_click(self.ADD_TO_CART)
"""

from .automation import BasePage, Browser, BrowserConfig, CommonSelectors, WaitConfig
from .models import Result, ResultStatus

__all__ = [
    "BasePage",
    "Browser",
    "BrowserConfig",
    "CommonSelectors",
    "WaitConfig",
    "Result",
    "ResultStatus",
]

__version__ = "0.1.0"
