"""
Chrome session ownership for UI suites.

This module starts and stops the WebDriver session page objects run
against:
- Automatic ChromeDriver management via webdriver-manager
- Options built from BrowserConfig
- Result<T> for navigation and screenshots
- Context manager support for automatic cleanup
"""

import logging
from pathlib import Path
from typing import Optional, Type, TypeVar

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager

from .browser_config import BrowserConfig
from .interfaces import WebBrowser
from ..models.result import Result


logger = logging.getLogger(__name__)

P = TypeVar('P')


def build_chrome_options(config: BrowserConfig) -> Options:
    """
    Translate a BrowserConfig into Chrome options.

    Args:
        config: Browser configuration

    Returns:
        Options ready to pass to webdriver.Chrome
    """
    options = Options()

    if config.headless:
        options.add_argument("--headless=new")
        options.add_argument("--disable-gpu")

    width, height = config.window_size
    options.add_argument(f"--window-size={width},{height}")

    if config.disable_automation_flags:
        options.add_argument("--disable-blink-features=AutomationControlled")
        options.add_experimental_option("excludeSwitches", ["enable-automation"])
        options.add_experimental_option("useAutomationExtension", False)

    if config.user_agent:
        options.add_argument(f"--user-agent={config.user_agent}")

    if config.language:
        options.add_argument(f"--lang={config.language}")

    if config.download_dir:
        prefs = {
            "download.default_directory": str(Path(config.download_dir).absolute()),
            "download.prompt_for_download": False,
        }
        options.add_experimental_option("prefs", prefs)

    return options


class Browser(WebBrowser):
    """
    Chrome WebDriver session implementing the WebBrowser interface.

    Examples:
        >>> with Browser(BrowserConfig.for_ci()) as browser:
        ...     browser.navigate("https://example.com")
        ...     page = browser.page(HomePage)
        ...     page.accept_cookie_consent_if_present()
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        Start a Chrome session.

        Args:
            config: Browser configuration (default: BrowserConfig())

        Raises:
            WebDriverException: If ChromeDriver initialization fails
        """
        self.config = config or BrowserConfig()
        self._driver: Optional[WebDriver] = None

        try:
            options = build_chrome_options(self.config)
            service = Service(ChromeDriverManager().install())
            self._driver = webdriver.Chrome(service=service, options=options)
            self._driver.set_page_load_timeout(self.config.page_load_timeout)
            self._driver.implicitly_wait(self.config.implicit_wait)

            logger.info(
                f"Browser initialized (headless={self.config.headless}, "
                f"window_size={self.config.window_size}, "
                f"page_load_timeout={self.config.page_load_timeout})"
            )

        except Exception as e:
            logger.error(f"Failed to initialize browser: {e}", exc_info=True)
            self.close()
            raise WebDriverException(f"Browser initialization failed: {e}") from e

    @property
    def driver(self) -> WebDriver:
        if self._driver is None:
            raise WebDriverException("Browser session is closed")
        return self._driver

    def page(self, page_class: Type[P], **kwargs) -> P:
        """
        Create a page object bound to this session.

        Args:
            page_class: BasePage subclass
            **kwargs: Extra constructor arguments (wait_config, selectors, ...)
        """
        return page_class(self.driver, **kwargs)

    def navigate(self, url: str) -> Result[None]:
        """Navigate to URL."""
        try:
            logger.debug(f"Navigating to: {url}")
            self.driver.get(url)
            return Result.success(None, f"Navigated to {url}")

        except WebDriverException as e:
            logger.error(f"Navigation failed: {e}")
            return Result.from_exception(f"Navigation failed: {url}", e)

    def screenshot(self, filepath: str) -> Result[bool]:
        """Take screenshot and save to file."""
        try:
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)

            if self.driver.save_screenshot(str(path)):
                logger.debug(f"Screenshot saved: {filepath}")
                return Result.success(True, f"Screenshot saved: {filepath}")
            return Result.failure("Screenshot save failed")

        except Exception as e:
            logger.error(f"Screenshot failed: {e}")
            return Result.failure(f"Screenshot failed: {filepath}", e)

    def close(self):
        """Close browser and clean up resources."""
        try:
            if self._driver:
                self._driver.quit()
                logger.info("Browser closed")

        except Exception as e:
            logger.warning(f"Error closing browser: {e}")

        finally:
            self._driver = None
