"""
Unit tests for Browser.

ChromeDriver download and Chrome startup are patched out.
"""

import pytest
from unittest.mock import Mock, patch

from selenium.common.exceptions import WebDriverException

from resilient_pages.automation.base_page import BasePage
from resilient_pages.automation.browser import Browser, build_chrome_options
from resilient_pages.automation.browser_config import BrowserConfig
from resilient_pages.automation.wait_config import WaitConfig


class HomePage(BasePage):
    pass


class TestBuildChromeOptions:
    """Test suite for build_chrome_options."""

    def test_headless_options(self):
        options = build_chrome_options(BrowserConfig.for_testing())

        assert "--headless=new" in options.arguments
        assert "--window-size=1920,1080" in options.arguments

    def test_visible_browser_has_no_headless_flag(self):
        options = build_chrome_options(BrowserConfig())

        assert "--headless=new" not in options.arguments

    def test_automation_flags(self):
        options = build_chrome_options(BrowserConfig())

        assert "--disable-blink-features=AutomationControlled" in options.arguments
        assert options.experimental_options["excludeSwitches"] == ["enable-automation"]

    def test_automation_flags_disabled(self):
        options = build_chrome_options(BrowserConfig(disable_automation_flags=False))

        assert "excludeSwitches" not in options.experimental_options

    def test_user_agent_and_language(self):
        options = build_chrome_options(BrowserConfig(user_agent="ui-tests/1.0", language="tr-TR"))

        assert "--user-agent=ui-tests/1.0" in options.arguments
        assert "--lang=tr-TR" in options.arguments

    def test_download_dir(self, tmp_path):
        options = build_chrome_options(BrowserConfig(download_dir=str(tmp_path)))

        prefs = options.experimental_options["prefs"]
        assert prefs["download.default_directory"] == str(tmp_path.absolute())
        assert prefs["download.prompt_for_download"] is False


class TestBrowser:
    """Test suite for Browser."""

    @pytest.fixture
    def chrome(self):
        """Patch ChromeDriver management and Chrome startup."""
        with patch("resilient_pages.automation.browser.ChromeDriverManager") as manager, \
                patch("resilient_pages.automation.browser.Service"), \
                patch("resilient_pages.automation.browser.webdriver.Chrome") as chrome_class:
            manager.return_value.install.return_value = "/tmp/chromedriver"
            yield chrome_class

    @pytest.fixture
    def browser(self, chrome):
        return Browser(BrowserConfig.for_testing())

    def test_initialization_applies_timeouts(self, browser, chrome):
        driver = chrome.return_value

        assert browser.driver is driver
        driver.set_page_load_timeout.assert_called_once_with(10)
        driver.implicitly_wait.assert_called_once_with(0)

    def test_initialization_failure(self, chrome):
        chrome.side_effect = RuntimeError("chrome not installed")

        with pytest.raises(WebDriverException, match="Browser initialization failed"):
            Browser()

    def test_page_factory(self, browser, chrome):
        wait_config = WaitConfig.for_testing()

        page = browser.page(HomePage, wait_config=wait_config)

        assert isinstance(page, HomePage)
        assert page.driver is chrome.return_value
        assert page.wait_config is wait_config

    def test_navigate_success(self, browser, chrome):
        result = browser.navigate("https://example.com")

        assert result.is_success
        chrome.return_value.get.assert_called_once_with("https://example.com")

    def test_navigate_failure(self, browser, chrome):
        chrome.return_value.get.side_effect = WebDriverException("net::ERR_NAME_NOT_RESOLVED")

        result = browser.navigate("https://invalid.example")

        assert result.is_failure
        assert isinstance(result.error, WebDriverException)

    def test_screenshot(self, browser, chrome, tmp_path):
        chrome.return_value.save_screenshot.return_value = True
        target = tmp_path / "shots" / "home.png"

        result = browser.screenshot(str(target))

        assert result.is_success
        assert target.parent.is_dir()
        chrome.return_value.save_screenshot.assert_called_once_with(str(target))

    def test_screenshot_failure(self, browser, chrome, tmp_path):
        chrome.return_value.save_screenshot.return_value = False

        assert browser.screenshot(str(tmp_path / "home.png")).is_failure

    def test_close_is_idempotent(self, browser, chrome):
        browser.close()
        browser.close()

        chrome.return_value.quit.assert_called_once()
        with pytest.raises(WebDriverException, match="closed"):
            browser.driver

    def test_close_never_raises(self, browser, chrome):
        chrome.return_value.quit.side_effect = WebDriverException("already gone")

        browser.close()

    def test_context_manager_closes(self, chrome):
        with Browser(BrowserConfig.for_testing()) as browser:
            assert browser.driver is chrome.return_value

        chrome.return_value.quit.assert_called_once()
