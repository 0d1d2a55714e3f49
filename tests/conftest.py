"""
Shared fixtures for page helper tests.

A Mock stands in for the WebDriver session; ActionChains is patched
because Selenium's pointer actions only accept real WebElements.
"""

import pytest
from unittest.mock import Mock, patch

from selenium.webdriver.common.by import By

from resilient_pages.automation.base_page import BasePage
from resilient_pages.automation.wait_config import WaitConfig


BUTTON = (By.CSS_SELECTOR, "button.primary")


class DemoPage(BasePage):
    """Minimal concrete page for exercising BasePage."""

    SUBMIT = BUTTON


def _make_element(displayed=True, enabled=True, text="", attributes=None):
    element = Mock(name="element")
    element.is_displayed.return_value = displayed
    element.is_enabled.return_value = enabled
    element.text = text
    attributes = attributes or {}
    element.get_attribute.side_effect = lambda name: attributes.get(name)
    return element


@pytest.fixture
def make_element():
    """Factory for mock WebElements with the state the expected conditions read."""
    return _make_element


@pytest.fixture
def mock_driver():
    """WebDriver mock where nothing matches unless a test says so."""
    driver = Mock(name="driver")
    driver.find_elements.return_value = []
    return driver


@pytest.fixture
def wait_config():
    return WaitConfig.for_testing()


@pytest.fixture
def sleep_calls():
    return []


@pytest.fixture
def make_page(mock_driver):
    """Build a DemoPage on the mock driver with custom settings."""
    def _make_page(**kwargs):
        return DemoPage(mock_driver, **kwargs)
    return _make_page


@pytest.fixture
def page(make_page, wait_config, sleep_calls):
    return make_page(wait_config=wait_config, sleep=sleep_calls.append)


@pytest.fixture
def action_chains():
    """Patched ActionChains class used by hover and pointer clicks."""
    with patch("resilient_pages.automation.base_page.ActionChains") as base_page_chains, \
            patch("resilient_pages.resilience.click_strategies.ActionChains", base_page_chains):
        yield base_page_chains
