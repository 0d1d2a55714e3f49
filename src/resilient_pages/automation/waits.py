"""
Polling primitive and wait conditions.

Every blocking wait in the page helpers goes through ``await_condition``,
a thin wrapper over Selenium's ``WebDriverWait`` that also ignores stale
element references. Stale elements come from the DOM re-rendering while
we poll, so the next poll simply looks the element up again.

Conditions follow the Selenium ``expected_conditions`` contract: a
callable taking the driver and returning a truthy value once satisfied.
"""

from typing import Any, Callable, List, Tuple, Union

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait


Locator = Tuple[str, str]
Condition = Callable[[WebDriver], Any]

IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)


def await_condition(
    driver: WebDriver,
    condition: Condition,
    timeout: float,
    poll_interval: float = 0.5,
    message: str = ""
) -> Any:
    """
    Poll ``condition`` until it returns a truthy value or ``timeout`` elapses.

    The condition is evaluated once immediately, so an already satisfied
    condition returns without sleeping.

    Args:
        driver: WebDriver handed to the condition
        condition: Callable returning a truthy value when satisfied
        timeout: Maximum wait time in seconds
        poll_interval: Delay between evaluations in seconds
        message: Message attached to the TimeoutException

    Returns:
        The first truthy value returned by the condition

    Raises:
        TimeoutException: If the condition is not met in time
    """
    wait = WebDriverWait(
        driver,
        timeout,
        poll_frequency=poll_interval,
        ignored_exceptions=IGNORED_EXCEPTIONS
    )
    return wait.until(condition, message)


def visible(locator: Locator) -> Condition:
    """Element matching locator is displayed."""
    return EC.visibility_of_element_located(locator)


def clickable(locator: Locator) -> Condition:
    """Element matching locator is displayed and enabled."""
    return EC.element_to_be_clickable(locator)


def invisible(locator: Locator) -> Condition:
    """No element matching locator is displayed (absent counts)."""
    return EC.invisibility_of_element_located(locator)


def present(locator: Locator) -> Condition:
    """At least one element matches locator; returns all matches."""
    def _predicate(driver: WebDriver) -> Union[List[WebElement], bool]:
        elements = driver.find_elements(*locator)
        return elements if elements else False
    return _predicate


def text_contains(locator: Locator, substring: str) -> Condition:
    """Visible element's rendered text contains ``substring``."""
    def _predicate(driver: WebDriver) -> Union[WebElement, bool]:
        element = driver.find_element(*locator)
        if element.is_displayed() and substring in (element.text or ""):
            return element
        return False
    return _predicate


def attribute_equals(locator: Locator, attribute: str, value: str) -> Condition:
    """Element's ``attribute`` string value equals ``value``."""
    def _predicate(driver: WebDriver) -> Union[WebElement, bool]:
        element = driver.find_element(*locator)
        if element.get_attribute(attribute) == value:
            return element
        return False
    return _predicate


def document_ready() -> Condition:
    """The document reports ``readyState == 'complete'``."""
    def _predicate(driver: WebDriver) -> bool:
        return driver.execute_script("return document.readyState") == "complete"
    return _predicate
