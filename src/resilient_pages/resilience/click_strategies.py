"""
Click strategies used by the fallback chain.

A strategy performs one way of clicking an element and raises when it
cannot. Any exception counts as a failed attempt: besides Selenium
errors, a dropped driver connection surfaces as urllib3 or socket
errors.

Strategies receive a ``resolve`` callable that turns the caller's
target (locator or element) into a WebElement, so a locator is looked
up again on every attempt and a stale reference from a previous attempt
is never reused.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable

from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement


logger = logging.getLogger(__name__)

Resolver = Callable[[Any], WebElement]


def describe_error(error: Exception) -> str:
    """Short, single line description of a (Selenium) exception."""
    message = getattr(error, "msg", None) or str(error) or ""
    first_line = message.strip().splitlines()[0] if message.strip() else ""
    return f"{type(error).__name__}: {first_line}" if first_line else type(error).__name__


class ClickStrategy(ABC):
    """
    One way of clicking an element.

    Implementations raise on failure so the chain can move on to the
    next strategy.
    """

    name: str = "click"

    @abstractmethod
    def click(self, target: Any) -> None:
        """
        Click the target.

        Args:
            target: Locator tuple or WebElement, passed to the resolver

        Raises:
            Exception: If the click could not be performed
        """
        pass


class NativeClickStrategy(ClickStrategy):
    """
    Native WebDriver click, retried with a fixed delay.

    Every failed attempt is logged and followed by ``delay`` seconds of
    sleep so animations and overlays get a chance to settle.

    Examples:
        >>> strategy = NativeClickStrategy(page.locate_clickable, attempts=3, delay=0.3)
        >>> strategy.click((By.ID, "submit"))
    """

    name = "native"

    def __init__(
        self,
        resolve: Resolver,
        attempts: int = 1,
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize native click strategy.

        Args:
            resolve: Turns the target into a clickable WebElement
            attempts: Number of click attempts (at least 1)
            delay: Seconds to sleep after each failed attempt
            sleep: Sleep function (injectable for tests)
        """
        if attempts < 1:
            raise ValueError(f"attempts must be at least 1, got: {attempts}")

        self.resolve = resolve
        self.attempts = attempts
        self.delay = delay
        self._sleep = sleep

    def click(self, target: Any) -> None:
        last_error = None

        for attempt in range(1, self.attempts + 1):
            try:
                self.resolve(target).click()
                return
            except Exception as e:
                last_error = e
                logger.warning(
                    f"Native click attempt {attempt}/{self.attempts} failed "
                    f"for {target}: {describe_error(e)}"
                )
                if self.delay > 0:
                    self._sleep(self.delay)

        raise last_error


class ScriptClickStrategy(ClickStrategy):
    """Dispatch the click from page JavaScript, bypassing hit testing."""

    name = "script"

    def __init__(self, driver: WebDriver, resolve: Resolver):
        self.driver = driver
        self.resolve = resolve

    def click(self, target: Any) -> None:
        element = self.resolve(target)
        self.driver.execute_script("arguments[0].click();", element)


class PointerClickStrategy(ClickStrategy):
    """Move the virtual pointer onto the element and click there."""

    name = "pointer"

    def __init__(self, driver: WebDriver, resolve: Resolver):
        self.driver = driver
        self.resolve = resolve

    def click(self, target: Any) -> None:
        element = self.resolve(target)
        ActionChains(self.driver).move_to_element(element).click().perform()
