"""
Base page object with resilient element interactions.

This module provides the abstract ``BasePage`` every page object of a UI
suite derives from. It wraps raw Selenium calls with:
- Explicit waits for visibility, clickability, text and attributes
- Click retries with a scripted (JavaScript) fallback
- Best-effort scrolling, hovering and cookie banner handling
- Boolean probes that never raise

Error policy per operation:
- Locators and waits (locate_*, wait_*) raise TimeoutException or
  NoSuchElementException.
- Probes (is_*, probe_*) never raise; they return False or a failed Result.
- Cosmetic helpers (scroll_into_view, center_in_view,
  accept_cookie_consent_if_present) log failures and return False.
- click and force_click raise the error of the last strategy tried;
  safe_click returns a Result instead of raising.

A page instance drives exactly one WebDriver session and is not thread-safe.
"""

import logging
import time
from abc import ABC
from typing import Any, Callable, List, Optional, Tuple, Union

from selenium.common.exceptions import (
    NoSuchElementException,
    TimeoutException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from . import waits
from .selectors import CommonSelectors
from .wait_config import WaitConfig
from ..models.result import Result
from ..resilience.click_strategies import (
    NativeClickStrategy,
    PointerClickStrategy,
    ScriptClickStrategy,
    describe_error,
)
from ..resilience.fallback_chain import FallbackChain
from ..utils.logger import mask_text


logger = logging.getLogger(__name__)

Locator = Tuple[str, str]
Target = Union[Locator, WebElement]

SCROLL_WITH_OFFSET_SCRIPT = (
    "window.scrollTo({"
    "top: arguments[0].getBoundingClientRect().top + window.scrollY - arguments[1], "
    "behavior: 'smooth'"
    "});"
)
SCROLL_TO_CENTER_SCRIPT = "arguments[0].scrollIntoView({block: 'center'});"


def _is_locator(target: Any) -> bool:
    """(By, value) given as a tuple or a list, e.g. loaded from JSON."""
    return isinstance(target, (tuple, list))


class BasePage(ABC):
    """
    Common reusable actions and waits for all page classes.

    Examples:
        >>> class SearchPage(BasePage):
        ...     QUERY = (By.NAME, "q")
        ...     SUBMIT = (By.CSS_SELECTOR, "button[type='submit']")
        ...
        ...     def search(self, text: str):
        ...         self.accept_cookie_consent_if_present()
        ...         self.type_text(self.QUERY, text)
        ...         self.safe_click(self.SUBMIT)

        >>> page = SearchPage(driver, wait_config=WaitConfig(timeout=10))
        >>> page.search("selenium")
    """

    def __init__(
        self,
        driver: WebDriver,
        wait_config: Optional[WaitConfig] = None,
        selectors: Optional[CommonSelectors] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize page object.

        Args:
            driver: WebDriver session the page operates on
            wait_config: Timeouts, poll interval and retry policy
                        (default: WaitConfig())
            selectors: Well-known locators such as the cookie banner button
                      (default: CommonSelectors())
            sleep: Sleep function used between click retries
        """
        self.driver = driver
        self.wait_config = wait_config or WaitConfig()
        self.selectors = selectors or CommonSelectors()
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Waiting
    # ------------------------------------------------------------------

    def await_condition(
        self,
        condition: waits.Condition,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        message: str = ""
    ) -> Any:
        """
        Poll a condition until it holds or the timeout elapses.

        Args:
            condition: Callable taking the driver, truthy when satisfied
            timeout: Seconds to wait (default: wait_config.timeout)
            poll_interval: Seconds between checks (default: wait_config.poll_interval)
            message: Message for the TimeoutException

        Returns:
            The condition's first truthy value

        Raises:
            TimeoutException: If the condition never held
        """
        return waits.await_condition(
            self.driver,
            condition,
            timeout=self.wait_config.timeout if timeout is None else timeout,
            poll_interval=(
                self.wait_config.poll_interval if poll_interval is None else poll_interval
            ),
            message=message
        )

    def locate_visible(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """
        Wait until the element is visible and return it.

        Args:
            locator: (By, value) tuple
            timeout: Seconds to wait (default: wait_config.timeout)

        Raises:
            NoSuchElementException: If nothing matches the locator
            TimeoutException: If the element exists but never became visible
        """
        timeout = self.wait_config.timeout if timeout is None else timeout
        return self._locate(waits.visible(locator), locator, timeout, "visible")

    def locate_clickable(self, locator: Locator, timeout: Optional[float] = None) -> WebElement:
        """
        Wait until the element is visible and enabled and return it.

        Args:
            locator: (By, value) tuple
            timeout: Seconds to wait (default: wait_config.clickable_timeout)

        Raises:
            NoSuchElementException: If nothing matches the locator
            TimeoutException: If the element exists but never became clickable
        """
        timeout = self.wait_config.clickable_timeout if timeout is None else timeout
        return self._locate(waits.clickable(locator), locator, timeout, "clickable")

    def _locate(
        self,
        condition: waits.Condition,
        locator: Locator,
        timeout: float,
        state: str
    ) -> WebElement:
        try:
            return self.await_condition(
                condition,
                timeout=timeout,
                message=f"Element not {state} within {timeout}s: {locator}"
            )
        except TimeoutException as e:
            if not self.driver.find_elements(*locator):
                raise NoSuchElementException(
                    f"No element matches {locator} after {timeout}s"
                ) from e
            raise

    def wait_for_text_contains(
        self,
        locator: Locator,
        substring: str,
        timeout: Optional[float] = None
    ) -> WebElement:
        """
        Wait until the visible element's text contains ``substring``.

        Raises:
            TimeoutException: If the text never appeared
        """
        return self.await_condition(
            waits.text_contains(locator, substring),
            timeout=timeout,
            message=f"Text {substring!r} not found in {locator}"
        )

    def wait_for_attribute_equals(
        self,
        locator: Locator,
        attribute: str,
        value: str,
        timeout: Optional[float] = None
    ) -> WebElement:
        """
        Wait until an attribute of the element equals ``value``.

        Examples:
            >>> page.wait_for_attribute_equals(MENU, "aria-expanded", "true")

        Raises:
            TimeoutException: If the attribute never took the value
        """
        return self.await_condition(
            waits.attribute_equals(locator, attribute, value),
            timeout=timeout,
            message=f"Attribute {attribute!r} of {locator} never equalled {value!r}"
        )

    def wait_until_invisible(self, locator: Locator, timeout: Optional[float] = None) -> None:
        """
        Wait until no element matching the locator is visible.

        Returns at once when nothing matches.

        Raises:
            TimeoutException: If the element stayed visible
        """
        self.await_condition(
            waits.invisible(locator),
            timeout=timeout,
            message=f"Element still visible: {locator}"
        )

    def wait_for_document_ready(self, timeout: Optional[float] = None) -> None:
        """
        Wait until ``document.readyState`` is ``complete``.

        Raises:
            TimeoutException: If the page did not finish loading
        """
        self.await_condition(
            waits.document_ready(),
            timeout=timeout,
            message="Document did not reach readyState 'complete'"
        )

    # ------------------------------------------------------------------
    # Probes
    # ------------------------------------------------------------------

    def probe_visible(self, locator: Locator, timeout: Optional[float] = None) -> Result[WebElement]:
        """Non-raising locate_visible."""
        try:
            element = self.locate_visible(locator, timeout)
            return Result.success(element, f"Element visible: {locator}")
        except Exception as e:
            return Result.from_exception(f"Element not visible: {locator}", e)

    def probe_present(self, locator: Locator, timeout: float = 0) -> Result[List[WebElement]]:
        """
        Non-raising presence check.

        With ``timeout=0`` the DOM is checked once; otherwise it is polled
        until at least one element matches.
        """
        try:
            if timeout > 0:
                elements = self.await_condition(
                    waits.present(locator),
                    timeout=timeout,
                    message=f"Element not present: {locator}"
                )
            else:
                elements = self.driver.find_elements(*locator)

            if elements:
                return Result.success(list(elements), f"Found {len(elements)} elements: {locator}")
            return Result.not_found(f"Element not present: {locator}")
        except Exception as e:
            return Result.from_exception(f"Element not present: {locator}", e)

    def is_visible(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """True if the element became visible within the timeout. Never raises."""
        return self.probe_visible(locator, timeout).is_success

    def is_present(self, locator: Locator, timeout: float = 0) -> bool:
        """True if at least one element matches the locator. Never raises."""
        return self.probe_present(locator, timeout).is_success

    def wait_until_visible_or_timeout(self, locator: Locator, timeout: float) -> bool:
        """Like is_visible, but logs a warning when the wait times out."""
        result = self.probe_visible(locator, timeout)
        if result.is_failure:
            logger.warning(f"Timeout waiting for element: {locator} ({result.status.value})")
        return result.is_success

    # ------------------------------------------------------------------
    # Clicking
    # ------------------------------------------------------------------

    def click(self, locator: Locator) -> None:
        """
        Click natively once, falling back to a JavaScript click.

        Raises:
            Exception: The scripted fallback's error when both clicks failed
        """
        chain = FallbackChain(
            [
                NativeClickStrategy(self.locate_clickable),
                ScriptClickStrategy(self.driver, self.locate_visible),
            ],
            description="click"
        )
        chain.run(locator).unwrap_or_raise()

    def safe_click(self, locator: Locator) -> Result[str]:
        """
        Click with native retries, then a single JavaScript click.

        Native attempts are separated by ``wait_config.safe_click_delay``.
        Never raises: a failed click is reported through the Result.

        Returns:
            Result whose value is "native" or "script" on success

        Examples:
            >>> result = page.safe_click(ADD_TO_CART)
            >>> assert result.is_success, result.message
        """
        chain = FallbackChain(
            [
                NativeClickStrategy(
                    self.locate_clickable,
                    attempts=self.wait_config.click_retries,
                    delay=self.wait_config.safe_click_delay,
                    sleep=self._sleep
                ),
                ScriptClickStrategy(self.driver, self.locate_visible),
            ],
            description="safe click"
        )
        return chain.run(locator)

    def force_click(
        self,
        target: Target,
        offset: Optional[int] = None,
        overlay_timeout: Optional[float] = None
    ) -> str:
        """
        Wait out the blocking overlay, scroll, hover and click.

        Steps:
        1. Wait for ``selectors.blocking_overlay`` to disappear (failure ignored)
        2. Scroll so the element sits ``offset`` pixels below the viewport top
        3. Move the pointer over the element
        4. Native click with retries (``wait_config.force_click_delay`` apart),
           then a JavaScript click

        Args:
            target: Locator tuple or WebElement
            offset: Pixels kept above the element (default: wait_config.scroll_offset)
            overlay_timeout: Seconds to wait for the overlay
                            (default: wait_config.overlay_timeout)

        Returns:
            Name of the strategy that clicked ("native" or "script")

        Raises:
            NoSuchElementException / TimeoutException: If a locator target
                never became visible
            Exception: The scripted fallback's error when every click failed
        """
        offset = self.wait_config.scroll_offset if offset is None else offset
        overlay_timeout = (
            self.wait_config.overlay_timeout if overlay_timeout is None else overlay_timeout
        )

        try:
            self.wait_until_invisible(self.selectors.blocking_overlay, timeout=overlay_timeout)
        except Exception as e:
            logger.warning(f"Blocking overlay check failed, continuing: {describe_error(e)}")

        element = self._element(target)
        self.scroll_into_view(element, offset)
        self.hover(element)

        chain = FallbackChain(
            [
                NativeClickStrategy(
                    self._resolver(self.locate_clickable),
                    attempts=self.wait_config.click_retries,
                    delay=self.wait_config.force_click_delay,
                    sleep=self._sleep
                ),
                ScriptClickStrategy(self.driver, self._resolver(self.locate_visible)),
            ],
            description="force click"
        )
        return chain.run(target).unwrap_or_raise()

    def click_with_pointer(self, target: Target) -> None:
        """
        Center the element and click it with the virtual pointer.

        Useful for menus that only react to real mouse movement.

        Raises:
            WebDriverException: If the element could not be located or clicked
        """
        element = self._element(target)
        self.center_in_view(element)
        PointerClickStrategy(self.driver, self._resolver(self.locate_visible)).click(element)
        logger.info(f"Pointer clicked element: {target}")

    # ------------------------------------------------------------------
    # Pointer, keyboard and scrolling
    # ------------------------------------------------------------------

    def hover(self, target: Target) -> None:
        """
        Move the pointer over the element.

        Raises:
            WebDriverException: If the element could not be located or reached
        """
        element = self._element(target)
        ActionChains(self.driver).move_to_element(element).perform()

    def type_text(self, locator: Locator, text: str) -> None:
        """
        Clear the visible input and type ``text`` into it.

        Raises:
            NoSuchElementException / TimeoutException: If the input never showed up
        """
        element = self.locate_visible(locator)
        element.clear()
        element.send_keys(text)
        logger.debug(f"Typed {mask_text(text)} into {locator}")

    def scroll_into_view(self, target: Target, offset: int = 0) -> bool:
        """
        Smooth-scroll so the element's top sits ``offset`` pixels below the viewport top.

        Best-effort: failures are logged, never raised.

        Returns:
            True if the scroll script ran
        """
        try:
            element = self._element(target)
            self.driver.execute_script(SCROLL_WITH_OFFSET_SCRIPT, element, offset)
            logger.info(f"Scrolled to element with {offset}px offset: {target}")
            return True
        except Exception as e:
            logger.warning(f"Failed to scroll to element with offset: {describe_error(e)}")
            return False

    def center_in_view(self, target: Target) -> bool:
        """Scroll the element to the middle of the viewport. Best-effort."""
        try:
            element = self._element(target)
            self.driver.execute_script(SCROLL_TO_CENTER_SCRIPT, element)
            return True
        except Exception as e:
            logger.warning(f"Failed to center element: {describe_error(e)}")
            return False

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def execute_script(self, script: str, *args: Any) -> Any:
        """Run JavaScript in the page and return its result."""
        return self.driver.execute_script(script, *args)

    def find_all(self, locator: Locator, timeout: float = 0) -> List[WebElement]:
        """
        Return all elements matching the locator.

        With a timeout, waits until at least one matches and returns an
        empty list if none ever did.
        """
        if timeout <= 0:
            return list(self.driver.find_elements(*locator))

        try:
            return list(self.await_condition(waits.present(locator), timeout=timeout))
        except TimeoutException:
            return []

    def accept_cookie_consent_if_present(self) -> bool:
        """
        Close the cookie consent banner if it is displayed.

        Checks once, without waiting. A missing banner or any error is
        logged and ignored.

        Returns:
            True if the accept button was clicked
        """
        try:
            button = self.driver.find_element(*self.selectors.cookie_accept_button)
            if button.is_displayed():
                button.click()
                logger.info("Cookie banner closed.")
                return True
            logger.info("Cookie banner present but not displayed.")
            return False
        except NoSuchElementException:
            logger.info("Cookie banner not found.")
            return False
        except Exception as e:
            logger.warning(f"Failed to close cookie banner: {describe_error(e)}")
            return False

    # ------------------------------------------------------------------
    # Target resolution
    # ------------------------------------------------------------------

    def _element(self, target: Target) -> WebElement:
        """Locate a locator (visible); pass an element through."""
        if _is_locator(target):
            return self.locate_visible(tuple(target))
        return target

    def _resolver(self, locate: Callable[[Locator], WebElement]) -> Callable[[Target], WebElement]:
        """Resolver that locates locators with ``locate`` and passes elements through."""
        def _resolve(target: Target) -> WebElement:
            if _is_locator(target):
                return locate(tuple(target))
            return target
        return _resolve
