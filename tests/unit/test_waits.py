"""
Unit tests for the polling primitive and wait conditions.
"""

import time

import pytest
from unittest.mock import Mock

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.common.by import By

from resilient_pages.automation import waits


LOCATOR = (By.ID, "status")


class TestAwaitCondition:
    """Test suite for await_condition."""

    def test_returns_first_truthy_value(self, mock_driver):
        """The condition's value is handed back to the caller."""
        result = waits.await_condition(mock_driver, lambda d: "ready", timeout=1, poll_interval=0.05)

        assert result == "ready"

    def test_satisfied_condition_returns_without_sleeping(self, mock_driver):
        """An already satisfied condition does not wait a poll interval."""
        start = time.monotonic()
        waits.await_condition(mock_driver, lambda d: True, timeout=5, poll_interval=2)

        assert time.monotonic() - start < 0.5

    def test_timeout_raises_with_message(self, mock_driver):
        """A never satisfied condition raises TimeoutException within bound."""
        start = time.monotonic()

        with pytest.raises(TimeoutException, match="never happened"):
            waits.await_condition(
                mock_driver, lambda d: False, timeout=0.2, poll_interval=0.05,
                message="never happened"
            )

        assert time.monotonic() - start < 0.2 + 0.5

    @pytest.mark.parametrize("error", [
        NoSuchElementException("not yet"),
        StaleElementReferenceException("re-rendered"),
    ])
    def test_lookup_errors_are_retried(self, mock_driver, error):
        """Missing and stale elements are polled again, not raised."""
        condition = Mock(side_effect=[error, error, "done"])

        result = waits.await_condition(mock_driver, condition, timeout=1, poll_interval=0.01)

        assert result == "done"
        assert condition.call_count == 3

    def test_other_errors_propagate(self, mock_driver):
        """Errors outside the ignored set are not swallowed."""
        def broken(driver):
            raise ValueError("bug in condition")

        with pytest.raises(ValueError, match="bug in condition"):
            waits.await_condition(mock_driver, broken, timeout=1, poll_interval=0.01)


class TestConditions:
    """Test suite for the individual conditions."""

    def test_present_returns_matches(self, mock_driver, make_element):
        """present() returns every match, False when there are none."""
        element = make_element()
        condition = waits.present(LOCATOR)

        assert condition(mock_driver) is False

        mock_driver.find_elements.return_value = [element]
        assert condition(mock_driver) == [element]
        mock_driver.find_elements.assert_called_with(*LOCATOR)

    def test_text_contains_requires_visible_text(self, mock_driver, make_element):
        """Hidden elements do not satisfy text_contains."""
        condition = waits.text_contains(LOCATOR, "Saved")

        mock_driver.find_element.return_value = make_element(displayed=False, text="Saved!")
        assert condition(mock_driver) is False

        visible = make_element(text="Draft Saved!")
        mock_driver.find_element.return_value = visible
        assert condition(mock_driver) is visible

    def test_text_contains_handles_missing_text(self, mock_driver, make_element):
        """An element with no text never matches."""
        mock_driver.find_element.return_value = make_element(text=None)

        assert waits.text_contains(LOCATOR, "x")(mock_driver) is False

    def test_attribute_equals_compares_strings(self, mock_driver, make_element):
        """attribute_equals matches the exact string value."""
        condition = waits.attribute_equals(LOCATOR, "aria-expanded", "true")

        mock_driver.find_element.return_value = make_element(attributes={"aria-expanded": "false"})
        assert condition(mock_driver) is False

        expanded = make_element(attributes={"aria-expanded": "true"})
        mock_driver.find_element.return_value = expanded
        assert condition(mock_driver) is expanded

    def test_attribute_equals_missing_attribute(self, mock_driver, make_element):
        """A missing attribute (None) never equals a string."""
        mock_driver.find_element.return_value = make_element()

        assert waits.attribute_equals(LOCATOR, "data-state", "open")(mock_driver) is False

    def test_document_ready(self, mock_driver):
        """document_ready checks readyState through a script."""
        condition = waits.document_ready()

        mock_driver.execute_script.return_value = "interactive"
        assert condition(mock_driver) is False

        mock_driver.execute_script.return_value = "complete"
        assert condition(mock_driver) is True
        mock_driver.execute_script.assert_called_with("return document.readyState")

    def test_invisible_counts_absent_element(self, mock_driver):
        """No matching element satisfies invisible()."""
        mock_driver.find_element.side_effect = NoSuchElementException("gone")

        assert waits.invisible(LOCATOR)(mock_driver) is True

    def test_visible_and_clickable(self, mock_driver, make_element):
        """visible() ignores enabled state, clickable() does not."""
        disabled = make_element(enabled=False)
        mock_driver.find_element.return_value = disabled

        assert waits.visible(LOCATOR)(mock_driver) is disabled
        assert not waits.clickable(LOCATOR)(mock_driver)
