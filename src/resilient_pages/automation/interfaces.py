"""
Abstract interfaces for browser sessions.

Page objects only need a WebDriver; fixtures and runners depend on this
interface so a session can be replaced by a mock in unit tests.
"""

from abc import ABC, abstractmethod

from selenium.webdriver.remote.webdriver import WebDriver

from ..models.result import Result


class WebBrowser(ABC):
    """
    Abstract interface for an owned browser session.

    Implementing classes return Result<T> for navigation and screenshots
    and must never raise from close().
    """

    @property
    @abstractmethod
    def driver(self) -> WebDriver:
        """The live WebDriver session handed to page objects."""
        pass

    @abstractmethod
    def navigate(self, url: str) -> Result[None]:
        """
        Navigate to the specified URL.

        Args:
            url: Target URL

        Returns:
            Result with None value on success, error information on failure
        """
        pass

    @abstractmethod
    def screenshot(self, filepath: str) -> Result[bool]:
        """
        Take a screenshot and save to file.

        Args:
            filepath: Path to save screenshot

        Returns:
            Result with True on success
        """
        pass

    @abstractmethod
    def close(self):
        """
        Close the browser and clean up resources.

        This method should not raise exceptions.
        """
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False
