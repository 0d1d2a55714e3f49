"""
Result<T> pattern for element probes and click chains.

Operations that must not raise (probes, safe clicks) return a Result so
callers can still tell *why* an interaction failed: the element never
showed up, the wait ran out of time, or something else went wrong.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from selenium.common.exceptions import NoSuchElementException, TimeoutException


T = TypeVar('T')
U = TypeVar('U')


class ResultStatus(Enum):
    """Status of a Result."""
    SUCCESS = "success"
    FAILURE = "failure"
    TIMEOUT = "timeout"
    NOT_FOUND = "not_found"


@dataclass
class Result(Generic[T]):
    """
    Outcome of an interaction that may succeed or fail.

    Attributes:
        status: SUCCESS, FAILURE, TIMEOUT or NOT_FOUND
        value: The result value if successful (None otherwise)
        error: The exception that caused the failure (None if success)
        message: Optional message describing the result

    Examples:
        >>> result = page.probe_visible((By.ID, "banner"))
        >>> if result.is_not_found:
        ...     print("banner was never rendered")
        >>> element = result.unwrap_or_raise()
    """

    status: ResultStatus
    value: Optional[T] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the result represents success."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the result represents any kind of failure."""
        return self.status != ResultStatus.SUCCESS

    @property
    def is_timeout(self) -> bool:
        """Check if the failure was a wait running out of time."""
        return self.status == ResultStatus.TIMEOUT

    @property
    def is_not_found(self) -> bool:
        """Check if the failure was a missing element."""
        return self.status == ResultStatus.NOT_FOUND

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> 'Result[T]':
        """
        Create a successful result.

        Args:
            value: The result value
            message: Optional success message
        """
        return cls(
            status=ResultStatus.SUCCESS,
            value=value,
            message=message
        )

    @classmethod
    def failure(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """
        Create a generic failure result.

        Args:
            message: Error message describing the failure
            error: Optional exception that caused the failure
        """
        return cls(
            status=ResultStatus.FAILURE,
            message=message,
            error=error
        )

    @classmethod
    def timeout(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """Create a result for a wait that expired."""
        return cls(status=ResultStatus.TIMEOUT, message=message, error=error)

    @classmethod
    def not_found(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """Create a result for an element that does not exist."""
        return cls(status=ResultStatus.NOT_FOUND, message=message, error=error)

    @classmethod
    def from_exception(cls, message: str, error: Exception) -> 'Result[T]':
        """
        Classify an exception into the matching failure status.

        NoSuchElementException is checked before TimeoutException so a
        not-found raised from a timed-out wait keeps its more precise status.

        Args:
            message: Error message describing the failure
            error: The exception raised by the interaction

        Returns:
            NOT_FOUND, TIMEOUT or FAILURE result carrying the error

        Examples:
            >>> Result.from_exception("wait failed", TimeoutException()).is_timeout
            True
        """
        if isinstance(error, NoSuchElementException):
            return cls.not_found(message, error)
        if isinstance(error, TimeoutException):
            return cls.timeout(message, error)
        return cls.failure(message, error)

    def unwrap(self) -> T:
        """
        Unwrap the result value.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(
                f"Cannot unwrap {self.status.value} result: {self.message}"
            )
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value if successful, otherwise the default."""
        return self.value if self.is_success else default

    def unwrap_or_raise(self) -> T:
        """
        Return the value or re-raise the captured exception.

        Used by operations whose contract is to propagate failures.

        Raises:
            The original error, or ValueError if none was captured
        """
        if self.is_success:
            return self.value
        if self.error is not None:
            raise self.error
        raise ValueError(f"Cannot unwrap {self.status.value} result: {self.message}")

    def map(self, func: Callable[[T], U]) -> 'Result[U]':
        """
        Map a function over the success value.

        Returns:
            New Result with mapped value if success, original failure otherwise

        Examples:
            >>> result = Result.success(element)
            >>> result.map(lambda el: el.text)
        """
        if self.is_failure:
            return Result(status=self.status, message=self.message, error=self.error)

        try:
            new_value = func(self.value)
            return Result.success(new_value, self.message)
        except Exception as e:
            return Result.from_exception(str(e), e)
