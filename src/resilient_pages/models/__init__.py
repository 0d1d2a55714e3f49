"""Value types shared by the page helpers."""

from .result import Result, ResultStatus

__all__ = [
    "Result",
    "ResultStatus",
]
