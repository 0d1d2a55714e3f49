"""Retry and fallback building blocks for flaky UI interactions."""

from .click_strategies import (
    ClickStrategy,
    NativeClickStrategy,
    PointerClickStrategy,
    ScriptClickStrategy,
)
from .fallback_chain import FallbackChain

__all__ = [
    "ClickStrategy",
    "NativeClickStrategy",
    "PointerClickStrategy",
    "ScriptClickStrategy",
    "FallbackChain",
]
