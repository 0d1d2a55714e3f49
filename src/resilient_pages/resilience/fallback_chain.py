"""
Ordered fallback of click strategies.

The chain tries each strategy in turn; the first one that does not raise
wins and later strategies are never run. What happens when every
strategy fails is left to the caller: the chain only reports it.
"""

import logging
from typing import Any, List, Sequence

from .click_strategies import ClickStrategy, describe_error
from ..models.result import Result


logger = logging.getLogger(__name__)


class FallbackChain:
    """
    Run click strategies in order until one succeeds.

    Every strategy attempt gets its own log line (warning on failure,
    info on success), followed by an error line when all of them failed.

    Examples:
        >>> chain = FallbackChain([
        ...     NativeClickStrategy(page.locate_clickable, attempts=3, delay=0.3),
        ...     ScriptClickStrategy(driver, page.locate_visible),
        ... ], description="safe click")
        >>> result = chain.run((By.ID, "checkout"))
        >>> result.value
        'native'
    """

    def __init__(self, strategies: Sequence[ClickStrategy], description: str = "click"):
        """
        Initialize the chain.

        Args:
            strategies: Strategies in the order they are tried
            description: Label used in log lines

        Raises:
            ValueError: If no strategy is given
        """
        if not strategies:
            raise ValueError("FallbackChain requires at least one strategy")

        self.strategies: List[ClickStrategy] = list(strategies)
        self.description = description

    def run(self, target: Any) -> Result[str]:
        """
        Click the target with the first strategy that works.

        Any exception raised by a strategy moves the chain on; it is
        classified into the failure Result only if no strategy is left.

        Args:
            target: Locator tuple or WebElement

        Returns:
            Result whose value is the name of the winning strategy, or a
            failure carrying the last strategy's exception
        """
        last_error = None

        for strategy in self.strategies:
            try:
                strategy.click(target)
            except Exception as e:
                last_error = e
                logger.warning(
                    f"{self.description}: {strategy.name} click failed for {target}: "
                    f"{describe_error(e)}"
                )
                continue

            logger.info(f"{self.description}: {strategy.name} click succeeded for {target}")
            return Result.success(strategy.name, f"Clicked ({strategy.name}): {target}")

        logger.error(
            f"{self.description}: all click strategies ({', '.join(self.strategy_names)}) "
            f"failed for {target}"
        )
        return Result.from_exception(
            f"{self.description} failed for {target}",
            last_error
        )

    @property
    def strategy_names(self) -> List[str]:
        """Names of the strategies in execution order."""
        return [strategy.name for strategy in self.strategies]
