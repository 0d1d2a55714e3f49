"""
Wait and retry timing for page interactions.

All durations are in seconds.
"""

from dataclasses import dataclass


@dataclass
class WaitConfig:
    """
    Timing policy shared by every wait and click retry of a page.

    Attributes:
        timeout: Default timeout for visibility/text/attribute waits
        clickable_timeout: Default timeout when waiting for clickability
        poll_interval: Delay between two evaluations of a wait condition
        click_retries: Native click attempts before the scripted fallback
        safe_click_delay: Pause between native attempts in safe_click
        force_click_delay: Pause between native attempts in force_click
        overlay_timeout: How long force_click waits for the blocking overlay
        scroll_offset: Default pixels kept above an element after scrolling

    Examples:
        >>> config = WaitConfig()
        >>> config = WaitConfig(timeout=5, poll_interval=0.1)
        >>> config = WaitConfig.for_testing()
    """

    timeout: float = 15.0
    clickable_timeout: float = 10.0
    poll_interval: float = 0.5
    click_retries: int = 3
    safe_click_delay: float = 0.3
    force_click_delay: float = 0.2
    overlay_timeout: float = 15.0
    scroll_offset: int = 150

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("timeout", "clickable_timeout", "poll_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(
                    f"{name} must be positive, got: {getattr(self, name)}"
                )

        if self.poll_interval > self.timeout:
            raise ValueError(
                f"poll_interval ({self.poll_interval}) must not exceed "
                f"timeout ({self.timeout})"
            )

        if self.click_retries < 1:
            raise ValueError(
                f"click_retries must be at least 1, got: {self.click_retries}"
            )

        for name in ("safe_click_delay", "force_click_delay", "overlay_timeout"):
            if getattr(self, name) < 0:
                raise ValueError(
                    f"{name} must not be negative, got: {getattr(self, name)}"
                )

    @classmethod
    def for_testing(cls) -> 'WaitConfig':
        """
        Create configuration with short waits for fast unit tests.

        Examples:
            >>> config = WaitConfig.for_testing()
            >>> assert config.timeout == 1.0
        """
        return cls(
            timeout=1.0,
            clickable_timeout=1.0,
            poll_interval=0.05,
            safe_click_delay=0.03,
            force_click_delay=0.02,
            overlay_timeout=1.0,
        )

    @classmethod
    def from_config(cls, config) -> 'WaitConfig':
        """
        Build timing from the environment backed Config.

        Args:
            config: resilient_pages.utils.config.Config instance
        """
        return cls(
            timeout=config.wait_timeout,
            clickable_timeout=config.clickable_timeout,
            poll_interval=config.poll_interval,
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            "timeout": self.timeout,
            "clickable_timeout": self.clickable_timeout,
            "poll_interval": self.poll_interval,
            "click_retries": self.click_retries,
            "safe_click_delay": self.safe_click_delay,
            "force_click_delay": self.force_click_delay,
            "overlay_timeout": self.overlay_timeout,
            "scroll_offset": self.scroll_offset,
        }
