"""
Chrome session settings.

``BrowserConfig`` describes the session ``Browser`` starts. Interaction
timing (element waits, click retries) lives in ``WaitConfig``; this class
only covers what Chrome itself is started with.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import ClassVar, Optional, Tuple


@dataclass
class BrowserConfig:
    """
    Settings for a Chrome session.

    Attributes:
        headless: Start Chrome without a window
        window_size: Viewport (width, height); page layouts below the
                     minimum collapse into mobile menus
        page_load_timeout: Seconds ``driver.get`` may block
        implicit_wait: Implicit wait in seconds, 0 so explicit waits in
                       the page helpers are the only waits
        disable_automation_flags: Hide the "controlled by automated
                                  software" flags
        user_agent: Custom user agent string
        language: Browser UI/accept language (e.g. "tr-TR")
        download_dir: Directory Chrome saves downloads into

    Examples:
        >>> BrowserConfig(language="tr-TR")
        >>> BrowserConfig.for_ci()
    """

    MIN_WINDOW_SIZE: ClassVar[Tuple[int, int]] = (800, 600)

    headless: bool = False
    window_size: Tuple[int, int] = (1920, 1080)
    page_load_timeout: int = 30
    implicit_wait: float = 0
    disable_automation_flags: bool = True
    user_agent: Optional[str] = None
    language: Optional[str] = None
    download_dir: Optional[str] = None

    def __post_init__(self):
        errors = []

        if len(self.window_size) != 2:
            errors.append(f"window_size must be (width, height), got: {self.window_size}")
        else:
            min_width, min_height = self.MIN_WINDOW_SIZE
            width, height = self.window_size
            if width < min_width or height < min_height:
                errors.append(
                    f"window_size must be at least {min_width}x{min_height}, "
                    f"got: {self.window_size}"
                )

        if self.page_load_timeout <= 0:
            errors.append(f"page_load_timeout must be positive, got: {self.page_load_timeout}")

        if self.implicit_wait < 0:
            errors.append(f"implicit_wait must not be negative, got: {self.implicit_wait}")

        if self.download_dir and Path(self.download_dir).is_file():
            errors.append(f"download_dir must be a directory, got: {self.download_dir}")

        if errors:
            raise ValueError("Invalid browser configuration:\n  - " + "\n  - ".join(errors))

    @classmethod
    def for_testing(cls) -> 'BrowserConfig':
        """Headless session with a short page load timeout."""
        return cls(headless=True, page_load_timeout=10)

    @classmethod
    def for_ci(cls) -> 'BrowserConfig':
        """Headless session that tolerates slow shared runners."""
        return cls(headless=True, page_load_timeout=60)

    @classmethod
    def from_config(cls, config) -> 'BrowserConfig':
        """
        Build session settings from the environment backed Config.

        Args:
            config: resilient_pages.utils.config.Config instance
        """
        return cls(
            headless=config.browser_headless,
            page_load_timeout=config.browser_timeout
        )

    def to_dict(self) -> dict:
        return asdict(self)
