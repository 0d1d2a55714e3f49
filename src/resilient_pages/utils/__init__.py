"""Configuration and logging helpers."""

from .config import Config
from .logger import SensitiveDataFilter, mask_text, setup_logger, setup_logger_from_config

__all__ = [
    "Config",
    "SensitiveDataFilter",
    "mask_text",
    "setup_logger",
    "setup_logger_from_config",
]
