"""
Logging utilities for UI test runs.

This module provides logging setup with:
- Configurable log levels and output destinations
- Log rotation for file handlers
- Sensitive data masking (passwords, tokens)
- Structured log format that test reports can pick up
"""

import logging
import re
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def mask_text(text: str) -> str:
    """
    Describe typed text without exposing it.

    Args:
        text: Text sent to an input field

    Returns:
        Placeholder mentioning only the length

    Examples:
        >>> mask_text("secret123")
        '<9 chars>'
    """
    return f"<{len(text)} chars>"


class SensitiveDataFilter(logging.Filter):
    """
    Logging filter that masks password and token values.

    Locators such as ``input[name='password']`` are left alone; only
    ``key=value`` / ``key: value`` shaped secrets are rewritten.
    """

    _PATTERNS = [
        (re.compile(r'(password|passwd|pwd)(["\']?\s*[:=]\s*["\']?)([^"\'\s,]+)', re.IGNORECASE),
         r'\1\2********'),
        (re.compile(r'(token|secret|api[_-]?key)(["\']?\s*[:=]\s*["\']?)([^"\'\s,]+)', re.IGNORECASE),
         r'\1\2********'),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Mask sensitive data in the record message.

        Returns:
            Always True (allows all records through after masking)
        """
        message = str(record.msg)
        for pattern, replacement in self._PATTERNS:
            message = pattern.sub(replacement, message)
        record.msg = message
        return True


def setup_logger(
    name: str = "resilient_pages",
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up and configure a logger instance.

    Module loggers in this package are children of ``resilient_pages``,
    so configuring that name once covers every interaction log line.

    Args:
        name: Logger name (default: "resilient_pages")
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file for file output

    Returns:
        Configured logger instance

    Examples:
        >>> logger = setup_logger()
        >>> logger.info("Suite started")

        >>> logger = setup_logger(
        ...     level=logging.DEBUG,
        ...     log_file="output/logs/ui-tests.log"
        ... )
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s:%(funcName)s:%(lineno)d %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    sensitive_filter = SensitiveDataFilter()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.addFilter(sensitive_filter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(sensitive_filter)
        logger.addHandler(file_handler)

    return logger


def setup_logger_from_config(config) -> logging.Logger:
    """
    Configure the package logger from a Config instance.

    Args:
        config: Config providing log_level and log_file
    """
    level = getattr(logging, config.log_level, logging.INFO)
    return setup_logger(level=level, log_file=config.log_file)
