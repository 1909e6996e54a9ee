"""
Logging utilities with automatic masking of personal data.
Supports context-aware logging for library use vs command-line execution.
"""

import logging
import re
import os
from typing import Optional
from enum import Enum
from config.settings import settings


class LoggingContext(Enum):
    """Logging context modes for different execution scenarios."""
    STANDALONE = "standalone"  # Module run independently (full logging)
    QUIET = "quiet"            # Embedded in another application (errors only)
    SILENT = "silent"          # Test runs and batch jobs (minimal output)


# Global logging mode (default: check env var, else standalone)
_env_mode = os.getenv('LOG_MODE', 'standalone').lower()
try:
    _CURRENT_MODE = LoggingContext(_env_mode)
except ValueError:
    _CURRENT_MODE = LoggingContext.STANDALONE

# Console loggers that keep INFO level in quiet mode (command-line entry points)
CONSOLE_LOGGERS = {
    'run_toolkit',
}


def set_logging_mode(mode: LoggingContext):
    """
    Set the global logging mode.

    Args:
        mode: LoggingContext enum value
    """
    global _CURRENT_MODE
    _CURRENT_MODE = mode


def get_logging_mode() -> LoggingContext:
    """Get the current logging mode."""
    return _CURRENT_MODE


class SecureFormatter(logging.Formatter):
    """Custom formatter that masks mobile numbers and e-mail addresses."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.mobile_pattern = re.compile(r'(?<!\d)1[3-9]\d{9}(?!\d)')
        self.email_pattern = re.compile(r'\b([A-Za-z0-9._%+-]+)@([A-Za-z0-9.-]+\.[A-Za-z]{2,})\b')

    def format(self, record):
        message = super().format(record)

        def mask_mobile(match):
            return settings.mask_value(match.group(0))

        def mask_email(match):
            local = match.group(1)
            return f"{local[:1]}***@{match.group(2)}"

        masked_message = self.mobile_pattern.sub(mask_mobile, message)
        masked_message = self.email_pattern.sub(mask_email, masked_message)
        return masked_message


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Setup a logger with secure formatting and context-aware levels.

    Args:
        name: Logger name
        level: Logging level (default: INFO, may be overridden by mode)
        log_file: Optional file path for file logging

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    effective_level = level
    current_mode = get_logging_mode()

    if current_mode == LoggingContext.QUIET:
        if name not in CONSOLE_LOGGERS:
            effective_level = logging.ERROR
    elif current_mode == LoggingContext.SILENT:
        effective_level = logging.CRITICAL

    logger.setLevel(effective_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(effective_level)

    formatter = SecureFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(effective_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Default logger for the application
default_logger = setup_logger('bean_commons', level=logging.INFO)
