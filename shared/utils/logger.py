"""
Structured logging configuration for the library.
"""

import logging
import sys
from typing import Any, Optional
from pathlib import Path

from .config import settings

# Below DEBUG; used for expected "no opinion" outcomes
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _level() -> int:
    if settings.LOG_LEVEL == "TRACE":
        return TRACE
    return getattr(logging, settings.LOG_LEVEL)


def setup_logger(name: str) -> logging.Logger:
    """
    Setup a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = _level()
        logger.setLevel(level)

        # Console handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)

        # Formatter
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        console_handler.setFormatter(formatter)

        logger.addHandler(console_handler)

        # File handler only when a log file is configured
        if settings.LOG_FILE:
            log_path = Path(settings.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


def log_trace(logger: logging.Logger, message: str, error: Optional[BaseException] = None) -> None:
    """
    Log at TRACE level, optionally attaching the exception that led here.

    Args:
        logger: Logger instance
        message: Message to log
        error: Exception that was handled, if any
    """
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, message, exc_info=error)


def log_function_call(logger: logging.Logger, func_name: str, **kwargs: Any) -> None:
    """
    Log a function call with its arguments.

    Args:
        logger: Logger instance
        func_name: Function name
        **kwargs: Function arguments to log
    """
    args_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
    logger.debug(f"Calling {func_name}({args_str})")


def log_error(logger: logging.Logger, error: Exception, context: str = "") -> None:
    """
    Log an error with context.

    Args:
        logger: Logger instance
        error: Exception that occurred
        context: Additional context about where the error occurred
    """
    if context:
        logger.error(f"{context}: {type(error).__name__}: {str(error)}")
    else:
        logger.error(f"{type(error).__name__}: {str(error)}")

    if settings.DEBUG:
        logger.exception("Full traceback:")
