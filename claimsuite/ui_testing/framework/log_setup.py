"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the claims UI suite.

Call `init_logger()` once per process (pytest_configure does this); later calls
are no-ops unless `force=True`.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    format_str: Optional[str] = None,
    loader: Optional[ConfigLoader] = None,
    force: bool = False,
) -> None:
    """
    Initialize the global Loguru logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to `logging.level`.
        format_str: Log format string. Defaults to `logging.format`.
        loader: Configuration source (process singleton if None)
        force: Re-initialize even if already configured
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    loader = loader or ConfigLoader()
    log_level = (level or loader.get("logging.level", "INFO")).upper()
    log_format = format_str or loader.get("logging.format", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    log_file = loader.get("logging.file")
    if log_file:
        log_file = loader.resolve_path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=loader.get("logging.rotation", "10 MB"),
            retention=loader.get("logging.retention", "7 days"),
            compression="zip",
            enqueue=True,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


__all__ = ["init_logger", "DEFAULT_LOG_FORMAT"]
