"""
Offer engine logger.

Provides the loguru setup used by the CLI and `[offers]`-prefixed helpers used by
the engine modules. Engine modules import the helpers from here, never configure
loguru themselves.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONTEXT_PREFIX = "[offers]"


def setup_logger(level: str = "INFO", log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Configure loguru sinks.

    Console output at `level`; when `log_dir` is given, everything down to DEBUG
    also goes to `log_dir/offers.log`.

    Args:
        level: Console log level
        log_dir: Directory for the file log, or None for console only

    Returns:
        Path to the log file, or None when no file sink was added
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if log_dir is None:
        return None

    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / "offers.log"
    logger.add(
        log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
    )
    return log_file


def _log_info(message: str) -> None:
    """Log info message with [offers] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [offers] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [offers] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [offers] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
