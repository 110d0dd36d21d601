"""
Persona context logger.

Provides logging interface for the persona context with automatic [persona] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[persona]"


def _log_info(message: str) -> None:
    """Log info message with [persona] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [persona] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [persona] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
