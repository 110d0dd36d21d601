"""
Sourcing context logger.

Provides logging interface for the sourcing context with automatic [source] prefix.
"""

from pathlib import Path
from typing import List

from loguru import logger

CONTEXT_PREFIX = "[source]"


def _log_info(message: str) -> None:
    """Log info message with [source] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [source] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_discovery_result(src_dir: Path, records: List[Path]) -> None:
    """Log how many records were found and where."""
    _log_info(f"Found {len(records)} record(s) under {src_dir}")
    for record in records:
        _log_debug(f"  {record}")
