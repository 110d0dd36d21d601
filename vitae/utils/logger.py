"""
Build session logging.

Each build run gets its own directory under the logs dir holding one log
file. The file receives every message; the console only what the user asked
to see. Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from vitae import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

SESSION_RULE = "-" * 72

LEVEL_COLORS = {
    "SUCCESS": "<green>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, Any]] = None,
    level_colors: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output to a session log file and the console.

    Any previously configured sinks are removed, so calling this twice in
    one process starts a fresh session.

    Args:
        context_name: Log file stem (e.g., "build" gives build.log)
        log_dir: Session directory, created if needed
        extra_provenance: Key-value pairs added to the session header
        level_colors: Console colors overriding LEVEL_COLORS
        console_level: Minimum level echoed to stdout; the file always gets DEBUG

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_session_header(extra_provenance)
    return log_file


def log_session_header(extra: Optional[Dict[str, Any]] = None) -> None:
    """Write the invocation details that make a log file reproducible."""
    logger.debug(SESSION_RULE)
    logger.debug(f"vitae {__version__} (Python {sys.version.split()[0]})")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    for key, value in (extra or {}).items():
        logger.debug(f"{key}: {value}")
    logger.debug(SESSION_RULE)
