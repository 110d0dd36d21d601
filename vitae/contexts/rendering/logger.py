"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, theme: str, output_format: str, verbose: bool = False
) -> Path:
    """
    Setup logger for a build session.

    Args:
        log_dir: Directory for this build session
        theme: Requested theme name (for the provenance header)
        output_format: "pdf" or "html"
        verbose: Echo DEBUG messages to the console too

    Returns:
        Path to log file

    Example:
        from vitae.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, theme="modern", output_format="pdf")
        _log_info("Starting build...")
    """
    return _setup_logger(
        context_name="build",
        log_dir=log_dir,
        extra_provenance={"Theme": theme, "Output format": output_format},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_build_start(theme: str, output_format: str, src_dir: Path, dist_dir: Path) -> None:
    """Log start of a build with context."""
    _log_info(f"Starting {output_format.upper()} build (theme: {theme})")
    _log_debug(f"  Source: {src_dir}")
    _log_debug(f"  Destination: {dist_dir}")


def log_record_success(record_path: Path, output_path: Path) -> None:
    _log_success(f"Generated: {output_path}")
    _log_debug(f"  From: {record_path}")


def log_record_failure(record_path: Path, error: Exception) -> None:
    _log_error(f"Failed: {record_path}")
    _log_error(f"  {type(error).__name__}: {error}")


def log_output_collision(output_path: Path, record_path: Path, previous_record: Path) -> None:
    _log_warning(f"{output_path} from {record_path} overwrites the output of {previous_record}")


def log_build_summary(result, dist_dir: Path, elapsed_time: float) -> None:
    """
    Log the outcome of a build.

    Args:
        result: BuildResult from build_resumes()
        dist_dir: Distribution root
        elapsed_time: Time taken for the whole batch
    """
    summary = f"{len(result.generated)} succeeded, {len(result.failures)} failed ({elapsed_time:.2f}s)"
    if result.success:
        _log_success(f"Build complete! {summary}. Check the '{dist_dir}' folder.")
    else:
        _log_warning(f"Build finished with failures: {summary}")
        for failure in result.failures:
            _log_warning(f"  {failure.record_path}")
