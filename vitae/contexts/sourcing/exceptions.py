"""Custom exceptions for the sourcing context."""

from pathlib import Path
from typing import Optional


class DiscoveryError(OSError):
    """Raised when the source tree cannot be walked."""


class NoRecordsError(RuntimeError):
    """Raised when discovery finds nothing to build."""


class RecordLoadError(ValueError):
    """
    Exception raised when a single resume record cannot be loaded.

    Attributes:
        message: Error description
        record_path: The offending record file
        original_error: The underlying I/O or JSON error, if any
    """

    def __init__(
        self,
        message: str,
        record_path: Path,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.record_path = record_path
        self.original_error = original_error

        parts = [f"{message}: {record_path}"]
        if original_error:
            parts.append(f"({original_error})")

        super().__init__(" ".join(parts))
