"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class ThemeNotFoundError(FileNotFoundError):
    """Raised when neither the requested nor the default theme stylesheet can be read."""


class TemplateRenderError(Exception):
    """
    Exception raised when template expansion fails.

    Attributes:
        message: Error description
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_path:
            parts.append(f"Template: {template_path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))
