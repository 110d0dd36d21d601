"""
PDF printing through headless Chromium (Playwright).

One browser is launched per batch and shared by every record:

    with PdfPrinter() as printer:
        printer.print_pdf(html, Path("dist/sergio-backend-en.pdf"))

The browser is closed on every exit path, including exceptions raised
inside the with-block.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from playwright.sync_api import Browser, Error as PlaywrightError, Playwright, sync_playwright

from vitae.contexts.rendering.logger import _log_debug
from vitae.contexts.templating.paths import ensure_parent_dir

# Fixed print configuration: A4, no margins, backgrounds on, slight
# downscale so edge content is not clipped, tagged (accessible) PDF
PDF_OPTIONS: Dict[str, Any] = {
    "format": "A4",
    "margin": {"top": "0", "right": "0", "bottom": "0", "left": "0"},
    "print_background": True,
    "scale": 0.98,
    "tagged": True,
}


class PdfPrintError(RuntimeError):
    """Raised when the print engine fails to produce a PDF."""


class PdfPrinter:
    """Context manager owning a headless Chromium for the duration of a batch."""

    def __init__(self, launch_options: Optional[Dict[str, Any]] = None):
        self.launch_options = {"headless": True, **(launch_options or {})}
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    def __enter__(self) -> "PdfPrinter":
        self.open()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def open(self) -> None:
        """
        Start Playwright and launch the browser.

        Raises:
            PdfPrintError: If Playwright or Chromium cannot be started
        """
        try:
            self._playwright = sync_playwright().start()
        except PlaywrightError as e:
            raise PdfPrintError(f"Could not start Playwright: {e}") from e

        try:
            self._browser = self._playwright.chromium.launch(**self.launch_options)
        except PlaywrightError as e:
            self._playwright.stop()
            self._playwright = None
            raise PdfPrintError(f"Could not launch Chromium: {e}") from e
        _log_debug("Launched headless Chromium")

    def close(self) -> None:
        if self._browser is not None:
            self._browser.close()
            self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
            _log_debug("Closed headless Chromium")

    @property
    def is_open(self) -> bool:
        return self._browser is not None

    def print_pdf(self, document: str, output_path: Path) -> Path:
        """
        Print an HTML document to a PDF file.

        Args:
            document: Full HTML document
            output_path: Destination .pdf path (parents are created)

        Returns:
            output_path

        Raises:
            PdfPrintError: If the page cannot be loaded or printed
        """
        if self._browser is None:
            raise PdfPrintError("PdfPrinter is not open; use it as a context manager")

        ensure_parent_dir(output_path)
        page = self._browser.new_page()
        try:
            page.set_content(document, wait_until="networkidle")
            page.pdf(path=str(output_path), **PDF_OPTIONS)
        except PlaywrightError as e:
            raise PdfPrintError(f"Could not print {output_path}: {e}") from e
        finally:
            page.close()

        return output_path
