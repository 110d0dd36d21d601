"""
Integration tests for PDF printing - launches a real headless Chromium.

Skipped when Playwright's browser binaries are not installed
(install with: playwright install chromium).
"""

import pytest

from vitae.contexts.rendering.printer import PdfPrinter


@pytest.fixture
def printer():
    try:
        pdf_printer = PdfPrinter()
        pdf_printer.open()
    except Exception as e:
        pytest.skip(f"Chromium not available for Playwright: {e}")
    yield pdf_printer
    pdf_printer.close()


@pytest.mark.integration
@pytest.mark.pdf
def test_print_pdf(printer, tmp_path):
    output_path = tmp_path / "dist" / "sergio-backend-en.pdf"

    printer.print_pdf("<html><body><h1>Sergio</h1></body></html>", output_path)

    assert output_path.exists()
    assert output_path.read_bytes().startswith(b"%PDF")


@pytest.mark.integration
@pytest.mark.pdf
def test_printer_reused_across_documents(printer, tmp_path):
    for name in ["a.pdf", "b.pdf"]:
        printer.print_pdf(f"<html><body>{name}</body></html>", tmp_path / name)

    assert printer.is_open
    assert (tmp_path / "a.pdf").exists() and (tmp_path / "b.pdf").exists()


@pytest.mark.integration
@pytest.mark.pdf
def test_context_manager_closes_on_error(tmp_path):
    try:
        pdf_printer = PdfPrinter()
        pdf_printer.open()
        pdf_printer.close()
    except Exception as e:
        pytest.skip(f"Chromium not available for Playwright: {e}")

    with pytest.raises(RuntimeError, match="boom"):
        with PdfPrinter() as pdf_printer:
            raise RuntimeError("boom")

    assert not pdf_printer.is_open
