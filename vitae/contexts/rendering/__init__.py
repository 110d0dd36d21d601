"""
Rendering Context

Responsibilities:
- Expands the resume template for each record
- Writes HTML output or prints PDFs through headless Chromium
- Orchestrates a whole build, isolating per-record failures

Owns: Template expansion, output artifacts, batch orchestration
Never: Modifies source records or persona configuration
"""

from vitae.contexts.rendering.builder import BuildResult, RecordFailure, build_record, build_resumes
from vitae.contexts.rendering.printer import PDF_OPTIONS, PdfPrinter, PdfPrintError
from vitae.contexts.rendering.renderer import RenderContext, RenderMetadata, render_document, write_html

__all__ = [
    "BuildResult",
    "RecordFailure",
    "build_record",
    "build_resumes",
    "PDF_OPTIONS",
    "PdfPrinter",
    "PdfPrintError",
    "RenderContext",
    "RenderMetadata",
    "render_document",
    "write_html",
]
