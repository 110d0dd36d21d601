"""
Build orchestration.

Sequence for one build:
    1. Resolve the theme (fallback to default; missing default is fatal)
    2. Load the template (missing template is fatal)
    3. Discover records (missing source root or zero records is fatal)
    4. For each record, in discovery order:
         load -> apply overrides -> resolve locale/role and output path
         -> render -> write HTML or print PDF
       A failing record is logged and skipped; the batch carries on.

The PDF printer is only started once there is work to do, and is shared by
the whole batch.
"""

import time
from contextlib import nullcontext
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from jinja2 import Template

from vitae.contexts.persona.config_store import PersonaConfig
from vitae.contexts.persona.overrides import apply_overrides
from vitae.contexts.rendering.logger import (
    log_build_start,
    log_build_summary,
    log_output_collision,
    log_record_failure,
    log_record_success,
)
from vitae.contexts.rendering.printer import PdfPrinter
from vitae.contexts.rendering.renderer import RenderMetadata, render_document, write_html
from vitae.contexts.sourcing.discovery import find_records, load_record
from vitae.contexts.sourcing.exceptions import NoRecordsError
from vitae.contexts.templating.locale_formatter import LocaleContext, format_generated_at
from vitae.contexts.templating.paths import resolve_output_path, resolve_record_locale
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.themes import Theme, resolve_theme
from vitae.utils.settings import BuildSettings


@dataclass
class RecordFailure:
    """A record that could not be built, and why."""

    record_path: Path
    error: str


@dataclass
class BuildResult:
    """
    Outcome of a build.

    Attributes:
        theme: Theme actually used
        output_format: "pdf" or "html"
        generated: Output paths written, in discovery order
        failures: Records that were skipped
    """

    theme: str
    output_format: str
    generated: List[Path] = field(default_factory=list)
    failures: List[RecordFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def total(self) -> int:
        return len(self.generated) + len(self.failures)


def build_record(
    record_path: Path,
    settings: BuildSettings,
    persona: PersonaConfig,
    template: Template,
    theme: Theme,
    printer: Optional[PdfPrinter] = None,
) -> Path:
    """
    Build one output artifact from one record.

    Returns:
        Path of the written HTML or PDF file
    """
    record = load_record(record_path)
    record = apply_overrides(record, persona, settings.overrides_dir)

    record_locale = resolve_record_locale(record_path, settings.src_dir)
    lang = record_locale.lang or persona.default_language
    output_path = resolve_output_path(record_path, settings, persona, record_locale)

    document = render_document(
        template,
        resume=record,
        css=theme.css,
        locale=LocaleContext.for_record(record, lang),
        meta=RenderMetadata(generated_at=format_generated_at(lang), theme=theme.name),
    )

    if settings.output_format == "pdf":
        return printer.print_pdf(document, output_path)
    return write_html(document, output_path)


def build_resumes(
    settings: BuildSettings,
    persona: PersonaConfig,
    theme_name: Optional[str] = None,
    printer_factory: Callable[[], PdfPrinter] = PdfPrinter,
) -> BuildResult:
    """
    Build every record under settings.src_dir.

    Args:
        settings: Paths, default theme and output format
        persona: Persona configuration, loaded once by the caller
        theme_name: Requested theme (default: settings.default_theme)
        printer_factory: Creates the PDF printer context manager

    Returns:
        BuildResult listing generated files and skipped records

    Raises:
        ThemeNotFoundError: If the default theme is missing
        TemplateNotFound: If the template file is missing
        TemplateSyntaxError: If the template cannot be compiled
        DiscoveryError: If the source tree cannot be walked
        NoRecordsError: If no records were found
        PdfPrintError: If the PDF printer cannot be started
    """
    theme = resolve_theme(
        theme_name or settings.default_theme, settings.themes_dir, settings.default_theme
    )
    template = TemplateRegistry(settings.template_path.parent).get_template(
        settings.template_path.name
    )

    records = find_records(settings.src_dir, settings.record_filename)
    if not records:
        raise NoRecordsError(
            f"No {settings.record_filename} files found in {settings.src_dir}"
        )

    log_build_start(theme.name, settings.output_format, settings.src_dir, settings.dist_dir)
    result = BuildResult(theme=theme.name, output_format=settings.output_format)
    start_time = time.time()
    written: Dict[Path, Path] = {}

    printer_scope = printer_factory() if settings.output_format == "pdf" else nullcontext()
    with printer_scope as printer:
        for record_path in records:
            try:
                output_path = build_record(
                    record_path, settings, persona, template, theme, printer
                )
            except Exception as e:
                log_record_failure(record_path, e)
                result.failures.append(RecordFailure(record_path=record_path, error=str(e)))
            else:
                log_record_success(record_path, output_path)
                if output_path in written:
                    log_output_collision(output_path, record_path, written[output_path])
                written[output_path] = record_path
                result.generated.append(output_path)

    log_build_summary(result, settings.dist_dir, time.time() - start_time)
    return result
