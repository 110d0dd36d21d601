"""
Resume document rendering.

Composes a record, stylesheet, locale and build metadata into a render
context, expands the Jinja2 template with it, and writes HTML output.
PDF output goes through vitae.contexts.rendering.printer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from jinja2 import Template, TemplateError

from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.locale_formatter import LocaleContext, template_helpers
from vitae.contexts.templating.paths import ensure_parent_dir


@dataclass(frozen=True)
class RenderMetadata:
    """Build metadata shown in the document footer."""

    generated_at: str
    theme: str


@dataclass
class RenderContext:
    """
    Everything the template sees for one record.

    Attributes:
        resume: Record after overrides
        css: Theme stylesheet text
        locale: Locale and labels of the record
        meta: Build metadata
    """

    resume: Dict[str, Any]
    css: str
    locale: LocaleContext
    meta: RenderMetadata

    def to_template_vars(self) -> Dict[str, Any]:
        """Template namespace: resume, css, lang, meta.generatedAt, meta.theme and helpers."""
        return {
            "resume": self.resume,
            "css": self.css,
            "lang": self.locale.lang,
            "meta": {
                "generatedAt": self.meta.generated_at,
                "theme": self.meta.theme,
            },
            **template_helpers(self.locale),
        }


def render_document(
    template: Template,
    resume: Dict[str, Any],
    css: str,
    locale: LocaleContext,
    meta: RenderMetadata,
) -> str:
    """
    Expand the template for one record.

    Raises:
        TemplateRenderError: If Jinja2 fails while rendering
    """
    context = RenderContext(resume=resume, css=css, locale=locale, meta=meta)
    try:
        return template.render(context.to_template_vars())
    except TemplateError as e:
        raise TemplateRenderError(
            "Template rendering failed", template_path=template.filename, original_error=e
        ) from e


def write_html(document: str, output_path: Path) -> Path:
    """Write a rendered document, creating parent directories as needed."""
    ensure_parent_dir(output_path)
    output_path.write_text(document, encoding="utf-8")
    return output_path
