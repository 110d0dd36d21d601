"""
Templating Context

Responsibilities:
- Resolves theme stylesheets (with fallback to the default theme)
- Loads and caches the Jinja2 resume template
- Provides locale-aware helpers callable from templates (formatDate, removeProtocol)
- Derives locale/role from a record's location and its output path

Owns: Themes, template loading, locale formatting, output naming
Never: Reads or modifies resume content beyond the labels it formats with
"""

from vitae.contexts.templating.exceptions import TemplateRenderError, ThemeNotFoundError
from vitae.contexts.templating.locale_formatter import (
    LocaleContext,
    format_date,
    format_generated_at,
    remove_protocol,
)
from vitae.contexts.templating.paths import (
    RecordLocale,
    ensure_parent_dir,
    resolve_output_filename,
    resolve_output_path,
    resolve_record_locale,
)
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.themes import Theme, load_theme, resolve_theme

__all__ = [
    "TemplateRenderError",
    "ThemeNotFoundError",
    "LocaleContext",
    "format_date",
    "format_generated_at",
    "remove_protocol",
    "RecordLocale",
    "ensure_parent_dir",
    "resolve_output_filename",
    "resolve_output_path",
    "resolve_record_locale",
    "TemplateRegistry",
    "Theme",
    "load_theme",
    "resolve_theme",
]
