"""
Locale-aware formatting helpers exposed to the resume template.

The template calls them as formatDate(...) and removeProtocol(...). Each
render binds formatDate to the record's LocaleContext, so the helpers never
look anything up in the template's own namespace.

Examples:
    >>> format_date("2025-01-15", LocaleContext("en"))
    'Jan 2025'
    >>> format_date("2025-01-15", LocaleContext("es"))
    'Ene 2025'
    >>> format_date(None, LocaleContext("es", {"present": "Actualidad"}))
    'Actualidad'
    >>> remove_protocol("https://github.com/someone")
    'github.com/someone'
"""

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Mapping, Optional

from babel.dates import format_date as babel_format_date

from vitae.contexts.templating.logger import _log_debug

# Record locale code -> Babel locale
LOCALE_TABLE = {
    "en": "en_US",
    "es": "es_ES",
    "fr": "fr_FR",
    "de": "de_DE",
    "it": "it_IT",
    "pt": "pt_PT",
}
DEFAULT_LOCALE = "en_US"

# Languages whose month abbreviations are printed without trailing period, capitalized
CAPITALIZED_MONTH_LANGUAGES = {"es", "fr", "it", "pt"}

PRESENT_LABEL = "Present"

DATE_PATTERN = re.compile(r"^\s*(\d{4})(?:-(\d{1,2}))?(?:-(\d{1,2}))?")
PROTOCOL_PATTERN = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:)?//")


@dataclass(frozen=True)
class LocaleContext:
    """
    Locale information for one render.

    Attributes:
        lang: Record locale code (e.g. "en", "es")
        labels: Label overrides taken from the record's "labels" mapping
    """

    lang: str
    labels: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def for_record(cls, record: Mapping[str, Any], lang: str) -> "LocaleContext":
        labels = record.get("labels")
        return cls(lang=lang, labels=labels if isinstance(labels, Mapping) else {})

    @property
    def language(self) -> str:
        """Base language code, e.g. "es" for "es-MX"."""
        return (self.lang or "").replace("_", "-").split("-")[0].lower()

    @property
    def babel_locale(self) -> str:
        return LOCALE_TABLE.get(self.language, DEFAULT_LOCALE)


def parse_date(date_string: str) -> Optional[date]:
    """
    Parse YYYY, YYYY-MM or YYYY-MM-DD (anything after the date part is ignored).

    Returns:
        date, or None when the string is not a date
    """
    match = DATE_PATTERN.match(date_string)
    if not match:
        return None

    year, month, day = match.groups()
    try:
        return date(int(year), int(month or 1), int(day or 1))
    except ValueError:
        return None


def format_date(date_string: Any, locale_context: LocaleContext) -> str:
    """
    Format a record date as "<abbreviated month> <year>" for the record's locale.

    An empty or missing date means an ongoing entry and yields the record's
    labels.present override, or "Present". Strings that are not dates are
    returned unchanged.

    Args:
        date_string: Date from the record (e.g. "2025-01-15"), possibly empty
        locale_context: Locale and labels of the record being rendered

    Returns:
        Formatted date with exactly one space between month and year
    """
    if not date_string:
        return locale_context.labels.get("present") or PRESENT_LABEL

    parsed = parse_date(str(date_string))
    if parsed is None:
        _log_debug(f"Not a date, leaving as is: {date_string!r}")
        return str(date_string)

    # Stand-alone abbreviation: the month is shown next to the year, not inside a full date
    month = babel_format_date(parsed, format="LLL", locale=locale_context.babel_locale).strip()
    if locale_context.language in CAPITALIZED_MONTH_LANGUAGES:
        month = month.rstrip(".")
        month = month[:1].upper() + month[1:]

    return f"{month} {parsed.year:04d}"


def format_generated_at(lang: str, day: Optional[date] = None) -> str:
    """Build date in the record's locale (medium format, e.g. "Jan 15, 2025")."""
    locale = LocaleContext(lang).babel_locale
    return babel_format_date(day or date.today(), format="medium", locale=locale)


def remove_protocol(url: Any) -> str:
    """Strip a leading "scheme://" or "//" from a URL; other strings pass through."""
    if not url:
        return ""
    return PROTOCOL_PATTERN.sub("", str(url), count=1)


def template_helpers(locale_context: LocaleContext) -> Dict[str, Any]:
    """Helpers for one render, keyed by the names the template uses."""

    def format_date_helper(date_string: Any = None) -> str:
        return format_date(date_string, locale_context)

    return {
        "formatDate": format_date_helper,
        "removeProtocol": remove_protocol,
    }
