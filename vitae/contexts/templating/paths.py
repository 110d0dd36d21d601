"""
Locale/role extraction and output path resolution.

Source records follow the layout

    <src_dir>/.../<lang>/<role>/resume.json

Only the last two directory segments are read. Records nested less than two
directories deep carry no locale/role; their PDFs get a timestamped name.

Output naming uses the persona's outputNaming template, with tokens:
    {persona}  persona id
    {role}     role from the record path
    {lang}     locale from the record path
    {date}     build date, YYYY-MM-DD
Any other {token} is left untouched.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from vitae.contexts.persona.config_store import PersonaConfig
from vitae.contexts.persona.defaults import NAMING_TOKENS
from vitae.utils.settings import BuildSettings
from vitae.utils.timestamp import now, today

TOKEN_PATTERN = re.compile(r"\{(" + "|".join(NAMING_TOKENS) + r")\}")
HTML_FILENAME = "index.html"


@dataclass(frozen=True)
class RecordLocale:
    """Locale and role read from a record's location (None when unavailable)."""

    lang: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.lang is not None and self.role is not None


def resolve_record_locale(record_path: Path, src_dir: Path) -> RecordLocale:
    """
    Read locale and role from the record's directory relative to src_dir.

    Args:
        record_path: Discovered record file
        src_dir: Root of the source tree

    Returns:
        RecordLocale; both fields None if fewer than two directory segments

    Examples:
        resolve_record_locale(Path("src/en/backend/resume.json"), Path("src"))
        # RecordLocale(lang="en", role="backend")
    """
    relative = Path(record_path).relative_to(src_dir)
    segments = relative.parent.parts

    if len(segments) < 2:
        return RecordLocale()

    return RecordLocale(lang=segments[-2], role=segments[-1])


def resolve_output_filename(
    lang: str,
    role: str,
    persona: PersonaConfig,
    day: Optional[date] = None,
) -> str:
    """
    Substitute naming tokens in the persona's outputNaming template.

    Examples:
        # outputNaming "{persona}-{role}-{lang}.pdf", personaId "sergio"
        resolve_output_filename("es", "backend", persona)  # "sergio-backend-es.pdf"
    """
    values = {
        "persona": persona.persona_id,
        "role": role,
        "lang": lang,
        "date": today(day),
    }
    return TOKEN_PATTERN.sub(lambda match: values[match.group(1)], persona.output_naming)


def fallback_filename(moment: Optional[datetime] = None) -> str:
    """Name for PDFs whose record path carries no locale/role."""
    return f"resume_{now(moment)}.pdf"


def resolve_output_path(
    record_path: Path,
    settings: BuildSettings,
    persona: PersonaConfig,
    record_locale: Optional[RecordLocale] = None,
) -> Path:
    """
    Final output path for a record under the distribution root.

    HTML output mirrors the source tree (<dist>/<lang>/<role>/index.html);
    PDF output is <dist>/<resolved outputNaming>.
    """
    if settings.output_format == "html":
        relative_dir = Path(record_path).parent.relative_to(settings.src_dir)
        return settings.dist_dir / relative_dir / HTML_FILENAME

    if record_locale is None:
        record_locale = resolve_record_locale(record_path, settings.src_dir)

    if not record_locale.is_resolved:
        return settings.dist_dir / fallback_filename()

    return settings.dist_dir / resolve_output_filename(
        record_locale.lang, record_locale.role, persona
    )


def ensure_parent_dir(output_path: Path) -> Path:
    """Create every missing ancestor directory of output_path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return output_path
