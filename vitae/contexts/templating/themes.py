"""
Theme stylesheet resolution.

Themes are plain CSS files at <themes_dir>/<name>.css. An unknown theme
falls back to the default theme with a warning; a missing default theme is
fatal so a build never silently produces unstyled output.
"""

from dataclasses import dataclass
from pathlib import Path

from vitae.contexts.templating.exceptions import ThemeNotFoundError
from vitae.contexts.templating.logger import _log_debug, _log_info, _log_warning

THEME_EXTENSION = ".css"


@dataclass(frozen=True)
class Theme:
    """A resolved theme: the name actually used and its stylesheet."""

    name: str
    css: str


def get_theme_path(themes_dir: Path, theme_name: str) -> Path:
    return Path(themes_dir) / f"{theme_name}{THEME_EXTENSION}"


def _read_theme(themes_dir: Path, theme_name: str) -> Theme:
    theme_path = get_theme_path(themes_dir, theme_name)
    css = theme_path.read_text(encoding="utf-8")
    _log_debug(f"  Stylesheet: {theme_path}")
    return Theme(name=theme_name, css=css)


def resolve_theme(theme_name: str, themes_dir: Path, default_theme: str) -> Theme:
    """
    Resolve a theme by name, falling back to the default theme.

    Args:
        theme_name: Requested theme (e.g. "minimal")
        themes_dir: Directory holding <name>.css files
        default_theme: Theme used when theme_name cannot be read

    Returns:
        Theme carrying the effective name and stylesheet text

    Raises:
        ThemeNotFoundError: If the default theme cannot be read
    """
    if theme_name != default_theme:
        try:
            theme = _read_theme(themes_dir, theme_name)
        except (OSError, UnicodeDecodeError):
            _log_warning(
                f"Theme '{theme_name}' not found or unreadable. Falling back to default '{default_theme}'."
            )
        else:
            _log_info(f"Using theme: {theme.name}")
            return theme

    try:
        theme = _read_theme(themes_dir, default_theme)
    except (OSError, UnicodeDecodeError) as e:
        raise ThemeNotFoundError(
            f"Default theme '{default_theme}' not found or unreadable at {get_theme_path(themes_dir, default_theme)}"
        ) from e

    _log_info(f"Using theme: {theme.name}")
    return theme


def load_theme(theme_name: str, themes_dir: Path, default_theme: str) -> str:
    """Stylesheet text for theme_name (see resolve_theme for the fallback rules)."""
    return resolve_theme(theme_name, themes_dir, default_theme).css
