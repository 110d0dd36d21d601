"""
Build settings for vitae.

Every conventional location the build touches (source tree, distribution
root, template, themes, persona config, overrides, logs) lives on a single
BuildSettings object. Values come from environment variables (optionally
provided through a .env file) and fall back to the project conventions:

    PROJECT_ROOT           .                           (base for relative paths)
    VITAE_SRC_DIR          src
    VITAE_DIST_DIR         dist
    VITAE_TEMPLATE_PATH    templates/resume.html.jinja
    VITAE_THEMES_DIR       themes
    VITAE_PERSONA_CONFIG   config/persona.config.json
    VITAE_OVERRIDES_DIR    config/overrides
    VITAE_LOGS_DIR         outs/logs
    VITAE_DEFAULT_THEME    modern
    VITAE_OUTPUT_FORMAT    pdf   ("pdf" or "html")
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

OUTPUT_FORMATS = ("pdf", "html")
RECORD_FILENAME = "resume.json"


@dataclass(frozen=True)
class BuildSettings:
    """
    Resolved paths and defaults for one build.

    Attributes:
        project_root: Base directory for every relative path below
        src_dir: Root of the resume record tree
        dist_dir: Root under which all output artifacts are written
        template_path: Jinja2 template used for every record
        themes_dir: Directory holding <theme>.css stylesheets
        persona_config_path: Persona configuration document
        overrides_dir: Directory holding <personaId>.json override documents
        logs_dir: Directory for build session logs
        default_theme: Theme used when none is requested or the requested one is missing
        output_format: "pdf" or "html"
        record_filename: Exact filename that marks a resume record
    """

    project_root: Path
    src_dir: Path
    dist_dir: Path
    template_path: Path
    themes_dir: Path
    persona_config_path: Path
    overrides_dir: Path
    logs_dir: Path
    default_theme: str = "modern"
    output_format: str = "pdf"
    record_filename: str = RECORD_FILENAME

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output format '{self.output_format}'. Expected one of: {OUTPUT_FORMATS}"
            )

    @classmethod
    def for_root(cls, project_root: Path, **overrides) -> "BuildSettings":
        """Settings using the conventional layout under project_root."""
        root = Path(project_root)
        settings = cls(
            project_root=root,
            src_dir=root / "src",
            dist_dir=root / "dist",
            template_path=root / "templates" / "resume.html.jinja",
            themes_dir=root / "themes",
            persona_config_path=root / "config" / "persona.config.json",
            overrides_dir=root / "config" / "overrides",
            logs_dir=root / "outs" / "logs",
        )
        return replace(settings, **overrides) if overrides else settings

    def with_output_format(self, output_format: Optional[str]) -> "BuildSettings":
        """Copy of these settings with a different output format (None keeps the current one)."""
        if output_format is None:
            return self
        return replace(self, output_format=output_format.lower())


def _resolve(root: Path, value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else root / path


def load_settings(env_file: Optional[Path] = None) -> BuildSettings:
    """
    Load build settings from the environment.

    Args:
        env_file: Optional explicit .env file (default: search from cwd upwards)

    Returns:
        BuildSettings with every path resolved against PROJECT_ROOT
    """
    load_dotenv(env_file)

    root = Path(os.getenv("PROJECT_ROOT", ".")).resolve()

    return BuildSettings(
        project_root=root,
        src_dir=_resolve(root, os.getenv("VITAE_SRC_DIR", "src")),
        dist_dir=_resolve(root, os.getenv("VITAE_DIST_DIR", "dist")),
        template_path=_resolve(root, os.getenv("VITAE_TEMPLATE_PATH", "templates/resume.html.jinja")),
        themes_dir=_resolve(root, os.getenv("VITAE_THEMES_DIR", "themes")),
        persona_config_path=_resolve(
            root, os.getenv("VITAE_PERSONA_CONFIG", "config/persona.config.json")
        ),
        overrides_dir=_resolve(root, os.getenv("VITAE_OVERRIDES_DIR", "config/overrides")),
        logs_dir=_resolve(root, os.getenv("VITAE_LOGS_DIR", "outs/logs")),
        default_theme=os.getenv("VITAE_DEFAULT_THEME", "modern"),
        output_format=os.getenv("VITAE_OUTPUT_FORMAT", "pdf").lower(),
    )
