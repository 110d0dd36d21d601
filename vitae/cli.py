"""
Resume Build CLI

Renders every resume record under the source tree with the selected theme.

Examples:\n

    vitae-build                      # Default theme, default output format

    vitae-build minimal              # Use themes/minimal.css

    vitae-build modern --format html # Write dist/<lang>/<role>/index.html

    vitae-build --verbose            # Echo debug messages to the console
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from jinja2 import TemplateError
from typing_extensions import Annotated

from vitae.contexts.persona.config_store import PersonaConfigStore
from vitae.contexts.rendering.builder import build_resumes
from vitae.contexts.rendering.logger import _log_error, setup_rendering_logger
from vitae.contexts.rendering.printer import PdfPrintError
from vitae.contexts.sourcing.exceptions import DiscoveryError, NoRecordsError
from vitae.contexts.templating.exceptions import ThemeNotFoundError
from vitae.utils.settings import load_settings
from vitae.utils.timestamp import now


class OutputFormat(str, Enum):
    pdf = "pdf"
    html = "html"


def display_path(path: Path, root: Path) -> str:
    """Return path relative to the project root for cleaner display."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Build themed, localized resumes (HTML or PDF) from JSON records",
    add_completion=False,
)


@app.command()
def build(
    theme: Annotated[
        Optional[str],
        typer.Argument(help="Theme name (a file in themes/); defaults to the configured theme"),
    ] = None,
    output_format: Annotated[
        Optional[OutputFormat],
        typer.Option(
            "--format",
            "-f",
            help="Output format (default: VITAE_OUTPUT_FORMAT or pdf)",
            case_sensitive=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug messages on the console"),
    ] = False,
):
    """
    Build every resume record.

    Exits with code 1 when the build cannot start (invalid settings, missing
    source tree or default theme, missing or broken template, no browser,
    or no records) or when any record failed.
    """
    try:
        settings = load_settings().with_output_format(
            output_format.value if output_format else None
        )
    except ValueError as e:
        _log_error(f"Build aborted: {e}")
        raise typer.Exit(code=1)

    requested_theme = theme or settings.default_theme

    log_dir = settings.logs_dir / f"build_{now()}"
    log_file = setup_rendering_logger(
        log_dir, theme=requested_theme, output_format=settings.output_format, verbose=verbose
    )

    persona = PersonaConfigStore(settings.persona_config_path).get()

    try:
        result = build_resumes(settings, persona, theme_name=requested_theme)
    except (
        DiscoveryError,
        NoRecordsError,
        ThemeNotFoundError,
        TemplateError,
        PdfPrintError,
    ) as e:
        _log_error(f"Build aborted: {e}")
        raise typer.Exit(code=1)

    typer.echo("")
    if result.success:
        typer.secho(
            f"✓ Built {len(result.generated)} resume(s)", fg=typer.colors.GREEN, bold=True
        )
    else:
        typer.secho(
            f"✗ {len(result.failures)} of {result.total} resume(s) failed",
            fg=typer.colors.RED,
            bold=True,
        )
        for failure in result.failures:
            typer.secho(
                f"  - {display_path(failure.record_path, settings.project_root)}: {failure.error}",
                fg=typer.colors.RED,
            )

    for output_path in result.generated:
        typer.echo(f"  {display_path(output_path, settings.project_root)}")
    typer.echo(f"  Log: {display_path(log_file, settings.project_root)}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


if __name__ == "__main__":
    app()
