"""
Template Registry

Loads and caches the Jinja2 templates used to render resumes.
"""

from pathlib import Path
from typing import Dict

from jinja2 import (
    ChainableUndefined,
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
    select_autoescape,
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 resume templates.

    Templates live in a single directory (default: templates/) and use the
    standard Jinja2 delimiters. HTML output is autoescaped; stylesheets are
    inserted with the |safe filter by the template itself.
    """

    def __init__(self, templates_dir: Path):
        """
        Initialize the template registry.

        Args:
            templates_dir: Directory containing the template files
        """
        self.templates_dir = Path(templates_dir)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            # Records have no fixed schema; missing fields render empty
            undefined=ChainableUndefined,
            autoescape=select_autoescape(
                enabled_extensions=("html", "htm", "jinja"), default_for_string=True
            ),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, template_name: str) -> Template:
        """
        Get a template by file name, loading and caching it if necessary.

        Args:
            template_name: File name relative to templates_dir (e.g., 'resume.html.jinja')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if template_name in self._cache:
            return self._cache[template_name]

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template '{template_name}' not found at {self.get_template_path(template_name)}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_template_path(self, template_name: str) -> Path:
        return self.templates_dir / template_name

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        return template_name in self._cache
