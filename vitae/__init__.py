"""
vitae - persona-aware resume builder

Turns structured JSON resume records into themed HTML or print-ready PDF
documents, one variant per locale and role, from a single shared template.

Architecture:
- Sourcing Context: Discovery and loading of resume records
- Persona Context: Persona configuration and content overrides
- Templating Context: Themes, locale formatting, output naming, template loading
- Rendering Context: Template expansion, HTML/PDF output, batch orchestration
"""

__version__ = "0.1.0"
