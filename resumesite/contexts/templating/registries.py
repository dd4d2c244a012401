"""
Templating Registries

Centralized registry for loading and caching the Jinja2 HTML templates.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)

from resumesite.contexts.templating.exceptions import TemplateRenderError

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("RESUME_TEMPLATES_PATH", Path(__file__).parent / "template")
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for HTML generation.

    Templates are stored under template/:
    - sections/{section_name}.html.jinja: one fragment per output region
    - structure/{name}.html.jinja: full pages (résumé host page, cover letter)
    - static/: stylesheets inlined into pages

    Autoescaping is off: résumé text is author-controlled and may carry
    inline HTML (links, emphasis) that must reach the page unchanged.
    """

    def __init__(self, templates_path: Optional[Path] = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base template directory. Defaults to
                           RESUME_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def get_template(self, template_name: str) -> Template:
        """
        Get a template by relative name, loading and caching it if necessary.

        Args:
            template_name: Path relative to the template directory
                           (e.g., 'sections/projects.html.jinja')

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
                f"Template '{template_name}' not found at {self.templates_path / template_name}"
            ) from e

        self._cache[template_name] = template
        return template

    def get_section_template(self, section_name: str) -> Template:
        """Get the fragment template for an output region (e.g., 'skills')."""
        return self.get_template(f"sections/{section_name}.html.jinja")

    def render_section(self, section_name: str, **context: Any) -> str:
        """
        Render a section fragment.

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        try:
            return self.get_section_template(section_name).render(**context).strip()
        except TemplateError as e:
            raise TemplateRenderError(
                "Failed to render section",
                template_name=section_name,
                template_path=self.get_section_path(section_name),
                original_error=e,
            ) from e

    def get_section_path(self, section_name: str) -> Path:
        return self.templates_path / "sections" / f"{section_name}.html.jinja"

    def get_static_source(self, file_name: str) -> str:
        """Raw contents of a file under static/ (e.g., 'resume.css')."""
        return (self.templates_path / "static" / file_name).read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, template_name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            template_name: Relative template name

        Returns:
            True if cached, False otherwise
        """
        return template_name in self._cache
