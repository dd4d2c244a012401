"""
Page Builder

Turns engine output into complete HTML pages: either the bundled host page
(structure/page.html.jinja) or a caller-supplied host page with data-* regions.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from dotenv import load_dotenv
from jinja2 import TemplateError

from resumesite.contexts.templating.defaults import DEFAULT_LANGUAGE
from resumesite.contexts.templating.engine import (
    RenderOutput,
    ResumeEngine,
    apply_tag_selection,
    bind_controls,
)
from resumesite.contexts.templating.exceptions import TemplateRenderError
from resumesite.contexts.templating.logger import _log_warning, log_page_written
from resumesite.contexts.templating.regions import fill_regions
from resumesite.contexts.templating.registries import TemplateRegistry
from resumesite.contexts.templating.resume_data_structure import ResumeDocument

load_dotenv()
SITE_PATH = Path(os.getenv("SITE_PATH", "docs"))

PAGE_TEMPLATE = "structure/page.html.jinja"
BASE_STYLESHEET = "resume.css"


def page_file_name(language: str, default_language: str = DEFAULT_LANGUAGE) -> str:
    """index.html for the default language, <code>.html for the others."""
    return "index.html" if language == default_language else f"{language}.html"


def render_host_page(
    registry: TemplateRegistry,
    output: RenderOutput,
    default_language: str = DEFAULT_LANGUAGE,
) -> str:
    """
    Render the bundled host page skeleton (regions still empty).

    Args:
        registry: Template registry holding the page template and stylesheet
        output: Render output supplying language and theme controls
        default_language: Language served as index.html

    Returns:
        Host page HTML
    """
    page_links: Dict[str, str] = {
        control.code: page_file_name(control.code, default_language)
        for control in output.language_controls
    }
    try:
        template = registry.get_template(PAGE_TEMPLATE)
        return template.render(
            language=output.language,
            title=output.fields.get("name", ""),
            base_css=registry.get_static_source(BASE_STYLESHEET),
            language_controls=output.language_controls,
            page_links=page_links,
            themes=output.themes,
        )
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render host page",
            template_name="page",
            template_path=registry.templates_path / PAGE_TEMPLATE,
            original_error=e,
        ) from e


def build_page(engine: ResumeEngine, host_html: Optional[str] = None) -> Optional[str]:
    """
    Build the full page for the engine's current render.

    Args:
        engine: Initialized engine
        host_html: Optional host page; defaults to the bundled skeleton

    Returns:
        Page HTML, or None when the engine has no render for its current
        language and filter (a failed render leaves the previous output behind)
    """
    if not engine.is_current:
        return None
    output = engine.output

    if host_html is None:
        host_html = render_host_page(engine.template_registry, output, engine.default_language)

    return fill_regions(host_html, output)


def build_site(
    document: ResumeDocument,
    site_dir: Path = SITE_PATH,
    default_language: str = DEFAULT_LANGUAGE,
    tags: Iterable[str] = (),
    theme: Optional[str] = None,
    host_html: Optional[str] = None,
    template_registry: Optional[TemplateRegistry] = None,
) -> List[Path]:
    """
    Write one static page per language in the document.

    The tag selection is re-applied after each language switch, since
    switching language resets the filter.

    Args:
        document: Loaded résumé document
        site_dir: Output directory
        default_language: Language written as index.html
        tags: Tags to select on every page (empty = no filtering)
        theme: Theme name (None = the document's default)
        host_html: Optional host page used instead of the bundled skeleton
        template_registry: Optional registry (defaults to bundled templates)

    Returns:
        Paths of the pages written
    """
    site_dir = Path(site_dir)
    site_dir.mkdir(parents=True, exist_ok=True)

    engine = ResumeEngine(template_registry=template_registry, default_language=default_language)
    engine.initialize(document)
    controls = bind_controls(engine)

    if theme:
        controls.dispatch("theme", theme)

    tags = list(tags)
    written = []
    for language in document.language_codes:
        controls.dispatch("language", language)
        apply_tag_selection(controls, tags)

        html = build_page(engine, host_html)
        if html is None:
            _log_warning(f"Nothing rendered for '{language}', page skipped")
            continue

        page_path = site_dir / page_file_name(language, default_language)
        page_path.write_text(html, encoding="utf-8")
        log_page_written(language, page_path)
        written.append(page_path)

    return written
