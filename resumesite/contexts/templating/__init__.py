"""
Templating Context

Responsibilities:
- Loads the résumé data document into structured data
- Owns the render/filter engine (language, tag filter, theme state)
- Renders section fragments from Jinja2 templates
- Writes rendered content into host page regions and builds static pages

Owns: Résumé data model, UI state, HTML generation
Never: Launches a browser or calls a text-generation API
"""

from resumesite.contexts.templating.engine import (
    EventDispatcher,
    HeadingMode,
    RenderOutput,
    ResumeEngine,
    apply_tag_selection,
    bind_controls,
    initialize_from_file,
)
from resumesite.contexts.templating.filter_state import FilterState, available_tags
from resumesite.contexts.templating.page_builder import build_page, build_site
from resumesite.contexts.templating.regions import fill_regions
from resumesite.contexts.templating.resume_data_structure import (
    LocalizedResume,
    ResumeDocument,
    load_resume_document,
)
from resumesite.contexts.templating.theme_resolver import resolve_theme

__all__ = [
    # Engine and controls
    "ResumeEngine",
    "RenderOutput",
    "HeadingMode",
    "EventDispatcher",
    "bind_controls",
    "apply_tag_selection",
    "initialize_from_file",
    # Filtering
    "FilterState",
    "available_tags",
    # Pages
    "build_page",
    "build_site",
    "fill_regions",
    # Data structures
    "ResumeDocument",
    "LocalizedResume",
    "load_resume_document",
    "resolve_theme",
]
