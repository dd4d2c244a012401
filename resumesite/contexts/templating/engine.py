"""
Render/Filter Engine

Maps the loaded résumé document plus the selected language into the content
of every named output region, and owns the project tag filter.

All mutation goes through set_language(), toggle_tag() and set_theme(); each
triggers a full render. Nothing raises across this boundary: a missing
document or language makes render() a no-op that keeps the previous output.

Usage:
    engine = ResumeEngine()
    engine.initialize(load_resume_document(Path("docs/data.json")))

    controls = bind_controls(engine)
    controls.dispatch("tag", "Go")
    controls.dispatch("language", "sv")

    engine.output.sections["projects"]  # HTML for the projects region
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, FrozenSet, Optional, Tuple

from resumesite.contexts.templating.defaults import (
    ALL_TAG,
    DEFAULT_LANGUAGE,
    FILTERS_SECTION,
    PROJECTS_LABEL,
    RELEVANT_PROJECTS_LABEL,
    SECTION_KEYS,
)
from resumesite.contexts.templating.exceptions import ResumeLoadError, TemplateRenderError
from resumesite.contexts.templating.filter_state import FilterState, available_tags
from resumesite.contexts.templating.logger import (
    _log_error,
    _log_warning,
    log_missing_language,
    log_render,
)
from resumesite.contexts.templating.registries import TemplateRegistry
from resumesite.contexts.templating.resume_data_structure import (
    Project,
    ResumeDocument,
    load_resume_document,
)
from resumesite.contexts.templating.theme_resolver import available_themes, resolve_theme


class HeadingMode(str, Enum):
    """Which label heads the project list."""

    DEFAULT = "default"
    RELEVANT = "relevant"


@dataclass(frozen=True)
class TagControl:
    """One selectable tag button."""

    tag: str
    active: bool


@dataclass(frozen=True)
class LanguageControl:
    """One language switch button."""

    code: str
    active: bool


@dataclass(frozen=True)
class LayoutSlots:
    """
    Visibility of the two alternate skills layouts. Exactly one is visible.

    Attributes:
        primary: Two-column companion layout, shown when nothing is filtered
        alternate: One-column layout, shown while a tag filter is active
    """

    primary: bool
    alternate: bool

    @classmethod
    def for_filter(cls, filter_state: FilterState) -> "LayoutSlots":
        return cls(primary=filter_state.is_all, alternate=not filter_state.is_all)


@dataclass(frozen=True)
class RenderOutput:
    """
    Everything one render pass writes into the page.

    Attributes:
        language: Language rendered
        fields: Field key ("name", "initials") -> text
        labels: Label key -> display text
        sections: Section key -> HTML fragment (includes the "filters" controls)
        tag_controls: One control per available tag, "All" first
        language_controls: One control per language in the document
        active_tags: Filter in effect
        projects: Projects visible under the filter
        heading_mode: DEFAULT or RELEVANT
        heading_label: Text shown above the project list
        layout: Skills layout slot visibility
        theme: Resolved theme name
        theme_variables: CSS custom properties of the theme
        themes: Theme names offered in the theme control
    """

    language: str
    fields: Dict[str, str]
    labels: Dict[str, str]
    sections: Dict[str, str]
    tag_controls: Tuple[TagControl, ...]
    language_controls: Tuple[LanguageControl, ...]
    active_tags: FrozenSet[str]
    projects: Tuple[Project, ...]
    heading_mode: HeadingMode
    heading_label: str
    layout: LayoutSlots
    theme: str
    theme_variables: Dict[str, str] = field(default_factory=dict)
    themes: Tuple[str, ...] = ()


@dataclass
class RenderState:
    """Mutable UI state owned by the engine."""

    language: str = DEFAULT_LANGUAGE
    filters: FilterState = field(default_factory=FilterState)
    theme: Optional[str] = None


class ResumeEngine:
    """
    Render/filter engine for the résumé page.

    Attributes:
        document: Loaded document (None until initialize())
        state: Current language, tag filter and theme
        output: Result of the last successful render (None if none yet)
    """

    def __init__(
        self,
        template_registry: Optional[TemplateRegistry] = None,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.default_language = default_language
        self.document: Optional[ResumeDocument] = None
        self.state = RenderState(language=default_language)
        self.output: Optional[RenderOutput] = None

    @property
    def filters(self) -> FilterState:
        return self.state.filters

    @property
    def language(self) -> str:
        return self.state.language

    @property
    def is_current(self) -> bool:
        """True when output reflects the current language and tag filter."""
        return (
            self.output is not None
            and self.output.language == self.state.language
            and self.output.active_tags == self.state.filters.tags
        )

    def initialize(self, document: ResumeDocument) -> Optional[RenderOutput]:
        """Store the document, reset state to defaults and render."""
        self.document = document
        self.state = RenderState(language=self.default_language, theme=self.state.theme)
        return self.render()

    def set_language(self, code: str) -> Optional[RenderOutput]:
        """Switch language. The tag filter is always reset to "All"."""
        self.state.language = code
        self.state.filters.reset()
        return self.render()

    def toggle_tag(self, tag: str) -> Optional[RenderOutput]:
        """Toggle a project tag (or reset with "All") and render."""
        self.state.filters.toggle(tag)
        return self.render()

    def set_theme(self, theme_name: str) -> Optional[RenderOutput]:
        """Select a theme; unknown names fall back to the default theme."""
        self.state.theme = theme_name
        return self.render()

    def render(self) -> Optional[RenderOutput]:
        """
        Recompute all region content from the current state.

        Returns:
            The new RenderOutput, or None if there is nothing to render
            (no document, or no data for the current language). In that case
            self.output keeps the previous render.
        """
        if self.document is None:
            return None

        resume = self.document.get(self.state.language)
        if resume is None:
            log_missing_language(self.state.language, self.document.language_codes)
            return None

        filters = self.state.filters
        projects = filters.filter_projects(resume.projects)
        tag_controls = tuple(
            TagControl(tag=tag, active=tag in filters) for tag in available_tags(resume.projects)
        )

        heading_mode = HeadingMode.DEFAULT if filters.is_all else HeadingMode.RELEVANT
        heading_label = resume.labels.get(PROJECTS_LABEL, "")
        if heading_mode is HeadingMode.RELEVANT:
            heading_label = resume.labels.get(RELEVANT_PROJECTS_LABEL, heading_label)

        # Projects is the only section that sees the filter
        entries = {
            "experience": resume.experience,
            "education": resume.education,
            "projects": projects,
            "skills": resume.skills,
            "contact": resume.contact,
            "about": resume.about,
            FILTERS_SECTION: tag_controls,
        }
        render = self.template_registry.render_section
        try:
            sections = {
                key: render(key, entries=entries[key]) for key in SECTION_KEYS + (FILTERS_SECTION,)
            }
        except TemplateRenderError as e:
            _log_error(str(e))
            return None

        theme, theme_variables = resolve_theme(self.document.config, self.state.theme)

        self.output = RenderOutput(
            language=self.state.language,
            fields={"name": resume.name, "initials": resume.initials},
            labels=dict(resume.labels),
            sections=sections,
            tag_controls=tag_controls,
            language_controls=tuple(
                LanguageControl(code=code, active=code == self.state.language)
                for code in self.document.language_codes
            ),
            active_tags=filters.tags,
            projects=projects,
            heading_mode=heading_mode,
            heading_label=heading_label,
            layout=LayoutSlots.for_filter(filters),
            theme=theme,
            theme_variables=theme_variables,
            themes=tuple(available_themes(self.document.config)),
        )
        log_render(self.state.language, filters.tags, len(projects), len(resume.projects))
        return self.output


def initialize_from_file(engine: ResumeEngine, data_path: Path) -> bool:
    """
    Load the data document and initialize the engine with it.

    A load failure is logged and leaves the engine uninitialized, so every
    later render is a no-op.

    Returns:
        True if the engine was initialized
    """
    try:
        document = load_resume_document(data_path)
    except ResumeLoadError as e:
        _log_error(f"Error loading resume data: {e}")
        return False

    engine.initialize(document)
    return True


class EventDispatcher:
    """
    Synchronous dispatcher for named UI handlers.

    Stands in for button clicks and select changes: each dispatch runs the
    handler to completion before returning.
    """

    def __init__(self):
        self._handlers: Dict[str, Callable] = {}

    def register(self, name: str, handler: Callable) -> None:
        self._handlers[name] = handler

    def dispatch(self, name: str, *args):
        handler = self._handlers.get(name)
        if handler is None:
            _log_warning(f"No handler registered for '{name}', event ignored")
            return None
        return handler(*args)

    @property
    def handler_names(self):
        return list(self._handlers)


def bind_controls(engine: ResumeEngine) -> EventDispatcher:
    """Dispatcher wired to the engine's language, tag and theme operations."""
    dispatcher = EventDispatcher()
    dispatcher.register("language", engine.set_language)
    dispatcher.register("tag", engine.toggle_tag)
    dispatcher.register("theme", engine.set_theme)
    return dispatcher


def apply_tag_selection(dispatcher: EventDispatcher, tags) -> None:
    """
    Select tags from a known state: reset to "All", then toggle each in order.

    An empty selection leaves the filter untouched. A tag listed twice is
    toggled twice and ends up inactive.
    """
    if not tags:
        return
    dispatcher.dispatch("tag", ALL_TAG)
    for tag in tags:
        dispatcher.dispatch("tag", tag)
