"""
Unit tests for the render/filter engine.

Covers state transitions (language, tag, theme), derived output (heading
mode, layout slots, tag controls) and the no-op behaviour for missing data.
"""

from pathlib import Path

import pytest

from resumesite.contexts.templating.engine import (
    EventDispatcher,
    HeadingMode,
    ResumeEngine,
    apply_tag_selection,
    bind_controls,
    initialize_from_file,
)
from resumesite.contexts.templating.resume_data_structure import load_resume_document

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
DATA_PATH = FIXTURES_PATH / "resume_data.json"


@pytest.fixture
def document():
    return load_resume_document(DATA_PATH)


@pytest.fixture
def engine(document):
    engine = ResumeEngine(default_language="en")
    engine.initialize(document)
    return engine


def project_names(engine):
    return [p.name for p in engine.output.projects]


@pytest.mark.unit
def test_initialize_renders_default_language(engine):
    """Initialization renders the default language with no filtering."""
    output = engine.output

    assert output is not None
    assert output.language == "en"
    assert output.active_tags == frozenset({"All"})
    assert output.fields == {"name": "Test Person", "initials": "TP"}
    assert output.heading_mode is HeadingMode.DEFAULT
    assert output.heading_label == "Projects"


@pytest.mark.unit
def test_all_filter_shows_every_project_in_order(engine):
    """Under "All" the project list is the full list, order preserved."""
    assert project_names(engine) == ["Gopher", "Crab", "Snake", "Hybrid", "Untagged"]


@pytest.mark.unit
def test_go_rust_filter(engine):
    """{"Go","Rust"} keeps Go and Rust projects, including mixed Go/Python."""
    engine.toggle_tag("Go")
    engine.toggle_tag("Rust")

    assert project_names(engine) == ["Gopher", "Crab", "Hybrid"]


@pytest.mark.unit
def test_heading_mode_follows_filter(engine):
    """Heading stays relevant while any tag is active and reverts after."""
    engine.toggle_tag("Go")
    engine.toggle_tag("Rust")
    engine.toggle_tag("Rust")
    assert engine.filters == {"Go"}
    assert engine.output.heading_mode is HeadingMode.RELEVANT
    assert engine.output.heading_label == "Relevant Projects"

    engine.toggle_tag("Go")
    assert engine.filters == {"All"}
    assert engine.output.heading_mode is HeadingMode.DEFAULT
    assert engine.output.heading_label == "Projects"


@pytest.mark.unit
def test_relevant_heading_falls_back_to_projects_label(engine):
    """A language without a relevantProjects label reuses the projects label."""
    engine.set_language("sv")
    engine.toggle_tag("Go")

    assert engine.output.heading_mode is HeadingMode.RELEVANT
    assert engine.output.heading_label == "Projekt"


@pytest.mark.unit
def test_layout_slots_mutually_exclusive(engine):
    """Exactly one skills layout slot is visible."""
    assert engine.output.layout.primary
    assert not engine.output.layout.alternate

    engine.toggle_tag("Python")
    assert not engine.output.layout.primary
    assert engine.output.layout.alternate


@pytest.mark.unit
def test_tag_controls_mark_active_tags(engine):
    """One control per available tag, "All" first, active when selected."""
    engine.toggle_tag("Rust")

    controls = [(c.tag, c.active) for c in engine.output.tag_controls]
    assert controls == [("All", False), ("Go", False), ("Rust", True), ("Python", False)]
    assert 'data-tag="Rust" aria-pressed="true"' in engine.output.sections["filters"]


@pytest.mark.unit
@pytest.mark.parametrize("tags", [[], ["Go"], ["Go", "Rust"], ["Python", "Rust", "Go"]])
def test_set_language_resets_filter(engine, tags):
    """Switching language always resets the filter to {"All"}."""
    for tag in tags:
        engine.toggle_tag(tag)

    engine.set_language("sv")

    assert engine.filters == {"All"}
    assert engine.output.language == "sv"
    assert [p.name for p in engine.output.projects] == ["Gopher", "Krabba"]


@pytest.mark.unit
def test_render_is_idempotent(engine):
    """Two renders with unchanged state give identical output."""
    engine.toggle_tag("Go")
    first = engine.render()
    second = engine.render()

    assert first == second
    assert first.sections == second.sections


@pytest.mark.unit
def test_unknown_language_keeps_stale_output(engine):
    """A missing language is a silent no-op that leaves prior output in place."""
    before = engine.output

    result = engine.set_language("de")

    assert result is None
    assert engine.output is before
    assert engine.filters == {"All"}


@pytest.mark.unit
def test_missing_default_language_leaves_output_empty(document):
    """Initializing without data for the default language renders nothing."""
    engine = ResumeEngine(default_language="fi")

    assert engine.initialize(document) is None
    assert engine.output is None


@pytest.mark.unit
def test_render_before_initialize_is_noop():
    """render() without a document never raises."""
    engine = ResumeEngine(default_language="en")
    assert engine.render() is None
    assert engine.toggle_tag("Go") is None


@pytest.mark.unit
def test_initialize_from_missing_file(tmp_path):
    """A load failure is reported and leaves the engine uninitialized."""
    engine = ResumeEngine(default_language="en")

    assert initialize_from_file(engine, tmp_path / "missing.json") is False
    assert engine.document is None
    assert engine.output is None


@pytest.mark.unit
def test_initialize_from_file():
    """Loading from disk initializes and renders."""
    engine = ResumeEngine(default_language="en")

    assert initialize_from_file(engine, DATA_PATH) is True
    assert engine.output.language == "en"


@pytest.mark.unit
def test_theme_selection(engine):
    """Themes resolve from the config; unknown names fall back to the default."""
    assert engine.output.theme == "light"

    engine.set_theme("dark")
    assert engine.output.theme == "dark"
    assert engine.output.theme_variables["--color-page-background"] == "#121212"

    engine.set_theme("neon")
    assert engine.output.theme == "light"


@pytest.mark.unit
def test_theme_survives_language_switch(engine):
    """Only the tag filter is reset on a language switch."""
    engine.set_theme("dark")
    engine.set_language("sv")

    assert engine.output.theme == "dark"


@pytest.mark.unit
def test_unfiltered_sections_preserve_order(engine):
    """Experience and contact entries render in input order."""
    experience = engine.output.sections["experience"]
    assert experience.index("Acme") < experience.index("Initech")
    assert "Shipped things" in experience
    assert "<ul>" in experience

    contact = engine.output.sections["contact"]
    assert 'href="mailto:test@example.com"' in contact
    assert "Gothenburg" in contact


@pytest.mark.unit
def test_dispatcher_routes_controls(engine):
    """Bound controls drive the same operations as direct calls."""
    controls = bind_controls(engine)
    assert sorted(controls.handler_names) == ["language", "tag", "theme"]

    controls.dispatch("tag", "Go")
    assert engine.filters == {"Go"}

    controls.dispatch("language", "sv")
    assert engine.language == "sv"
    assert engine.filters == {"All"}


@pytest.mark.unit
def test_dispatch_unknown_handler_is_ignored():
    """Unknown events are logged and ignored."""
    dispatcher = EventDispatcher()
    assert dispatcher.dispatch("scroll", 10) is None


@pytest.mark.unit
def test_apply_tag_selection_starts_from_all(engine):
    """A selection resets to "All" first, then toggles each tag."""
    controls = bind_controls(engine)
    controls.dispatch("tag", "Python")

    apply_tag_selection(controls, ["Go", "Rust"])
    assert engine.filters == {"Go", "Rust"}

    apply_tag_selection(controls, [])
    assert engine.filters == {"Go", "Rust"}


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    [
        b"\xff\xfe not utf-8",
        b'{"en": {"projects": ["Gopher"]}}',
        b'{"en": {"labels": ["projects"]}}',
        b'{"en": {}, "config": "dark"}',
    ],
)
def test_initialize_from_bad_document(tmp_path, raw):
    """Undecodable or misshapen documents are reported, never raised."""
    data_path = tmp_path / "data.json"
    data_path.write_bytes(raw)
    engine = ResumeEngine(default_language="en")

    assert initialize_from_file(engine, data_path) is False
    assert engine.document is None
    assert engine.output is None


@pytest.mark.unit
def test_is_current_tracks_language_and_filter(engine):
    """Output left behind by a no-op render is not current."""
    assert engine.is_current

    engine.set_language("de")
    assert not engine.is_current

    engine.set_language("sv")
    engine.toggle_tag("Go")
    assert engine.is_current
