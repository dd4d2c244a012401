"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from resumesite.contexts.templating.exceptions import TemplateRenderError
from resumesite.contexts.templating.registries import TemplateRegistry
from resumesite.contexts.templating.resume_data_structure import Project, Skill


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_section_template("projects")
    assert registry.is_cached("sections/projects.html.jinja")

    template2 = registry.get_section_template("projects")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("sections/nonexistent.html.jinja")


@pytest.mark.unit
def test_render_missing_section_raises_render_error():
    """render_section wraps Jinja2 errors with the section path."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError) as exc_info:
        registry.render_section("nonexistent", entries=[])

    assert exc_info.value.template_name == "nonexistent"
    assert exc_info.value.template_path == registry.get_section_path("nonexistent")


@pytest.mark.unit
def test_strict_undefined():
    """Missing context variables fail instead of rendering empty."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError):
        registry.render_section("projects")


@pytest.mark.unit
def test_get_section_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_section_path("skills")

    assert isinstance(path, Path)
    assert path.name == "skills.html.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry()

    registry.get_section_template("skills")
    assert len(registry._cache) == 1

    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_render_projects_section():
    """Project fragments carry tags, links and optional tech."""
    registry = TemplateRegistry()
    html = registry.render_section(
        "projects",
        entries=[
            Project(name="Crab", period="2022", description="Rust CLI", tech="Rust", tags=("Rust",)),
            Project(name="Snake", period="2021", description="Tool", url="https://example.com"),
        ],
    )

    assert 'data-tags="Rust"' in html
    assert "2022 | Rust" in html
    assert 'href="https://example.com"' in html
    assert html.index("Crab") < html.index("Snake")


@pytest.mark.unit
def test_inline_html_is_not_escaped():
    """Author HTML in descriptions reaches the page unchanged."""
    registry = TemplateRegistry()
    html = registry.render_section(
        "projects", entries=[Project(name="X", description="Uses <strong>Go</strong>")]
    )
    assert "<strong>Go</strong>" in html


@pytest.mark.unit
def test_render_skills_section():
    registry = TemplateRegistry()
    html = registry.render_section(
        "skills", entries=[Skill(name="Languages", level="Advanced", tags=("Go", "Rust"))]
    )

    assert "Languages" in html
    assert "Advanced" in html
    assert html.index(">Go<") < html.index(">Rust<")


@pytest.mark.unit
def test_custom_templates_path(tmp_path):
    """A custom template directory overrides the bundled templates."""
    sections = tmp_path / "sections"
    sections.mkdir()
    (sections / "about.html.jinja").write_text("{{ entries | length }} items")

    registry = TemplateRegistry(templates_path=tmp_path)
    assert registry.render_section("about", entries=[1, 2]) == "2 items"


@pytest.mark.unit
def test_get_static_source():
    registry = TemplateRegistry()
    css = registry.get_static_source("resume.css")
    assert "--color-gray-700" in css
