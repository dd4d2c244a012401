"""
Integration tests for static page building - renders the fixture document
through the bundled host page and writes it to disk.
"""

import shutil
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from resumesite.contexts.templating.engine import ResumeEngine
from resumesite.contexts.templating.page_builder import build_page, build_site, page_file_name
from resumesite.contexts.templating.registries import TemplateRegistry
from resumesite.contexts.templating.resume_data_structure import load_resume_document

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"
SAMPLE_DATA_PATH = Path(__file__).parent.parent.parent / "docs" / "data.json"


@pytest.fixture
def document():
    return load_resume_document(FIXTURES_PATH / "resume_data.json")


@pytest.fixture
def first_about_registry(tmp_path):
    """Bundled templates with an about section that needs at least one entry."""
    templates = tmp_path / "templates"
    shutil.copytree(TemplateRegistry().templates_path, templates)
    (templates / "sections" / "about.html.jinja").write_text(
        "<p>{{ entries[0].title }}</p>", encoding="utf-8"
    )
    return TemplateRegistry(templates)


def project_names(soup):
    region = soup.find(attrs={"data-section": "projects"})
    return [h3.get_text(" ", strip=True) for h3 in region.find_all("h3")]


@pytest.mark.integration
def test_page_file_name():
    assert page_file_name("en", "en") == "index.html"
    assert page_file_name("sv", "en") == "sv.html"


@pytest.mark.integration
def test_build_page_bundled_host(document):
    """The bundled host page receives every section and control."""
    engine = ResumeEngine(default_language="en")
    engine.initialize(document)

    soup = BeautifulSoup(build_page(engine), "html.parser")

    assert soup.title.get_text() == "Test Person"
    assert soup.find(attrs={"data-field": "name"}).get_text() == "Test Person"
    for section in ("experience", "education", "projects", "contact", "about", "filters"):
        assert soup.find(attrs={"data-section": section}).get_text(strip=True), section

    # Skills appear in both layout slots
    assert len(soup.find_all(attrs={"data-section": "skills"})) == 2

    tags = [b["data-tag"] for b in soup.find_all("button", attrs={"data-tag": True})]
    assert tags == ["All", "Go", "Rust", "Python"]

    links = {a["data-lang"]: a["href"] for a in soup.find_all("a", attrs={"data-lang": True})}
    assert links == {"en": "index.html", "sv": "sv.html"}


@pytest.mark.integration
def test_build_page_without_render_returns_none():
    assert build_page(ResumeEngine(default_language="en")) is None


@pytest.mark.integration
def test_build_site_writes_page_per_language(document, tmp_path):
    written = build_site(document, site_dir=tmp_path, default_language="en")

    assert written == [tmp_path / "index.html", tmp_path / "sv.html"]

    english = BeautifulSoup((tmp_path / "index.html").read_text(encoding="utf-8"), "html.parser")
    swedish = BeautifulSoup((tmp_path / "sv.html").read_text(encoding="utf-8"), "html.parser")

    assert english.html["lang"] == "en"
    assert swedish.html["lang"] == "sv"
    assert "active" in swedish.find(attrs={"data-lang": "sv"})["class"]
    assert project_names(swedish) == ["Gopher", "Krabba"]


@pytest.mark.integration
def test_build_site_reapplies_tags_per_language(document, tmp_path):
    """The tag selection survives the per-language filter reset."""
    build_site(document, site_dir=tmp_path, default_language="en", tags=["Go"], theme="dark")

    for page in ("index.html", "sv.html"):
        soup = BeautifulSoup((tmp_path / page).read_text(encoding="utf-8"), "html.parser")
        names = project_names(soup)

        assert "Gopher" in names
        assert all(name not in names for name in ("Crab", "Krabba", "Snake"))
        assert soup.html["data-theme"] == "dark"
        assert soup.find(attrs={"data-layout": "primary"}).has_attr("hidden")


@pytest.mark.integration
def test_build_site_with_custom_host(document, tmp_path):
    host = '<html><body><h1 data-field="name"></h1><ul data-section="projects"></ul></body></html>'

    build_site(document, site_dir=tmp_path, default_language="sv", host_html=host)

    assert sorted(p.name for p in tmp_path.iterdir()) == ["en.html", "index.html"]
    soup = BeautifulSoup((tmp_path / "index.html").read_text(encoding="utf-8"), "html.parser")
    assert soup.h1.get_text() == "Test Person"
    assert "Krabba" in soup.find(attrs={"data-section": "projects"}).get_text()


@pytest.mark.integration
def test_sample_data_document_builds(tmp_path):
    """The sample document shipped in docs/ renders without errors."""
    if not SAMPLE_DATA_PATH.exists():
        pytest.skip(f"Sample data not found: {SAMPLE_DATA_PATH}")

    written = build_site(load_resume_document(SAMPLE_DATA_PATH), site_dir=tmp_path)
    assert len(written) == 2


@pytest.mark.integration
def test_build_page_refuses_output_from_another_language(document, first_about_registry):
    """A failed render for the current language never yields the previous page."""
    engine = ResumeEngine(template_registry=first_about_registry, default_language="en")
    engine.initialize(document)
    assert build_page(engine) is not None

    engine.set_language("sv")

    assert engine.output.language == "en"
    assert build_page(engine) is None


@pytest.mark.integration
def test_build_site_skips_language_that_fails_to_render(document, tmp_path, first_about_registry):
    """sv has no about entries, so its page is skipped rather than written with en content."""
    site_dir = tmp_path / "site"

    written = build_site(
        document,
        site_dir=site_dir,
        default_language="en",
        template_registry=first_about_registry,
    )

    assert written == [site_dir / "index.html"]
    assert not (site_dir / "sv.html").exists()
    assert "Hobbies" in (site_dir / "index.html").read_text(encoding="utf-8")
