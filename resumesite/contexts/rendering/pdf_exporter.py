"""
PDF Export Module

Prints résumé pages to PDF with headless Chromium (Playwright).
"""

import os
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from omegaconf import OmegaConf
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from resumesite.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    _log_info,
    _log_warning,
    log_export_result,
    log_export_start,
)
from resumesite.contexts.templating.defaults import DEFAULT_LANGUAGE, DEFAULT_THEME_NAME
from resumesite.contexts.templating.engine import (
    ResumeEngine,
    apply_tag_selection,
    bind_controls,
)
from resumesite.contexts.templating.exceptions import TemplateRenderError
from resumesite.contexts.templating.page_builder import build_page
from resumesite.contexts.templating.registries import TemplateRegistry
from resumesite.contexts.templating.resume_data_structure import ResumeDocument
from resumesite.utils.timestamp import today

load_dotenv()

EXPORTS_PATH = Path(os.getenv("EXPORTS_PATH", "exports"))
SITE_PATH = Path(os.getenv("SITE_PATH", "docs"))
FONTS_PATH = Path(os.getenv("FONTS_PATH", "docs/fonts"))
EXPORT_SETTINGS_PATH = Path(
    os.getenv("EXPORT_SETTINGS_PATH", Path(__file__).parent / "export_settings.yaml")
)


@dataclass
class ExportResult:
    """
    Result of a PDF export.

    Attributes:
        success: Whether the PDF was written
        pdf_path: Path to generated PDF (None if failed)
        errors: Fatal problems that stopped the export
        warnings: Non-fatal problems (e.g., fonts not found locally)
    """

    success: bool
    pdf_path: Optional[Path] = None
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def load_export_settings(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load export_settings.yaml as a plain dict.

    Args:
        config_path: Optional path (defaults to EXPORT_SETTINGS_PATH)
    """
    if config_path is None:
        config_path = EXPORT_SETTINGS_PATH
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def default_resume_filename(
    language: str,
    tags: Iterable[str] = (),
    theme: Optional[str] = None,
    date: Optional[str] = None,
) -> str:
    """
    Automatic export name: resume-<date>-<lang>-<tags or All>[-<theme>].pdf

    Examples:
        >>> default_resume_filename("sv", ["Go", "Rust"], "dark", date="2025-03-01")
        'resume-2025-03-01-sv-Go_Rust-dark.pdf'
        >>> default_resume_filename("en", date="2025-03-01")
        'resume-2025-03-01-en-All.pdf'
    """
    tags = list(tags)
    tags_part = f"-{'_'.join(tags)}" if tags else "-All"
    theme_part = f"-{theme}" if theme and theme != DEFAULT_THEME_NAME else ""
    return f"resume-{date or today()}-{language}{tags_part}{theme_part}.pdf"


def prepare_output_path(output_path: Path) -> Path:
    """
    Make sure the output directory exists and remove a previous export.

    A file that cannot be removed is reported; printing is still attempted.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_path.exists():
        try:
            output_path.unlink()
            _log_info(f"Overwriting existing file: {output_path}")
        except OSError as e:
            _log_error(f"Error deleting existing file: {e}")

    return output_path


def find_font(file_name: str, fonts_dir: Path, fallback_subdirs: Iterable[str] = ()) -> Optional[Path]:
    """Locate a font file in fonts_dir, then in each fallback subdirectory."""
    for directory in [fonts_dir] + [fonts_dir / sub for sub in fallback_subdirs]:
        candidate = directory / file_name
        if candidate.is_file():
            return candidate
    return None


async def print_pdf(
    html: str,
    output_path: Path,
    site_dir: Path = SITE_PATH,
    fonts_dir: Path = FONTS_PATH,
    settings: Optional[Dict[str, Any]] = None,
) -> List[str]:
    """
    Print an HTML page to PDF.

    The page is written into site_dir so relative asset URLs resolve, font
    requests are answered from fonts_dir, and the temporary file is removed
    afterwards.

    Args:
        html: Complete page HTML
        output_path: Destination PDF path
        site_dir: Directory holding the page's assets
        fonts_dir: Local font directory
        settings: Export settings (defaults to export_settings.yaml)

    Returns:
        Warnings collected while printing

    Raises:
        playwright.async_api.Error: If the browser fails
    """
    settings = settings or load_export_settings()
    font_settings = settings["fonts"]
    pdf_settings = settings["pdf"]
    warnings = []

    site_dir = Path(site_dir)
    site_dir.mkdir(parents=True, exist_ok=True)
    temp_page = site_dir / settings["temp_page_name"]
    temp_page.write_text(html, encoding="utf-8")

    font_pattern = re.compile(r"\.(%s)$" % "|".join(font_settings["extensions"]))

    async def serve_font(route):
        url = route.request.url
        file_name = Path(urlparse(url).path).name
        font_path = find_font(file_name, Path(fonts_dir), font_settings["fallback_subdirs"])
        if font_path is None:
            message = f"Font not found: {file_name} (URL: {url})"
            _log_warning(message)
            warnings.append(message)
            await route.continue_()
            return
        await route.fulfill(status=200, body=font_path.read_bytes())

    try:
        async with async_playwright() as p:
            browser = await p.chromium.launch()
            try:
                page = await browser.new_page()
                await page.route(font_pattern, serve_font)
                await page.goto(temp_page.resolve().as_uri(), wait_until="networkidle")
                await page.evaluate("document.fonts.ready.then(() => true)")
                await page.wait_for_timeout(settings["settle_ms"])
                await page.pdf(
                    path=str(output_path),
                    format=pdf_settings["format"],
                    print_background=pdf_settings["print_background"],
                    margin=pdf_settings["margin"],
                )
            finally:
                await browser.close()
    finally:
        temp_page.unlink(missing_ok=True)

    return warnings


async def print_to_result(
    html: str,
    output_path: Path,
    site_dir: Path = SITE_PATH,
    fonts_dir: Path = FONTS_PATH,
) -> ExportResult:
    """Run print_pdf() and report the outcome as an ExportResult."""
    start_time = time.time()
    try:
        warnings = await print_pdf(html, output_path, site_dir=site_dir, fonts_dir=fonts_dir)
    except PlaywrightError as e:
        result = ExportResult(success=False, errors=[f"Browser error: {e}"])
    else:
        if output_path.exists():
            result = ExportResult(success=True, pdf_path=output_path, warnings=warnings)
        else:
            result = ExportResult(
                success=False, errors=["PDF file was not generated"], warnings=warnings
            )

    log_export_result(result, time.time() - start_time)
    return result


async def export_resume_pdf(
    document: ResumeDocument,
    language: str = DEFAULT_LANGUAGE,
    tags: Iterable[str] = (),
    theme: Optional[str] = None,
    output_path: Optional[Path] = None,
    exports_dir: Path = EXPORTS_PATH,
    site_dir: Path = SITE_PATH,
    fonts_dir: Path = FONTS_PATH,
    template_registry: Optional[TemplateRegistry] = None,
) -> ExportResult:
    """
    Export the résumé page to PDF for one language, tag selection and theme.

    The selection is applied through the same controls a visitor uses:
    language first (which resets the filter), then theme, then tags reset to
    "All" and toggled in order.

    Args:
        document: Loaded résumé document
        language: Language code to export
        tags: Tags to select (empty = all projects)
        theme: Theme name (None = the document's default)
        output_path: Destination (default: exports_dir/default_resume_filename())
        exports_dir: Directory for automatically named exports
        site_dir: Directory holding page assets
        fonts_dir: Local font directory
        template_registry: Optional template registry

    Returns:
        ExportResult with success status and diagnostics
    """
    tags = list(tags)

    if document.get(language) is None:
        return ExportResult(
            success=False, errors=[f"Language '{language}' not found in data document"]
        )

    if output_path is None:
        output_path = Path(exports_dir) / default_resume_filename(language, tags, theme)
    output_path = prepare_output_path(output_path)

    log_export_start(language, tags, theme or DEFAULT_THEME_NAME, output_path)

    engine = ResumeEngine(template_registry=template_registry)
    engine.initialize(document)
    controls = bind_controls(engine)
    controls.dispatch("language", language)
    if theme:
        controls.dispatch("theme", theme)
    apply_tag_selection(controls, tags)

    _log_debug(f"Active filter: {sorted(engine.filters.tags)}")
    try:
        html = build_page(engine)
    except TemplateRenderError as e:
        return ExportResult(success=False, errors=[str(e)])
    if html is None:
        return ExportResult(
            success=False, errors=[f"Nothing was rendered for language '{language}'"]
        )

    return await print_to_result(html, output_path, site_dir=site_dir, fonts_dir=fonts_dir)
