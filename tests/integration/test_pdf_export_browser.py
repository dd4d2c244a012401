"""
Integration tests for PDF export - drives real headless Chromium.

Skipped when Playwright's browser binaries are not installed
(run `playwright install chromium`).
"""

import asyncio
from pathlib import Path

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from resumesite.contexts.rendering.pdf_exporter import export_resume_pdf
from resumesite.contexts.templating.resume_data_structure import load_resume_document

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def _chromium_available() -> bool:
    async def probe():
        async with async_playwright() as p:
            browser = await p.chromium.launch()
            await browser.close()

    try:
        asyncio.run(probe())
    except PlaywrightError:
        return False
    return True


CHROMIUM_AVAILABLE = _chromium_available()
skip_if_no_chromium = pytest.mark.skipif(
    not CHROMIUM_AVAILABLE,
    reason="Chromium not installed - run `playwright install chromium`",
)


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_export_resume_pdf(tmp_path):
    document = load_resume_document(FIXTURES_PATH / "resume_data.json")

    result = asyncio.run(
        export_resume_pdf(
            document,
            language="en",
            tags=["Go"],
            exports_dir=tmp_path / "exports",
            site_dir=tmp_path / "site",
            fonts_dir=tmp_path / "fonts",
        )
    )

    assert result.success, f"Export failed with errors: {result.errors}"
    assert result.pdf_path.read_bytes().startswith(b"%PDF")
    # Temporary page is cleaned up
    assert list((tmp_path / "site").iterdir()) == []

