"""Unit tests for loguru setup and context wrappers."""

import sys

import pytest
from loguru import logger

from resumesite.contexts.rendering.logger import setup_rendering_logger
from resumesite.contexts.templating.logger import _log_info, setup_templating_logger


@pytest.fixture(autouse=True)
def restore_default_sink():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_templating_log_file_has_provenance_and_prefix(tmp_path):
    log_file = setup_templating_logger(tmp_path / "site_run", data_path="docs/data.json")
    _log_info("Rendering pages")
    logger.complete()

    assert log_file == tmp_path / "site_run" / "template.log"
    text = log_file.read_text(encoding="utf-8")
    assert "Data: docs/data.json" in text
    assert "resume-site: " in text
    assert "[template] Rendering pages" in text


@pytest.mark.unit
def test_unset_provenance_values_are_skipped(tmp_path):
    log_file = setup_templating_logger(tmp_path)
    logger.complete()

    assert "Data:" not in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
def test_rendering_log_records_export_kind(tmp_path):
    log_file = setup_rendering_logger(tmp_path, export_kind="cover-letter")
    logger.complete()

    assert log_file.name == "render.log"
    assert "Export: cover-letter" in log_file.read_text(encoding="utf-8")
