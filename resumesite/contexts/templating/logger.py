"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from resumesite.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, data_path: Optional[Path] = None) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this site build session
        data_path: Résumé data document, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Data": data_path},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_render(language: str, active_tags, project_count: int, total_projects: int) -> None:
    """Log a completed render pass."""
    tags = ", ".join(sorted(active_tags))
    _log_debug(f"Rendered '{language}' with filter {{{tags}}}: {project_count}/{total_projects} projects")


def log_missing_language(language: str, available) -> None:
    """Log a render skipped because the language is not in the document."""
    _log_debug(f"No data for language '{language}' (available: {', '.join(available)}), render skipped")


def log_page_written(language: str, page_path: Path) -> None:
    """Log a static page written to disk."""
    _log_success(f"Wrote '{language}' page: {page_path}")
