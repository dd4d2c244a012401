"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumesite.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, export_kind: str = "resume") -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this export session
        export_kind: "resume" or "cover-letter", recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from resumesite.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting export...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Export": export_kind},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(language: str, tags, theme: str, output_path: Path) -> None:
    """Log export parameters."""
    _log_info("Generating PDF with:")
    _log_info(f"  Language: {language}")
    _log_info(f"  Tags: {', '.join(tags) if tags else 'All'}")
    _log_info(f"  Theme: {theme}")
    _log_info(f"  Output: {output_path}")


def log_export_result(result, elapsed_time: float) -> None:
    """
    Log export result with diagnostics.

    Args:
        result: ExportResult from an export function
        elapsed_time: Time taken to export
    """
    if result.success:
        _log_success(f"PDF generated successfully: {result.pdf_path} ({elapsed_time:.2f}s)")
    else:
        _log_error(f"Export failed with {len(result.errors)} errors ({elapsed_time:.2f}s)")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")

    for warning in result.warnings:
        _log_warning(warning)
