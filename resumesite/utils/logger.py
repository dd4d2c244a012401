"""
Shared loguru configuration.

Each CLI run gets its own log directory with one file per context plus a
colorized console stream. The first lines of every log record where the run
came from, so an exported PDF can be traced back to its command line.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from resumesite import __version__

load_dotenv()

CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, Any]] = None,
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Send loguru output to <log_dir>/<context_name>.log and the console.

    The file sink keeps DEBUG records (every render pass, every font lookup);
    the console shows CONSOLE_LOG_LEVEL and above.

    Args:
        context_name: Context identifier ("template", "render")
        log_dir: Directory for this run, created if missing
        extra_provenance: Run details for the header (None values are skipped)
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, Any]] = None) -> None:
    """Write the run header: command line, working directory, versions, extras."""
    header = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "resume-site": __version__,
        "Python": sys.version.split()[0],
    }
    header.update({k: v for k, v in (extra_context or {}).items() if v is not None})

    logger.info("-" * 72)
    for key, value in header.items():
        logger.info(f"{key}: {value}")
    logger.info("-" * 72)
