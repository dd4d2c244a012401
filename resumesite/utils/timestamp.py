"""Date and time strings used in file and directory names."""

from datetime import datetime


def today() -> str:
    """Current date as YYYY-MM-DD, used in export file names."""
    return datetime.now().strftime("%Y-%m-%d")


def now() -> str:
    """Current time as YYYYMMDD_HHMMSS, used for log directory names."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
