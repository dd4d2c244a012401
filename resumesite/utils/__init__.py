"""
Shared utilities for resume-site.

Common functionality used across contexts:
- Logger setup
- LLM providers
- Text processing
- Timestamps
"""

from resumesite.utils.timestamp import now, today

__all__ = ["now", "today"]
