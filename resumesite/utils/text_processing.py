"""
Text processing helpers shared across contexts.
"""

import re
from typing import Iterable, List

CODE_FENCE_PATTERN = re.compile(r"```(?:html)?")


def strip_code_fences(text: str) -> str:
    """
    Remove markdown code fences that LLMs wrap around HTML output.

    Both the opening ```html marker and bare ``` markers are removed anywhere
    in the text, leaving the fenced content in place.

    Examples:
        strip_code_fences("```html\\n<p>Hi</p>\\n```")
        # "\\n<p>Hi</p>\\n"
    """
    return CODE_FENCE_PATTERN.sub("", text)


def split_csv(value: str) -> List[str]:
    """Split a comma separated CLI value, dropping blanks."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def unique_in_order(items: Iterable[str]) -> List[str]:
    """Deduplicate while keeping first-appearance order."""
    seen = set()
    ordered = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display, adding ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including the ellipsis

    Returns:
        Original text if short enough, otherwise truncated with "..."
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
