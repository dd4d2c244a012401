"""
Theme Resolution for Page Rendering

Resolves a theme name to its CSS custom properties from the document config.
Unknown names never raise; they fall back through the config's default theme,
a theme literally named "default", and finally the built-in palette.

Examples:
    >>> name, variables = resolve_theme(config, "dark")
    >>> theme_style_block(variables)
    ':root {\\n  --color-gray-700: #ddd;\\n}'
"""

from typing import Dict, List, Optional, Tuple

from resumesite.contexts.templating.defaults import (
    DEFAULT_THEME_NAME,
    DEFAULT_THEME_VARIABLES,
    PAGE_BACKGROUND_VARIABLE,
)
from resumesite.contexts.templating.resume_data_structure import ThemeConfig


def resolve_theme(config: ThemeConfig, theme_name: Optional[str] = None) -> Tuple[str, Dict[str, str]]:
    """
    Look up the style variables for a theme.

    Fallback order: requested name, config.theme, "default", built-in palette.

    Args:
        config: Theme configuration from the data document
        theme_name: Requested theme (None means the config's default)

    Returns:
        Tuple of (resolved theme name, variable name -> value)
    """
    candidates = [theme_name, config.theme, DEFAULT_THEME_NAME]
    for candidate in candidates:
        if candidate and candidate in config.themes:
            return candidate, dict(config.themes[candidate])

    return DEFAULT_THEME_NAME, dict(DEFAULT_THEME_VARIABLES)


def available_themes(config: ThemeConfig) -> List[str]:
    """Theme names offered in the theme select control."""
    if not config.themes:
        return [DEFAULT_THEME_NAME]
    return list(config.themes)


def theme_style_block(variables: Dict[str, str]) -> str:
    """
    Render theme variables as CSS applied to the document root.

    The page background variable is also applied to <body> so the printed
    page matches the themed background.
    """
    lines = [":root {"]
    lines.extend(f"  {name}: {value};" for name, value in variables.items())
    lines.append("}")

    if PAGE_BACKGROUND_VARIABLE in variables:
        lines.append(f"body {{ background-color: {variables[PAGE_BACKGROUND_VARIABLE]}; }}")

    return "\n".join(lines)
