"""
Default values for resume-site rendering.

Provides shared defaults used by:
- engine.py (initial language, filter sentinel, heading labels)
- theme_resolver.py (fallback theme variables)
- page_builder.py (section keys, layout slots)
"""

import os
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

# Filter sentinel meaning "no filtering"
ALL_TAG = "All"

# Reserved top-level key of the data document that is never a language
CONFIG_KEY = "config"

# Output regions filled on every render, in page order
SECTION_KEYS = ("experience", "education", "projects", "skills", "contact", "about")
FILTERS_SECTION = "filters"

# Label keys shown above the project list
PROJECTS_LABEL = "projects"
RELEVANT_PROJECTS_LABEL = "relevantProjects"

# Layout slots for the skills region
PRIMARY_SLOT = "primary"
ALTERNATE_SLOT = "alternate"

DEFAULT_THEME_NAME = "default"

# Neutral gray palette, used when the document defines no themes
DEFAULT_THEME_VARIABLES: Dict[str, str] = {
    "--color-gray-150": "#f2f2f2",
    "--color-gray-250": "#e8e8e8",
    "--color-gray-550": "#8c8c8c",
    "--color-gray-600": "#737373",
    "--color-gray-650": "#666666",
    "--color-gray-700": "#4d4d4d",
    "--color-gray-750": "#333333",
    "--color-page-background": "#ffffff",
}

# Variable that also sets the body background colour
PAGE_BACKGROUND_VARIABLE = "--color-page-background"

# English names of languages, used in prompts
LANGUAGE_NAMES = {
    "en": "English",
    "sv": "Swedish",
}
