"""
Resume Data Structures

Defines data classes for the résumé data document: one localized résumé per
language plus an optional theme config. Instances are built once from the JSON
document and treated as read-only afterwards.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from resumesite.contexts.templating.defaults import CONFIG_KEY
from resumesite.contexts.templating.exceptions import (
    InvalidResumeStructureError,
    ResumeLoadError,
)


def _require_object(value: Any, where: str) -> Dict[str, Any]:
    """Return value if it is a JSON object, else raise InvalidResumeStructureError."""
    if not isinstance(value, dict):
        raise InvalidResumeStructureError(f"{where} must be an object, got {type(value).__name__}")
    return value


def _entries(data: Dict[str, Any], key: str, entry_cls) -> Tuple:
    """Build entry_cls for every object in the list under key (missing = empty)."""
    items = data.get(key) or []
    if not isinstance(items, list):
        raise InvalidResumeStructureError(f"'{key}' must be a list, got {type(items).__name__}")
    return tuple(
        entry_cls.from_dict(_require_object(item, f"'{key}' entry {i}"))
        for i, item in enumerate(items)
    )


def _strings(data: Dict[str, Any], key: str) -> Tuple[str, ...]:
    values = data.get(key) or []
    if not isinstance(values, list):
        raise InvalidResumeStructureError(f"'{key}' must be a list of strings")
    return tuple(str(value) for value in values)


@dataclass(frozen=True)
class ContactItem:
    """
    Single contact line.

    Attributes:
        text: Display text (e.g., "jane@example.com")
        is_link: Whether the line is rendered as a link
        url: Link target (only meaningful when is_link is True)
    """

    text: str
    is_link: bool = False
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContactItem":
        return cls(
            text=data.get("text", ""),
            is_link=bool(data.get("isLink", False)),
            url=data.get("url"),
        )


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Work experience entry.

    Attributes:
        company: Employer name
        period: Free-form period text (e.g., "2021 - 2024")
        role: Job title
        content: Bullet list (type "list") or a paragraph (type "text")
        type: "list" or "text"
    """

    company: str
    period: str
    role: str
    content: Union[Tuple[str, ...], str, None] = None
    type: str = "text"

    @property
    def is_list(self) -> bool:
        return self.type == "list" and isinstance(self.content, tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceEntry":
        content = data.get("content")
        if isinstance(content, list):
            content = tuple(content)
        return cls(
            company=data.get("company", ""),
            period=data.get("period", ""),
            role=data.get("role", ""),
            content=content,
            type=data.get("type", "text"),
        )


@dataclass(frozen=True)
class EducationEntry:
    """Education entry with optional paragraph."""

    institution: str
    period: str
    degree: str
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationEntry":
        return cls(
            institution=data.get("institution", ""),
            period=data.get("period", ""),
            degree=data.get("degree", ""),
            content=data.get("content"),
        )


@dataclass(frozen=True)
class Project:
    """
    Project entry, the unit of tag filtering.

    Attributes:
        name: Project name
        period: Free-form period text
        description: Paragraph (may contain inline HTML)
        url: Optional link rendered on the name
        tech: Optional technology summary
        tags: Filter tags; empty when the project has none
    """

    name: str
    period: str = ""
    description: str = ""
    url: Optional[str] = None
    tech: Optional[str] = None
    tags: Tuple[str, ...] = ()

    def matches(self, active_tags) -> bool:
        """True if any of this project's tags is in active_tags."""
        return not set(self.tags).isdisjoint(active_tags)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            name=data.get("name", ""),
            period=data.get("period", ""),
            description=data.get("description", ""),
            url=data.get("url"),
            tech=data.get("tech"),
            tags=_strings(data, "tags"),
        )


@dataclass(frozen=True)
class Skill:
    """Skill group with display tags."""

    name: str
    level: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        return cls(
            name=data.get("name", ""),
            level=data.get("level"),
            description=data.get("description"),
            tags=_strings(data, "tags"),
        )


@dataclass(frozen=True)
class AboutItem:
    """Free-form "about" entry."""

    title: str
    period: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AboutItem":
        return cls(
            title=data.get("title", ""),
            period=data.get("period", ""),
            description=data.get("description", ""),
        )


@dataclass(frozen=True)
class LocalizedResume:
    """
    Complete résumé content for one language.

    Attributes:
        name: Full name
        initials: Initials shown in the header badge
        labels: Label key -> display string (section headings, button text)
        contact, experience, education, projects, skills, about: Ordered entries
        raw: The language entry exactly as loaded (used for LLM prompts)
    """

    name: str
    initials: str = ""
    labels: Dict[str, str] = field(default_factory=dict)
    contact: Tuple[ContactItem, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    projects: Tuple[Project, ...] = ()
    skills: Tuple[Skill, ...] = ()
    about: Tuple[AboutItem, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LocalizedResume":
        _require_object(data, "Language entry")
        labels = _require_object(data.get("labels") or {}, "'labels'")
        return cls(
            name=data.get("name", ""),
            initials=data.get("initials", ""),
            labels={str(k): str(v) for k, v in labels.items()},
            contact=_entries(data, "contact", ContactItem),
            experience=_entries(data, "experience", ExperienceEntry),
            education=_entries(data, "education", EducationEntry),
            projects=_entries(data, "projects", Project),
            skills=_entries(data, "skills", Skill),
            about=_entries(data, "about", AboutItem),
            raw=data,
        )


@dataclass(frozen=True)
class ThemeConfig:
    """
    Theme settings from the document's "config" entry.

    Attributes:
        theme: Name of the default theme
        themes: Theme name -> CSS custom property name -> value
    """

    theme: Optional[str] = None
    themes: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ThemeConfig":
        data = _require_object(data or {}, "'config'")
        themes = {
            name: {
                str(k): str(v)
                for k, v in _require_object(variables or {}, f"Theme '{name}'").items()
            }
            for name, variables in _require_object(data.get("themes") or {}, "'themes'").items()
        }
        return cls(theme=data.get("theme"), themes=themes)


@dataclass(frozen=True)
class ResumeDocument:
    """
    The whole data document: localized résumés keyed by language code.

    Attributes:
        languages: Language code -> LocalizedResume, in document order
        config: Theme configuration (empty when the document has none)
    """

    languages: Dict[str, LocalizedResume] = field(default_factory=dict)
    config: ThemeConfig = field(default_factory=ThemeConfig)

    def get(self, language: str) -> Optional[LocalizedResume]:
        return self.languages.get(language)

    @property
    def language_codes(self) -> List[str]:
        return list(self.languages)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeDocument":
        _require_object(data, "Résumé document")
        languages = {
            code: LocalizedResume.from_dict(_require_object(entry, f"Language '{code}'"))
            for code, entry in data.items()
            if code != CONFIG_KEY
        }
        return cls(languages=languages, config=ThemeConfig.from_dict(data.get(CONFIG_KEY)))


def load_resume_document(data_path: Path) -> ResumeDocument:
    """
    Read and parse the JSON data document.

    Args:
        data_path: Path to data.json

    Returns:
        Parsed ResumeDocument

    Raises:
        ResumeLoadError: If the file cannot be read, is not valid JSON, or is
            not shaped like a résumé document
    """
    data_path = Path(data_path)
    try:
        data = json.loads(data_path.read_text(encoding="utf-8"))
        return ResumeDocument.from_dict(data)
    except OSError as e:
        raise ResumeLoadError("Could not read résumé data", data_path, e) from e
    except UnicodeDecodeError as e:
        raise ResumeLoadError("Résumé data is not UTF-8 text", data_path, e) from e
    except json.JSONDecodeError as e:
        raise ResumeLoadError("Résumé data is not valid JSON", data_path, e) from e
    except InvalidResumeStructureError as e:
        raise ResumeLoadError("Résumé data has an invalid structure", data_path, e) from e
