"""
Project Tag Filter State

Holds the set of active project tags. The set is never empty: the sentinel
"All" stands for "no filtering" and never coexists with a concrete tag.

Examples:
    >>> state = FilterState()
    >>> state.toggle("Go")
    >>> state.toggle("Rust")
    >>> sorted(state)
    ['Go', 'Rust']
    >>> state.toggle("Rust"); state.toggle("Go")
    >>> state.is_all
    True
"""

from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from resumesite.contexts.templating.defaults import ALL_TAG
from resumesite.utils.text_processing import unique_in_order


class FilterState:
    """Mutable set of active tags with the "All" sentinel rule."""

    def __init__(self, tags: Optional[Iterable[str]] = None):
        self._tags = {ALL_TAG}
        for tag in tags or ():
            self.toggle(tag)

    @property
    def tags(self) -> FrozenSet[str]:
        return frozenset(self._tags)

    @property
    def is_all(self) -> bool:
        """True when no filtering is active."""
        return self._tags == {ALL_TAG}

    def reset(self) -> None:
        self._tags = {ALL_TAG}

    def toggle(self, tag: str) -> None:
        """
        Toggle a tag. Order of the steps matters:

        1. "All" replaces the whole set with {"All"}.
        2. Otherwise "All" is dropped before the toggle.
        3. The tag is removed if active, added if not.
        4. An emptied set falls back to {"All"}.
        """
        if tag == ALL_TAG:
            self.reset()
            return

        self._tags.discard(ALL_TAG)

        if tag in self._tags:
            self._tags.remove(tag)
        else:
            self._tags.add(tag)

        if not self._tags:
            self._tags.add(ALL_TAG)

    def filter_projects(self, projects: Sequence) -> Tuple:
        """Projects visible under this filter, input order preserved."""
        if self.is_all:
            return tuple(projects)
        return tuple(project for project in projects if project.matches(self._tags))

    def __contains__(self, tag: str) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other) -> bool:
        if isinstance(other, FilterState):
            return self._tags == other._tags
        if isinstance(other, (set, frozenset)):
            return self._tags == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"FilterState({sorted(self._tags)!r})"


def available_tags(projects: Sequence) -> List[str]:
    """
    "All" followed by every project tag in order of first appearance.

    Args:
        projects: Project entries (untagged projects contribute nothing)

    Returns:
        Ordered list of selectable tags
    """
    return unique_in_order([ALL_TAG] + [tag for project in projects for tag in project.tags])
