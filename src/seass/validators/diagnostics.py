"""Diagnostic messages, formatting and run-scoped collections."""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Set

from .position import SourceSpan


# Message catalog. The spellings are part of the output contract.
ATTRIBUTE_SELECTOR = "attribute selector not allowed"
SELECTOR_LIST = "selector list not allowed"
CHILD_SELECTOR = "child selector '>' not allowed"
ADJACENT_SIBLING_SELECTOR = "adjacent sibiling selector '+' not allowed"
GENERAL_SIBLING_SELECTOR = "general sibiling selector '~' not allowed"
DESCENDANT_SELECTOR = "decendant selector ' ' not allowed"
ID_SELECTOR = "id selector '#' not allowed"
ELEMENT_SELECTOR = "element selector not allowed"


def duplicate_selector(selector: str) -> str:
    return f"duplicate selector '{selector}'"


@dataclass(frozen=True)
class Diagnostic:
    """A lint finding attached to a prelude span."""

    span: SourceSpan
    message: str

    def __str__(self) -> str:
        return f"{self.span.format()} - {self.message}"


class DiagnosticSet:
    """Deduplicating collection of diagnostic strings."""

    def __init__(self) -> None:
        self._items: Set[str] = set()

    def add(self, diagnostic: Diagnostic) -> None:
        self._items.add(str(diagnostic))

    def update(self, diagnostics: Iterable[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            self.add(diagnostic)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return str(item) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.sorted())

    def sorted(self) -> List[str]:
        """Return the diagnostics in ascending string order."""
        return sorted(self._items)


class DuplicateTracker:
    """Remembers the latest diagnostic for every class selector seen in a run."""

    def __init__(self) -> None:
        self._latest: Dict[str, Diagnostic] = {}

    def __len__(self) -> int:
        return len(self._latest)

    def __contains__(self, selector: object) -> bool:
        return selector in self._latest

    def register(self, selector: str, span: SourceSpan) -> List[Diagnostic]:
        """
        Record an occurrence of a class selector.

        The first occurrence produces nothing. Every later occurrence is
        paired with the one before it and both are returned; the stored entry
        always moves to the current occurrence.

        Args:
            selector: Class selector text, e.g. ``.button``
            span: Span of the prelude the selector came from

        Returns:
            Diagnostics to report for this occurrence
        """
        current = Diagnostic(span, duplicate_selector(selector))
        previous: Optional[Diagnostic] = self._latest.get(selector)
        self._latest[selector] = current
        if previous is None:
            return []
        return [previous, current]
