"""Classify the atomic selectors of a prelude and report forbidden shapes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..utils.logging_config import LoggerMixin
from .combinators import split_combinators
from .diagnostics import (
    ELEMENT_SELECTOR,
    ID_SELECTOR,
    Diagnostic,
    DuplicateTracker,
)
from .prelude import decompose_prelude
from .scanner import Prelude


class SelectorKind(str, Enum):
    """Shape of an atomic selector."""

    ID = "id"
    CLASS = "class"
    PSEUDO_CLASS = "pseudoClass"
    ELEMENT = "element"


@dataclass(frozen=True)
class AtomicSelector:
    """A selector fragment left after all combinator splitting."""

    text: str
    kind: SelectorKind


@dataclass
class SelectorValidationResult:
    """Result of running one prelude through the selector pipeline."""

    selectors: List[AtomicSelector] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.messages


def classify_selector(selector: str) -> SelectorKind:
    """Determine the kind of an atomic selector.

    A ``#`` anywhere makes it an id selector. Compound selectors such as
    ``.a.b`` are a single class selector.
    """
    if "#" in selector:
        return SelectorKind.ID
    if selector.startswith("."):
        return SelectorKind.CLASS
    if selector.startswith(":"):
        return SelectorKind.PSEUDO_CLASS
    return SelectorKind.ELEMENT


_KIND_MESSAGES = {
    SelectorKind.ID: ID_SELECTOR,
    SelectorKind.ELEMENT: ELEMENT_SELECTOR,
}


class SelectorValidator(LoggerMixin):
    """Validator for selector preludes."""

    def check_selector(self, prelude: str) -> SelectorValidationResult:
        """
        Run a prelude through decomposition, splitting and classification.

        Duplicate class selectors are not considered here since they need
        the state of a whole run.

        Args:
            prelude: Selector text as it appears before ``{``

        Returns:
            SelectorValidationResult with the atomic selectors and the
            messages, in the order they were found
        """
        decomposed = decompose_prelude(prelude)
        candidates, combinator_messages = split_combinators(decomposed.text)

        result = SelectorValidationResult()
        result.messages.extend(decomposed.messages)
        result.messages.extend(combinator_messages)

        for text in candidates:
            kind = classify_selector(text)
            result.selectors.append(AtomicSelector(text=text, kind=kind))
            message: Optional[str] = _KIND_MESSAGES.get(kind)
            if message is not None:
                result.messages.append(message)

        return result

    def validate_prelude(self, prelude: Prelude, duplicates: DuplicateTracker) -> List[Diagnostic]:
        """
        Produce the diagnostics of one scanned prelude.

        Class selectors are registered with ``duplicates`` so repeated class
        names are reported across the whole run.

        Args:
            prelude: Prelude emitted by the scanner
            duplicates: Run-scoped duplicate tracker

        Returns:
            Diagnostics for this prelude, possibly including the earlier
            occurrence of a duplicated class
        """
        result = self.check_selector(prelude.text)
        diagnostics = [Diagnostic(prelude.span, message) for message in result.messages]

        for selector in result.selectors:
            if selector.kind is SelectorKind.CLASS:
                diagnostics.extend(duplicates.register(selector.text, prelude.span))

        if diagnostics:
            self.logger.debug(
                f"{len(diagnostics)} findings for '{prelude.text}' at {prelude.span.format()}"
            )
        return diagnostics
