"""Split a decomposed prelude on selector-list separators and combinators."""

from dataclasses import dataclass
from typing import List, Tuple

from .diagnostics import (
    ADJACENT_SIBLING_SELECTOR,
    CHILD_SELECTOR,
    DESCENDANT_SELECTOR,
    GENERAL_SIBLING_SELECTOR,
    SELECTOR_LIST,
)


@dataclass(frozen=True)
class SeparatorRule:
    """A separator and the message reported when it splits a fragment."""

    separator: str
    message: str


# Priority order matters: it decides which fragments later rules see.
SEPARATOR_RULES: Tuple[SeparatorRule, ...] = (
    SeparatorRule(",", SELECTOR_LIST),
    SeparatorRule(">", CHILD_SELECTOR),
    SeparatorRule("+", ADJACENT_SIBLING_SELECTOR),
    SeparatorRule("~", GENERAL_SIBLING_SELECTOR),
    SeparatorRule(" ", DESCENDANT_SELECTOR),
)


def split_combinators(text: str) -> Tuple[List[str], List[str]]:
    """
    Fold every separator rule over the fragments of ``text``.

    Each fragment is trimmed before it is split. Only a literal space counts
    as a descendant combinator; tabs and newlines do not.

    Args:
        text: Prelude with attribute selectors and arguments already removed

    Returns:
        Tuple of (non-empty atomic selector candidates, messages). Each message
        appears once, in rule order.
    """
    fragments = [text]
    messages: List[str] = []

    for rule in SEPARATOR_RULES:
        split: List[str] = []
        for fragment in fragments:
            parts = fragment.strip().split(rule.separator)
            if len(parts) > 1 and rule.message not in messages:
                messages.append(rule.message)
            split.extend(part.strip() for part in parts)
        fragments = split

    return [fragment for fragment in fragments if fragment], messages
