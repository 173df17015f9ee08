"""Strip attribute selectors and pseudo-class arguments from a prelude."""

from dataclasses import dataclass, field
from typing import List

from .diagnostics import ATTRIBUTE_SELECTOR


@dataclass
class DecomposedPrelude:
    """Prelude text with bracketed and parenthesised content removed."""

    text: str
    messages: List[str] = field(default_factory=list)


def decompose_prelude(prelude: str) -> DecomposedPrelude:
    """
    Remove ``[...]`` and ``(...)`` content from a selector prelude.

    Quoted text is dropped along with its quotes; escapes are only honoured
    inside a quote, so a quoted ``]`` inside an attribute value is skipped.
    Brackets and parentheses are tracked with flat flags rather than depth
    counters: nested parentheses such as ``:not(:is(a, b))`` close at the first
    ``)``. This is a known limitation.

    Args:
        prelude: Raw selector prelude

    Returns:
        DecomposedPrelude with the remaining text and an attribute selector
        message for every ``[`` seen
    """
    out: List[str] = []
    messages: List[str] = []
    quote = ""
    escaping = False
    in_square = False
    in_parens = False

    for ch in prelude:
        if quote:
            if escaping:
                escaping = False
            elif ch == "\\":
                escaping = True
            elif ch == quote:
                quote = ""
            continue
        if ch in ("\"", "'"):
            quote = ch
            continue
        if in_square:
            if ch == "]":
                in_square = False
            continue
        if ch == "[":
            in_square = True
            messages.append(ATTRIBUTE_SELECTOR)
            continue
        if in_parens:
            if ch == ")":
                in_parens = False
            continue
        if ch == "(":
            in_parens = True
            continue
        out.append(ch)

    return DecomposedPrelude(text="".join(out), messages=messages)
