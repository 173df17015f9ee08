"""Lexical scanner that finds qualified-rule preludes in stylesheet source.

The scanner is an explicit state value (:class:`ScannerState`) advanced one
character at a time by :func:`step`. Each step returns the next state and, when
the character was the opening brace of a qualified rule, the
:class:`Prelude` in front of it. Strings, comments, at-rule headers and bodies
and rule bodies are skipped; nothing here produces diagnostics.

Malformed input (an unterminated string, comment or block) is not an error:
scanning simply stops at the end of the input.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from .position import FIRST_TOKEN_START, START_OF_FILE, SourcePosition, SourceSpan


QUOTES = ("\"", "'")
ESCAPE = "\\"
COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"


class ScanState(str, Enum):
    """Lexical context of the character being consumed."""

    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_COMMENT = "in_comment"
    IN_AT_STATEMENT = "in_at_statement"
    IN_AT_BLOCK = "in_at_block"
    IN_AT_DEFINITION_BLOCK = "in_at_definition_block"
    IN_KEYFRAMES_BLOCK = "in_keyframes_block"
    IN_RULE_BODY = "in_rule_body"


# Checked in order; a token starting with one of the keywords switches state.
AT_RULES: Tuple[Tuple[ScanState, Tuple[str, ...]], ...] = (
    (ScanState.IN_AT_STATEMENT, ("@charset", "@import", "@namespace")),
    (ScanState.IN_AT_BLOCK, ("@document", "@media")),
    (ScanState.IN_AT_DEFINITION_BLOCK, ("@font-face", "@page")),
    (ScanState.IN_KEYFRAMES_BLOCK, ("@keyframes",)),
)


@dataclass(frozen=True)
class Prelude:
    """Raw selector text found in front of a rule body."""

    text: str
    span: SourceSpan


@dataclass(frozen=True)
class ScannerState:
    """Complete scanner state between two characters.

    Attributes:
        file: Path reported in spans
        state: Current lexical context
        resume: Context to return to when a string or comment closes
        quote: Quote character that opened the current string
        comment_start: Offset of the comment-open marker inside ``token``
        token: Characters accumulated since the last token boundary
        token_start: Position of the last token boundary
        position: Position of the most recently consumed character
    """

    file: str
    state: ScanState = ScanState.NORMAL
    resume: ScanState = ScanState.NORMAL
    quote: str = ""
    comment_start: int = 0
    token: str = ""
    token_start: SourcePosition = FIRST_TOKEN_START
    position: SourcePosition = START_OF_FILE

    def next_token(self, state: ScanState = ScanState.NORMAL) -> "ScannerState":
        """Discard the accumulated token and start a new one here."""
        return replace(self, state=state, token="", token_start=self.position)


def classify_at_rule(token: str) -> Optional[ScanState]:
    """Return the at-rule state a token belongs to, if any."""
    for state, keywords in AT_RULES:
        if token.startswith(keywords):
            return state
    return None


def _count_braces(token: str) -> Tuple[int, int]:
    return token.count("{"), token.count("}")


def step(current: ScannerState, ch: str) -> Tuple[ScannerState, Optional[Prelude]]:
    """Consume one character.

    Args:
        current: State before ``ch``
        ch: The next character of the source

    Returns:
        The state after ``ch`` and the prelude completed by it, if any
    """
    s = replace(current, token=current.token + ch, position=current.position.advance(ch))
    mode = s.state

    if mode is ScanState.IN_STRING:
        if ch == s.quote and not current.token.endswith(ESCAPE):
            return replace(s, state=s.resume, quote=""), None
        return s, None

    if ch in QUOTES and mode is not ScanState.IN_COMMENT:
        return replace(s, state=ScanState.IN_STRING, resume=mode, quote=ch), None

    if mode is ScanState.IN_COMMENT:
        # The marker may share its "*" with the opener, so "/*/" closes too
        if s.token.endswith(COMMENT_CLOSE):
            return replace(s, state=s.resume, token=s.token[: s.comment_start]), None
        return s, None

    if s.token.endswith(COMMENT_OPEN):
        return (
            replace(
                s,
                state=ScanState.IN_COMMENT,
                resume=mode,
                comment_start=len(s.token) - len(COMMENT_OPEN),
            ),
            None,
        )

    # Whitespace between tokens is insignificant
    if len(s.token) == 1 and ch.isspace():
        return s.next_token(mode), None

    # Stray close brace, e.g. the end of an @media block. It is dropped
    # without a state change, so an empty rule body stays open until the
    # next "}".
    if s.token == "}":
        return s.next_token(mode), None

    if mode is ScanState.NORMAL:
        mode = classify_at_rule(s.token) or mode

    if mode is ScanState.IN_AT_STATEMENT:
        if ch == ";":
            return s.next_token(), None
        return replace(s, state=mode), None

    if mode is ScanState.IN_AT_BLOCK:
        # Only the block header is skipped; the rules inside it are scanned
        # like top-level rules and its closing brace is a stray one.
        if ch == "{":
            return s.next_token(), None
        return replace(s, state=mode), None

    if mode is ScanState.IN_AT_DEFINITION_BLOCK:
        if ch == "}":
            return s.next_token(), None
        return replace(s, state=mode), None

    if mode is ScanState.IN_KEYFRAMES_BLOCK:
        opening, closing = _count_braces(s.token)
        if opening > 0 and opening == closing:
            return s.next_token(), None
        return replace(s, state=mode), None

    if mode is ScanState.IN_RULE_BODY:
        if s.token.endswith("}"):
            return s.next_token(), None
        return s, None

    if s.token.endswith("{"):
        prelude = Prelude(
            text=s.token[:-1].strip(),
            span=SourceSpan.before_brace(s.file, s.token_start, s.position),
        )
        return s.next_token(ScanState.IN_RULE_BODY), prelude

    return s, None


def scan_preludes(file: str, chars: Iterable[str]) -> Iterator[Prelude]:
    """Lazily yield the preludes of every qualified rule in ``chars``.

    Args:
        file: Path used in the spans of the yielded preludes
        chars: Character stream of one stylesheet (a ``str`` works)
    """
    state = ScannerState(file=file)
    for ch in chars:
        state, prelude = step(state, ch)
        if prelude is not None:
            yield prelude
