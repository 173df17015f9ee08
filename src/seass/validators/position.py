"""Source positions and spans for stylesheet diagnostics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourcePosition:
    """A 1-based line/column position."""

    line: int
    column: int

    def advance(self, ch: str) -> "SourcePosition":
        """Return the position after consuming ``ch``.

        The column counter is bumped before the newline check, so a newline
        leaves the tracker at column 1 of the next line rather than 0.
        """
        if ch == "\n":
            return SourcePosition(self.line + 1, 1)
        return SourcePosition(self.line, self.column + 1)


# Position before the first character has been consumed.
START_OF_FILE = SourcePosition(line=1, column=0)

# Where the first token of a file is considered to begin.
FIRST_TOKEN_START = SourcePosition(line=1, column=1)


@dataclass(frozen=True)
class SourceSpan:
    """Region of a file covered by a prelude."""

    file: str
    start: SourcePosition
    end: SourcePosition

    @classmethod
    def before_brace(cls, file: str, start: SourcePosition, brace: SourcePosition) -> "SourceSpan":
        """Build the span of a prelude that ends at the opening brace ``brace``.

        The end column is the brace column minus two, a convention existing
        fixtures depend on.
        """
        return cls(file=file, start=start, end=SourcePosition(brace.line, brace.column - 2))

    def format(self) -> str:
        return (
            f"{self.file}:{self.start.line}:{self.start.column}"
            f"-{self.end.line}:{self.end.column}"
        )
