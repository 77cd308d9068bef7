from __future__ import annotations

from typing import FrozenSet, Optional

from .diagnostics import Diagnostic, format_diagnostic
from .spans import Span

SYNTAX_ERROR = "E001"


class GdlError(Exception):
    """Base exception for pygdl."""

    pass


class ParseError(GdlError):
    """Input text does not match the GDL grammar.

    Raised at the first mismatch; no partial description is produced.
    ``position`` is the 0-based offset of the offending token, ``line`` and
    ``column`` are 1-based. ``token`` is the offending text (empty at end of
    input) and ``expected`` names the tokens that would have been accepted.
    """

    def __init__(
        self,
        message: str,
        position: int = 0,
        line: Optional[int] = None,
        column: Optional[int] = None,
        token: str = "",
        expected: FrozenSet[str] = frozenset(),
        snippet: str = "",
        source: Optional[str] = None,
    ) -> None:
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        self.token = token
        self.expected = expected
        self.snippet = snippet
        self.span = Span(position, position + len(token), line, column, source)
        super().__init__(str(self))

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=SYNTAX_ERROR,
            message=self.message,
            span=self.span,
            expected=tuple(sorted(self.expected)),
            snippet=self.snippet,
        )

    def __str__(self) -> str:
        return format_diagnostic(self.to_diagnostic())
