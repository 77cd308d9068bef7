from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .spans import Span


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Report of a syntax error, ready for display.

    ``expected`` lists readable names of the tokens the grammar would have
    accepted; ``snippet`` is the offending source line with a caret under
    the error position.
    """

    code: str
    message: str
    span: Optional[Span] = None
    expected: Tuple[str, ...] = ()
    snippet: str = ""


def format_diagnostic(d: Diagnostic) -> str:
    loc = f" at {d.span}" if d.span else ""
    lines = [f"ERROR: {d.code}{loc}: {d.message}"]
    if d.expected:
        lines.append(f"  note: expected one of: {', '.join(d.expected)}")
    if d.snippet:
        lines.append(d.snippet.rstrip())
    return "\n".join(lines)
