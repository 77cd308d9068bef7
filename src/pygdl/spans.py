from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Span:
    """Region of GDL source text.

    Offsets are [start, end) in characters of the parsed string; line and
    column are 1-based and refer to ``start``. ``source`` names where the
    text came from (a path or any logical id) and may be omitted.
    """

    start: int
    end: int
    line: Optional[int] = None
    column: Optional[int] = None
    source: Optional[str] = None

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0 or self.end < self.start:
            raise ValueError("invalid span range")

    def __str__(self) -> str:  # debug-friendly
        source = self.source or "<string>"
        if self.line is not None and self.column is not None:
            return f"{source}:{self.line}:{self.column}"
        return f"{source}:{self.start}-{self.end}"
