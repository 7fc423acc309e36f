"""Source positions for diagnostics.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a token sits in the text handed to a scanning session.

    lineno and col_offset are 1-indexed. offset and end_offset are cursor
    positions into the session's source string, so
    ``source[loc.offset:loc.end_offset]`` is the token's lexeme.

    Attributes:
        lineno: Physical line number (1-indexed)
        col_offset: Column within that line (1-indexed)
        offset: Start cursor position in the session source
        end_offset: End cursor position (exclusive)
        source_file: Name of the input, if known

    Examples:
            >>> loc = SourceLocation(lineno=3, col_offset=7)
            >>> str(loc)
            '3:7'

            >>> str(SourceLocation(3, 7, source_file="calc.txt"))
            'calc.txt:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_offset - self.offset
