"""Token and TokenKind definitions for the exprlex tokenizer.

The tokenizer produces Token values in lexical order. Each Token has a
kind, the exact lexeme it was scanned from, and its position.

Whitespace never becomes a token, and end of input is signalled by
``None`` rather than by a token value.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exprlex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the tokenizer."""

    # Operands
    IDENTIFIER = auto()  # letter (letter | digit)*
    REAL_NUMBER = auto()  # [+-]? digit+ (. digit*)?

    # Punctuation
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    EQUALS = auto()  # =

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /
    EXPONENT = auto()  # **

    # A single character that starts no token
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the tokenizer.

    Attributes:
        kind: The token kind (from TokenKind)
        lexeme: The exact source text; never empty
        lineno: Physical line number (1-indexed)
        col: Column within the line (1-indexed)
        offset: Start cursor position in the session source
        end_offset: End cursor position (exclusive)
        source_file: Optional input name for diagnostics

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    kind: TokenKind
    lexeme: str
    lineno: int
    col: int
    offset: int
    end_offset: int
    source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from exprlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.end_offset,
            source_file=self.source_file,
        )
        # Idempotent write into the excluded cache field
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_invalid(self) -> bool:
        return self.kind is TokenKind.INVALID

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.lineno}:{self.col})"
