"""Exception classes for exprlex.

The tokenizer never raises for bad input; it reports an INVALID token.
These exceptions exist for callers that want to turn that report into an
exception, and for misuse of the configuration API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exprlex.tokens import Token


class ExprlexError(Exception):
    """Base exception for all exprlex errors."""

    pass


class LexError(ExprlexError):
    """Error tied to a position in scanned text."""

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Input name (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InvalidCharacterError(LexError):
    """A character that starts no valid token."""

    def __init__(
        self,
        char: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.char = char
        super().__init__(
            f"invalid character {char!r}",
            lineno=lineno,
            col_offset=col_offset,
            source_file=source_file,
        )

    @classmethod
    def from_token(cls, token: Token) -> InvalidCharacterError:
        """Build the error described by an INVALID token.

        Raises:
            ValueError: If the token is not INVALID.
        """
        if not token.is_invalid:
            raise ValueError(f"not an invalid-character token: {token!r}")
        return cls(
            token.lexeme,
            lineno=token.lineno,
            col_offset=token.col,
            source_file=token.source_file,
        )

    def describe(self) -> str:
        """Diagnostic line in the driver's format."""
        return f"Invalid character '{self.char}' at line {self.lineno} column {self.col_offset}"


class ConfigError(ExprlexError):
    """Invalid ScanConfig value."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(f"Config '{field_name}': {message}")
