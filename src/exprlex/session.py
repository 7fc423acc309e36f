"""One-line scanning sessions.

scan_line is a pure function from (text, start line) to (tokens, end
line). Callers thread ``result.next_line`` into the next call instead of
sharing a mutable counter between tokenizers:

    >>> line = 1
    >>> for text in ["x = 1", "y = x ** 2"]:
    ...     result = scan_line(text, line)
    ...     line = result.next_line

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from exprlex.config import ScanConfig, get_scan_config
from exprlex.errors import InvalidCharacterError
from exprlex.lexer import Tokenizer
from exprlex.tokens import Token, TokenKind
from exprlex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scanning one line.

    Attributes:
        tokens: Tokens in lexical order. When scanning halted on an invalid
            character, the INVALID token is last.
        start_line: Line number the session was seeded with
        end_line: Line counter after scanning (greater than start_line only
            if the text contained newlines)
        source: The scanned text

    """

    tokens: tuple[Token, ...]
    start_line: int
    end_line: int
    source: str = ""

    @property
    def invalid(self) -> Token | None:
        """First INVALID token, if any."""
        for token in self.tokens:
            if token.kind is TokenKind.INVALID:
                return token
        return None

    @property
    def ok(self) -> bool:
        return self.invalid is None

    @property
    def error(self) -> InvalidCharacterError | None:
        """The invalid-character report as an exception value (not raised)."""
        token = self.invalid
        if token is None:
            return None
        return InvalidCharacterError.from_token(token)

    @property
    def next_line(self) -> int:
        """Line number to seed the following session with."""
        return self.end_line + 1

    def raise_for_invalid(self) -> None:
        """Raise InvalidCharacterError if the line had an invalid character."""
        error = self.error
        if error is not None:
            raise error

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


def scan_line(
    text: str,
    start_line: int = 1,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> ScanResult:
    """Scan one line of text with a fresh tokenizer.

    Args:
        text: Line to scan, without its terminator
        start_line: Line number of text (1-indexed)
        source_file: Optional input name carried into tokens
        config: Scan options; defaults to the context's ScanConfig

    Returns:
        ScanResult holding the tokens and the updated line counter

    Example:
        >>> result = scan_line("a # b", 4)
        >>> result.error.describe()
        "Invalid character '#' at line 4 column 3"
    """
    tokenizer = Tokenizer(text, start_line, source_file=source_file, config=config)
    tokens = tuple(tokenizer.tokenize())
    logger.debug(
        "scanned line %d: %d token(s), end line %d",
        start_line,
        len(tokens),
        tokenizer.line,
    )
    return ScanResult(
        tokens=tokens,
        start_line=start_line,
        end_line=tokenizer.line,
        source=text,
    )


def scan_lines(
    lines: Iterable[str],
    start_line: int = 1,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[ScanResult]:
    """Scan lines one session at a time, threading the line counter.

    Stops after the first line with an invalid character unless the config
    enables resync.

    Yields:
        One ScanResult per line
    """
    config = config if config is not None else get_scan_config()
    line = start_line
    for text in lines:
        result = scan_line(text, line, source_file=source_file, config=config)
        yield result
        if not result.ok and not config.resync:
            return
        line = result.next_line


__all__ = ["ScanResult", "scan_line", "scan_lines"]
