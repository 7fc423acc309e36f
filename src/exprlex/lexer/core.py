"""Deterministic finite-state tokenizer.

One character of lookahead, one state transition per character, no
backtracking and no regex. End of input is the sentinel END_OF_INPUT, so
every state has a defined transition when the source runs out.

Thread Safety:
Tokenizer instances are single-use and single-threaded. Create one per
line of input. All state is instance-local.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from exprlex.config import ScanConfig, get_scan_config
from exprlex.lexer.scanners import (
    IdentifierScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    StartScannerMixin,
)
from exprlex.lexer.states import END_OF_INPUT, ScanState
from exprlex.tokens import Token, TokenKind
from exprlex.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer(
    StartScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    IdentifierScannerMixin,
):
    """Table-driven DFA tokenizer over one line of source text.

    Usage:
            >>> tokenizer = Tokenizer("x = 3.14")
            >>> for token in tokenizer.tokenize():
            ...     print(token)
        Token(IDENTIFIER, 'x', 1:1)
        Token(EQUALS, '=', 1:3)
        Token(REAL_NUMBER, '3.14', 1:5)

    next_token() returns None at end of input and an INVALID token for a
    character that starts no token. It never raises for input content.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_config",
        "_pos",
        "_line",
        "_line_start",
        "_state",
        # Start of the lexeme being scanned
        "_start",
        "_start_line",
        "_start_col",
        "_handlers",
    )

    def __init__(
        self,
        source: str,
        line: int = 1,
        *,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize tokenizer with source text.

        Args:
            source: Text to scan, normally one line without its terminator
            line: Line number of the first line of source (1-indexed)
            source_file: Optional input name carried into tokens
            config: Scan options; defaults to the context's ScanConfig

        Raises:
            ValueError: If line is less than 1.
        """
        if line < 1:
            raise ValueError(f"line numbers start at 1, got {line}")

        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()
        self._pos = 0
        self._line = line
        self._line_start = 0
        self._state = ScanState.START

        self._start = 0
        self._start_line = line
        self._start_col = 1

        self._handlers: dict[ScanState, Callable[[str], ScanState | Token]] = {
            ScanState.START: self._scan_start,
            ScanState.INTEGER_PART: self._scan_integer_part,
            ScanState.FRACTION_PART: self._scan_fraction_part,
            ScanState.SIGN_SEEN: self._scan_sign_seen,
            ScanState.STAR_SEEN: self._scan_star_seen,
            ScanState.IDENTIFIER_BODY: self._scan_identifier_body,
        }

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def source(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        """Cursor position in source."""
        return self._pos

    @property
    def line(self) -> int:
        """Current physical line number."""
        return self._line

    @property
    def column(self) -> int:
        """1-indexed column of the cursor within the current line."""
        return self._pos - self._line_start + 1

    @property
    def config(self) -> ScanConfig:
        return self._config

    def next_token(self) -> Token | None:
        """Scan exactly one token.

        Returns:
            The next Token, an INVALID token for an unrecognised character,
            or None once only whitespace remains.
        """
        self._state = ScanState.START
        while True:
            step = self._handlers[self._state](self._peek())
            if isinstance(step, Token):
                self._state = ScanState.START
                return step
            self._state = step
            if step is ScanState.END:
                return None

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until end of input.

        Stops after the first INVALID token unless the config enables
        resync, in which case scanning continues past it.

        Yields:
            Token objects in lexical order
        """
        while (token := self.next_token()) is not None:
            yield token
            if token.kind is TokenKind.INVALID and not self._config.resync:
                return

    # =========================================================================
    # Cursor helpers
    # =========================================================================

    def _peek(self) -> str:
        """Current character, or END_OF_INPUT past the last one."""
        if self._pos >= self._source_len:
            return END_OF_INPUT
        return self._source[self._pos]

    def _advance(self) -> None:
        self._pos += 1

    def _skip_whitespace(self, char: str) -> None:
        self._pos += 1
        if char == "\n":
            self._line += 1
            self._line_start = self._pos

    # =========================================================================
    # Token construction
    # =========================================================================

    def _begin_lexeme(self) -> None:
        self._start = self._pos
        self._start_line = self._line
        self._start_col = self.column

    def _emit(self, kind: TokenKind) -> Token:
        """Finish the lexeme begun at _start and ending at the cursor."""
        return Token(
            kind=kind,
            lexeme=self._source[self._start : self._pos],
            lineno=self._start_line,
            col=self._start_col,
            offset=self._start,
            end_offset=self._pos,
            source_file=self._source_file,
        )

    def _emit_invalid(self, char: str) -> Token:
        """Report *char* as INVALID.

        The cursor stays on the character unless resync is enabled, so the
        tokenizer keeps reporting it until the caller gives up.
        """
        token = Token(
            kind=TokenKind.INVALID,
            lexeme=char,
            lineno=self._line,
            col=self.column,
            offset=self._pos,
            end_offset=self._pos + 1,
            source_file=self._source_file,
        )
        logger.debug("invalid character %r at %d:%d", char, token.lineno, token.col)
        if self._config.resync:
            self._pos += 1
            logger.debug("resyncing at offset %d", self._pos)
        return token
