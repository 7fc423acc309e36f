"""START state scanner mixin."""

from __future__ import annotations

from exprlex.lexer.states import (
    END_OF_INPUT,
    SIGN_KINDS,
    SINGLE_CHAR_KINDS,
    STAR,
    START_DIGITS,
    ScanState,
    is_letter,
    is_whitespace,
)
from exprlex.tokens import Token, TokenKind


class StartScannerMixin:
    """Mixin providing the START state handler.

    Skips whitespace, then either emits a one-character token directly or
    hands off to the state that finishes a longer token.

    """

    def _advance(self) -> None:
        raise NotImplementedError

    def _skip_whitespace(self, char: str) -> None:
        raise NotImplementedError

    def _begin_lexeme(self) -> None:
        raise NotImplementedError

    def _emit(self, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _emit_invalid(self, char: str) -> Token:
        raise NotImplementedError

    def _scan_start(self, char: str) -> ScanState | Token:
        if is_whitespace(char):
            self._skip_whitespace(char)
            return ScanState.START
        if char == END_OF_INPUT:
            return ScanState.END

        self._begin_lexeme()
        if char in START_DIGITS:
            self._advance()
            return ScanState.INTEGER_PART
        if char in SIGN_KINDS:
            self._advance()
            return ScanState.SIGN_SEEN
        if char == STAR:
            self._advance()
            return ScanState.STAR_SEEN

        kind = SINGLE_CHAR_KINDS.get(char)
        if kind is not None:
            self._advance()
            return self._emit(kind)

        if is_letter(char):
            self._advance()
            return ScanState.IDENTIFIER_BODY

        return self._emit_invalid(char)
