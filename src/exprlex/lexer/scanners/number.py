"""Number and sign scanner mixin.

Covers the three states that can end in a REAL_NUMBER:

    INTEGER_PART   digit* then optionally "." into FRACTION_PART
    FRACTION_PART  digit*
    SIGN_SEEN      a lone + or -, or the sign of a literal like -2.5

A sign directly followed by a digit always becomes part of the literal, so
"a+1" scans as IDENTIFIER, REAL_NUMBER("+1"). A parser built on this
tokenizer can never see a binary + or - right before a number.
"""

from __future__ import annotations

from exprlex.lexer.states import DECIMAL_POINT, SIGN_KINDS, ScanState, is_digit
from exprlex.tokens import Token, TokenKind


class NumberScannerMixin:
    """Mixin providing the numeric literal states."""

    _source: str
    _start: int

    def _advance(self) -> None:
        raise NotImplementedError

    def _emit(self, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _scan_integer_part(self, char: str) -> ScanState | Token:
        if is_digit(char):
            self._advance()
            return ScanState.INTEGER_PART
        if char == DECIMAL_POINT:
            self._advance()
            return ScanState.FRACTION_PART
        return self._emit(TokenKind.REAL_NUMBER)

    def _scan_fraction_part(self, char: str) -> ScanState | Token:
        # "3." is a complete literal; a second point ends the token
        if is_digit(char):
            self._advance()
            return ScanState.FRACTION_PART
        return self._emit(TokenKind.REAL_NUMBER)

    def _scan_sign_seen(self, char: str) -> ScanState | Token:
        if is_digit(char):
            self._advance()
            return ScanState.INTEGER_PART
        return self._emit(SIGN_KINDS[self._source[self._start]])
