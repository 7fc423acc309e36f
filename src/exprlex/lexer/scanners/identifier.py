"""Identifier scanner mixin."""

from __future__ import annotations

from exprlex.lexer.states import ScanState, is_digit, is_letter
from exprlex.tokens import Token, TokenKind


class IdentifierScannerMixin:
    """Mixin providing the IDENTIFIER_BODY state."""

    def _advance(self) -> None:
        raise NotImplementedError

    def _emit(self, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _scan_identifier_body(self, char: str) -> ScanState | Token:
        if is_letter(char) or is_digit(char):
            self._advance()
            return ScanState.IDENTIFIER_BODY
        return self._emit(TokenKind.IDENTIFIER)
