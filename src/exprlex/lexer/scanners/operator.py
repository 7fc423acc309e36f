"""Star operator scanner mixin."""

from __future__ import annotations

from exprlex.lexer.states import STAR
from exprlex.tokens import Token, TokenKind


class OperatorScannerMixin:
    """Mixin providing the STAR_SEEN state.

    ``*`` is lexed greedily: a second ``*`` is consumed into EXPONENT,
    anything else leaves a MULTIPLY without consuming the character.

    """

    def _advance(self) -> None:
        raise NotImplementedError

    def _emit(self, kind: TokenKind) -> Token:
        raise NotImplementedError

    def _scan_star_seen(self, char: str) -> Token:
        if char == STAR:
            self._advance()
            return self._emit(TokenKind.EXPONENT)
        return self._emit(TokenKind.MULTIPLY)
