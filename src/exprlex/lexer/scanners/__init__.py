"""State handlers for the exprlex tokenizer.

Each scanner is a mixin providing the handler for one or more ScanState
members. A handler receives the lookahead character and returns either the
next state or the finished token.
"""

from __future__ import annotations

from exprlex.lexer.scanners.identifier import IdentifierScannerMixin
from exprlex.lexer.scanners.number import NumberScannerMixin
from exprlex.lexer.scanners.operator import OperatorScannerMixin
from exprlex.lexer.scanners.start import StartScannerMixin

__all__ = [
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "StartScannerMixin",
]
