"""Finite-state tokenizer for the exprlex expression language.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, ScanState
├── core.py              # Tokenizer class (mixin composition + cursor)
├── states.py            # ScanState enum, character classes
└── scanners/            # One mixin per group of DFA states
    ├── start.py         # START: whitespace, single-char tokens, dispatch
    ├── number.py        # INTEGER_PART, FRACTION_PART, SIGN_SEEN
    ├── operator.py      # STAR_SEEN
    └── identifier.py    # IDENTIFIER_BODY

Usage:
    >>> from exprlex.lexer import Tokenizer
    >>> [t.lexeme for t in Tokenizer("2**3").tokenize()]
    ['2', '**', '3']

"""

from exprlex.lexer.core import Tokenizer
from exprlex.lexer.states import ScanState

__all__ = ["ScanState", "Tokenizer"]
