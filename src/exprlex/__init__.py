"""
exprlex: tokenizer for a small arithmetic/assignment expression language

Identifiers, real-number literals, parentheses, assignment and the
operators + - * / ** are scanned by a deterministic finite-state machine,
one line at a time, with line/column tracking for diagnostics.

Quick Start:
    >>> from exprlex import scan_line
    >>> result = scan_line("x = 3.14")
    >>> [(t.kind.name, t.lexeme) for t in result]
    [('IDENTIFIER', 'x'), ('EQUALS', '='), ('REAL_NUMBER', '3.14')]

    >>> result = scan_line("a # b", 7)
    >>> result.error.describe()
    "Invalid character '#' at line 7 column 3"

Grammar (for a future parser; not implemented here):
    <stmt>   ::= <assign> | <expr>
    <assign> ::= ID = <expr>
    <expr>   ::= <term> | <term> + <expr> | <term> - <expr>
    <term>   ::= <factor> | <factor> * <term> | <factor> / <term>
    <factor> ::= <base> ** <factor> | <base>
    <base>   ::= ID | NUM | ( <expr> )
"""

from exprlex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from exprlex.errors import ConfigError, ExprlexError, InvalidCharacterError, LexError
from exprlex.lexer import ScanState, Tokenizer
from exprlex.location import SourceLocation
from exprlex.renderers.dump import DumpRenderer, render_dump
from exprlex.session import ScanResult, scan_line, scan_lines
from exprlex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(source: str, line: int = 1, *, config: ScanConfig | None = None) -> list[Token]:
    """Tokenize *source* and return the token list.

    Shorthand for ``list(scan_line(source, line, config=config))``.
    """
    return list(scan_line(source, line, config=config).tokens)


__all__ = [
    "ConfigError",
    "DumpRenderer",
    "ExprlexError",
    "InvalidCharacterError",
    "LexError",
    "ScanConfig",
    "ScanResult",
    "ScanState",
    "SourceLocation",
    "Token",
    "TokenKind",
    "Tokenizer",
    "__version__",
    "get_scan_config",
    "render_dump",
    "reset_scan_config",
    "scan_config_context",
    "scan_line",
    "scan_lines",
    "set_scan_config",
    "tokenize",
]
