"""Fixed-width token dump.

One line per token: the kind name left-aligned in a fixed-width column,
a tab, then the lexeme.

Example:
    >>> from exprlex import scan_line, render_dump
    >>> print(render_dump(scan_line("x = 2").tokens), end="")
    IDENTIFIER     \tx
    EQUALS         \t=
    REAL_NUMBER    \t2
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from exprlex.tokens import Token

DEFAULT_WIDTH = 15


class DumpRenderer:
    """Render tokens as kind/lexeme lines."""

    __slots__ = ("_width",)

    def __init__(self, width: int = DEFAULT_WIDTH) -> None:
        if width < 1:
            raise ValueError(f"width must be positive, got {width}")
        self._width = width

    def render_token(self, token: Token) -> str:
        return f"{token.kind.name:<{self._width}}\t{token.lexeme}"

    def render(self, tokens: Iterable[Token]) -> str:
        lines = [self.render_token(token) + "\n" for token in tokens]
        return "".join(lines)

    def write(self, tokens: Iterable[Token], output: TextIO) -> None:
        """Stream tokens to *output* as they arrive."""
        for token in tokens:
            output.write(self.render_token(token))
            output.write("\n")


def render_dump(tokens: Iterable[Token], *, width: int = DEFAULT_WIDTH) -> str:
    """Render tokens with the default DumpRenderer."""
    return DumpRenderer(width=width).render(tokens)
