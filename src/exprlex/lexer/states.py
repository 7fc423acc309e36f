"""Scanner states and character classes.

This module defines the finite state machine states for the tokenizer
and the character tables its handlers consult.
"""

from __future__ import annotations

from enum import Enum, auto

from exprlex.tokens import TokenKind


class ScanState(Enum):
    """Tokenizer DFA states.

    Each call to Tokenizer.next_token() starts in START and runs until a
    handler emits a token or reaches END:
    - START: Skipping whitespace, choosing the token to begin
    - INTEGER_PART: Digits before the decimal point
    - FRACTION_PART: Digits after the decimal point
    - SIGN_SEEN: After + or -, deciding between operator and signed literal
    - STAR_SEEN: After *, deciding between MULTIPLY and EXPONENT
    - IDENTIFIER_BODY: Letters and digits after the first letter
    - END: End of input reached with no token begun

    """

    START = auto()
    INTEGER_PART = auto()
    FRACTION_PART = auto()
    SIGN_SEEN = auto()
    STAR_SEEN = auto()
    IDENTIFIER_BODY = auto()
    END = auto()


# Returned by peek at the end of the source. No real character is empty,
# so every state has a defined transition on it.
END_OF_INPUT = ""

DECIMAL_POINT = "."
STAR = "*"

# A number may only start with an ASCII digit
START_DIGITS: frozenset[str] = frozenset("0123456789")

# Characters that form a complete token on their own
SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    "/": TokenKind.DIVIDE,
    "=": TokenKind.EQUALS,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

# Operator emitted when a sign is not followed by a digit
SIGN_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
}


def is_whitespace(char: str) -> bool:
    return char.isspace()


def is_digit(char: str) -> bool:
    """Digit inside a number or identifier (any Unicode decimal digit)."""
    return char.isdecimal()


def is_letter(char: str) -> bool:
    return char.isalpha()


__all__ = [
    "DECIMAL_POINT",
    "END_OF_INPUT",
    "SIGN_KINDS",
    "SINGLE_CHAR_KINDS",
    "STAR",
    "START_DIGITS",
    "ScanState",
    "is_digit",
    "is_letter",
    "is_whitespace",
]
