"""Tests for one-line scanning sessions and line threading."""

from __future__ import annotations

import pytest

from exprlex import ScanConfig, ScanResult, TokenKind, scan_line, scan_lines, tokenize
from exprlex.errors import InvalidCharacterError


class TestScanLine:
    def test_clean_line(self) -> None:
        result = scan_line("x = 3.14", 4)
        assert isinstance(result, ScanResult)
        assert [t.lexeme for t in result] == ["x", "=", "3.14"]
        assert len(result) == 3
        assert result.ok
        assert result.invalid is None
        assert result.error is None
        assert (result.start_line, result.end_line, result.next_line) == (4, 4, 5)
        assert result.source == "x = 3.14"

    def test_invalid_line(self) -> None:
        result = scan_line("a # b", 2)
        assert not result.ok
        assert result.tokens[-1] is result.invalid
        assert result.invalid.lexeme == "#"
        error = result.error
        assert isinstance(error, InvalidCharacterError)
        assert (error.char, error.lineno, error.col_offset) == ("#", 2, 3)

    def test_raise_for_invalid(self) -> None:
        with pytest.raises(InvalidCharacterError, match="2:3 invalid character '#'"):
            scan_line("a # b", 2).raise_for_invalid()

    def test_raise_for_invalid_clean_line(self) -> None:
        scan_line("a + b").raise_for_invalid()

    def test_embedded_newlines_advance_end_line(self) -> None:
        result = scan_line("a\nb\nc", 10)
        assert result.end_line == 12
        assert result.next_line == 13

    def test_whitespace_only(self) -> None:
        result = scan_line("   ")
        assert result.tokens == ()
        assert result.ok

    def test_resync_collects_all_invalids(self) -> None:
        result = scan_line("a $ b ; c", config=ScanConfig(resync=True))
        assert [t.kind for t in result] == [
            TokenKind.IDENTIFIER,
            TokenKind.INVALID,
            TokenKind.IDENTIFIER,
            TokenKind.INVALID,
            TokenKind.IDENTIFIER,
        ]
        assert result.invalid.lexeme == "$"

    def test_source_file_carried(self) -> None:
        result = scan_line("a #", source_file="calc.txt")
        assert str(result.error) == "calc.txt:1:3 invalid character '#'"

    def test_result_is_frozen(self) -> None:
        result = scan_line("x")
        with pytest.raises(AttributeError):
            result.end_line = 9  # type: ignore[misc]


class TestScanLines:
    def test_threads_line_numbers(self) -> None:
        results = list(scan_lines(["x = 1", "y = 2", "z = x"]))
        assert [r.start_line for r in results] == [1, 2, 3]
        assert [r.tokens[0].lineno for r in results] == [1, 2, 3]

    def test_custom_start_line(self) -> None:
        results = list(scan_lines(["a", "b"], 100))
        assert [r.start_line for r in results] == [100, 101]

    def test_stops_at_first_invalid_line(self) -> None:
        results = list(scan_lines(["a", "b # c", "d"]))
        assert len(results) == 2
        assert not results[-1].ok
        assert results[-1].error.describe() == "Invalid character '#' at line 2 column 3"

    def test_resync_continues_past_invalid_line(self) -> None:
        results = list(scan_lines(["a", "b # c", "d"], config=ScanConfig(resync=True)))
        assert len(results) == 3
        assert results[2].tokens[0].lineno == 3

    def test_empty_lines_still_count(self) -> None:
        results = list(scan_lines(["", "", "q"]))
        assert results[2].tokens[0].lineno == 3

    def test_does_not_read_past_invalid_line(self) -> None:
        def lines():
            yield "a #"
            raise AssertionError("read past the invalid line")

        results = list(scan_lines(lines()))
        assert [r.ok for r in results] == [False]


class TestTokenizeShorthand:
    def test_tokenize(self) -> None:
        assert [t.kind for t in tokenize("2**3")] == [
            TokenKind.REAL_NUMBER,
            TokenKind.EXPONENT,
            TokenKind.REAL_NUMBER,
        ]

    def test_tokenize_line(self) -> None:
        assert tokenize("y", 5)[0].lineno == 5
