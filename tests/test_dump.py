"""Tests for the fixed-width token dump."""

import io

import pytest

from exprlex import DumpRenderer, render_dump, scan_line


class TestDumpRenderer:
    def test_default_width(self) -> None:
        output = render_dump(scan_line("x = 3.14").tokens)
        assert output == (
            "IDENTIFIER     \tx\n"
            "EQUALS         \t=\n"
            "REAL_NUMBER    \t3.14\n"
        )

    def test_custom_width(self) -> None:
        output = render_dump(scan_line("(").tokens, width=12)
        assert output == "LEFT_PAREN  \t(\n"

    def test_narrow_width_does_not_truncate(self) -> None:
        output = render_dump(scan_line("**").tokens, width=1)
        assert output == "EXPONENT\t**\n"

    def test_empty(self) -> None:
        assert render_dump(()) == ""

    def test_signed_literal_lexeme_kept(self) -> None:
        assert render_dump(scan_line("-7").tokens) == "REAL_NUMBER    \t-7\n"

    def test_write_streams(self) -> None:
        buffer = io.StringIO()
        DumpRenderer().write(scan_line("a/b").tokens, buffer)
        assert buffer.getvalue().splitlines() == [
            "IDENTIFIER     \ta",
            "DIVIDE         \t/",
            "IDENTIFIER     \tb",
        ]

    def test_rejects_zero_width(self) -> None:
        with pytest.raises(ValueError):
            DumpRenderer(width=0)
