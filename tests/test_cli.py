"""Tests for the line-by-line command-line driver."""

import io

import pytest

from exprlex.cli import main, read_lines, run
from exprlex.config import ScanConfig


class TestRun:
    def test_dumps_every_line(self) -> None:
        output = io.StringIO()
        status = run(io.StringIO("x = 1\ny = x ** 2\n"), output, config=ScanConfig())
        assert status == 0
        assert output.getvalue().splitlines() == [
            "IDENTIFIER     \tx",
            "EQUALS         \t=",
            "REAL_NUMBER    \t1",
            "IDENTIFIER     \ty",
            "EQUALS         \t=",
            "IDENTIFIER     \tx",
            "EXPONENT       \t**",
            "REAL_NUMBER    \t2",
        ]

    def test_stops_at_invalid_character(self) -> None:
        output = io.StringIO()
        status = run(io.StringIO("a\nb # c\nd\n"), output, config=ScanConfig())
        assert status == 1
        assert output.getvalue().splitlines() == [
            "IDENTIFIER     \ta",
            "IDENTIFIER     \tb",
            "Invalid character '#' at line 2 column 3",
        ]

    def test_resync_reports_all(self) -> None:
        output = io.StringIO()
        status = run(io.StringIO("a $\n; b\n"), output, config=ScanConfig(resync=True))
        assert status == 1
        assert output.getvalue().splitlines() == [
            "IDENTIFIER     \ta",
            "Invalid character '$' at line 1 column 3",
            "Invalid character ';' at line 2 column 1",
            "IDENTIFIER     \tb",
        ]

    def test_start_line(self) -> None:
        output = io.StringIO()
        run(io.StringIO("ok\n@\n"), output, config=ScanConfig(), start_line=20)
        assert output.getvalue().splitlines()[-1] == "Invalid character '@' at line 21 column 1"

    def test_width_from_config(self) -> None:
        output = io.StringIO()
        run(io.StringIO("/"), output, config=ScanConfig(dump_width=7))
        assert output.getvalue() == "DIVIDE \t/\n"


class TestReadLines:
    def test_strips_terminators(self) -> None:
        assert list(read_lines(io.StringIO("a\r\nb\n\nc"))) == ["a", "b", "", "c"]


class TestMain:
    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("2**3\n"))
        assert main([]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "REAL_NUMBER    \t2",
            "EXPONENT       \t**",
            "REAL_NUMBER    \t3",
        ]

    def test_file(self, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "calc.txt"
        source.write_text("(a+1)\n", encoding="utf-8")
        assert main([str(source)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "LEFT_PAREN     \t(",
            "IDENTIFIER     \ta",
            "REAL_NUMBER    \t+1",
            "RIGHT_PAREN    \t)",
        ]

    def test_invalid_exit_status(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("a # b\n"))
        assert main([]) == 1
        assert capsys.readouterr().out.splitlines()[-1] == "Invalid character '#' at line 1 column 3"

    def test_missing_file(self, tmp_path) -> None:
        assert main([str(tmp_path / "nope.txt")]) == 2

    def test_bad_width(self) -> None:
        assert main(["--width", "0"]) == 2

    def test_bad_start_line(self) -> None:
        assert main(["--start-line", "0"]) == 2
