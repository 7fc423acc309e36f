"""Line-by-line driver: read lines, dump tokens, stop on the first error.

    $ echo "x = 2**3" | python -m exprlex
    IDENTIFIER     	x
    EQUALS         	=
    REAL_NUMBER    	2
    EXPONENT       	**
    REAL_NUMBER    	3
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from exprlex.config import ScanConfig
from exprlex.errors import ConfigError, InvalidCharacterError
from exprlex.renderers.dump import DumpRenderer
from exprlex.session import scan_lines
from exprlex.utils.logger import ROOT_LOGGER_NAME, get_logger

logger = get_logger(__name__)


def setup_logging(level: int) -> None:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)
    root.setLevel(level)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from *stream* without their terminators."""
    for raw in stream:
        yield raw.rstrip("\r\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprlex",
        description="Tokenize arithmetic/assignment expressions line by line",
    )
    parser.add_argument("source", nargs="?", help="Input file (default: stdin)")
    parser.add_argument("--debug", action="store_true", help="Print debugging messages")
    parser.add_argument(
        "--resync",
        action="store_true",
        help="Report every invalid character and keep scanning",
    )
    parser.add_argument("--start-line", type=int, default=1, help="Number of the first line")
    parser.add_argument("--width", type=int, default=15, help="Width of the kind column")
    return parser


def run(
    stream: TextIO,
    output: TextIO,
    *,
    config: ScanConfig,
    start_line: int = 1,
    source_file: str | None = None,
) -> int:
    """Scan *stream* and write the dump and diagnostics to *output*.

    Returns:
        0 if every line scanned cleanly, 1 if an invalid character was seen
    """
    renderer = DumpRenderer(width=config.dump_width)
    status = 0
    for result in scan_lines(
        read_lines(stream), start_line, source_file=source_file, config=config
    ):
        for token in result.tokens:
            if token.is_invalid:
                output.write(InvalidCharacterError.from_token(token).describe() + "\n")
                status = 1
            else:
                output.write(renderer.render_token(token) + "\n")
    return status


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        setup_logging(logging.DEBUG)
        logger.debug("arguments: %s", vars(args))

    try:
        config = ScanConfig(resync=args.resync, dump_width=args.width)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    if args.start_line < 1:
        logger.error("--start-line must be at least 1, got %d", args.start_line)
        return 2

    if args.source is None:
        return run(sys.stdin, sys.stdout, config=config, start_line=args.start_line)

    try:
        with open(args.source, encoding="utf-8") as fp:
            return run(
                fp,
                sys.stdout,
                config=config,
                start_line=args.start_line,
                source_file=args.source,
            )
    except OSError as e:
        logger.error("cannot read %s: %s", args.source, e)
        return 2
