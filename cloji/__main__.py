"""Run a Cloji script file: `python -m cloji script.clj`."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from cloji.config import get_log_level
from cloji.errors import ClojiSyntaxError
from cloji.interpreter import execute
from cloji.types.undefined import is_nullish


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cloji", description="Run a Cloji script.")
    parser.add_argument("file", help="script path, or - to read stdin")
    parser.add_argument(
        "--print-result",
        action="store_true",
        help="print the value of the last expression",
    )
    return parser


def read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    try:
        source = read_source(args.file)
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    try:
        result = execute(source, throw_on_error=False)
    except ClojiSyntaxError as e:
        print(f"SyntaxError: {e}", file=sys.stderr)
        return 1

    if not result.ok:
        print(f"{type(result.error).__name__}: {result.error_message}", file=sys.stderr)
        return 1
    if args.print_result and not is_nullish(result.value):
        print(result.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
