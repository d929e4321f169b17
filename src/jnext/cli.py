from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from jnext.error import JSONParseError
from jnext.options import ParserOptions
from jnext.parser import iter_values, loads


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="jnext",
        description="jnext CLI for reading concatenated JSON values",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser diagnostics to stderr",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=None,
        help="Maximum nesting depth of a value",
    )
    subparsers = parser.add_subparsers(dest="command")

    scan_parser = subparsers.add_parser(
        "scan",
        help="Print every JSON value in the input with the offset following it",
    )
    scan_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        default=None,
        help="File to read, stdin when omitted",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Check that the input holds exactly one JSON value",
    )
    check_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        default=None,
        help="File to read, stdin when omitted",
    )

    args = parser.parse_args(argv)
    command: str | None = args.command

    if command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    options = (
        ParserOptions(max_depth=args.max_depth)
        if args.max_depth is not None
        else ParserOptions()
    )
    text = _read_input(args.file)

    if command == "scan":
        sys.exit(scan_command(text, options))
    if command == "check":
        sys.exit(check_command(text, options))


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def scan_command(text: str, options: ParserOptions) -> int:
    try:
        for result in iter_values(text, options=options):
            print(f"{result.offset}\t{json.dumps(result.value)}")
    except JSONParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def check_command(text: str, options: ParserOptions) -> int:
    try:
        loads(text, options=options)
    except JSONParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print("ok")
    return 0


if __name__ == "__main__":
    main()
