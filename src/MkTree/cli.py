"""Command-line entry point: outline on stdin, tree on stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from MkTree.outline_converter import convert_outline
from MkTree.outline_parser import OutlineError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mktree",
        description=(
            "Render a '#'-indented outline as an ASCII tree. "
            "Each leading '#' nests the line one level deeper."
        ),
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Outline file to read (default: stdin)",
    )
    parser.add_argument(
        "--fence",
        action="store_true",
        help="Wrap the tree in a Markdown code fence",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the tree to this file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )
    return parser.parse_args(argv)


def _read_input(source: str) -> str:
    # utf-8-sig drops a leading byte-order mark
    if source == "-":
        return sys.stdin.buffer.read().decode("utf-8-sig")
    return Path(source).read_text(encoding="utf-8-sig")


def _write_output(text: str) -> None:
    # Bypass the locale encoding of sys.stdout
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8"))
    sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        result = convert_outline(text, fenced=args.fence)
    except OutlineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result is None:
        logger.debug("Outline is empty; nothing to write")
        return 0

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
    else:
        _write_output(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
