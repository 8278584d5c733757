"""Command-line front door for commentwrap.

Reads source text on stdin, wraps overflowing line comments, and writes the
result to stdout. Width and delimiter come from flags, then saved settings.
"""

from __future__ import annotations

import argparse
import logging
import sys

from . import settings
from .buffer import TextBuffer
from .comment import CommentWrapper
from .config import DEFAULT_DELIMITER, DEFAULT_WIDTH, WrapConfig
from .languages import delimiter_for_filename, delimiter_for_language


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def resolve_delimiter(args: argparse.Namespace) -> str:
    """Pick the comment marker from flags, saved settings, or the default."""
    if args.delimiter:
        return args.delimiter
    if args.language:
        delimiter = delimiter_for_language(args.language)
        if delimiter is None:
            raise SystemExit(f"No line-comment delimiter known for language: {args.language}")
        return delimiter
    if args.filename:
        delimiter = delimiter_for_filename(args.filename)
        if delimiter is None:
            raise SystemExit(f"No line-comment delimiter known for file: {args.filename}")
        return delimiter
    return settings.load_delimiter() or DEFAULT_DELIMITER


def wrap_text(source: str, config: WrapConfig) -> str:
    """Return ``source`` with every overflowing comment line wrapped."""
    buffer = TextBuffer(source)
    CommentWrapper(config).wrap_all(buffer)
    return buffer.text


def main() -> None:
    """Parse CLI arguments and filter stdin to stdout."""
    parser = argparse.ArgumentParser(
        description="Wrap line comments that run past a column limit (stdin to stdout)."
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help=f"Maximum column (default: saved setting or {DEFAULT_WIDTH}).",
    )
    parser.add_argument("--delimiter", default=None, help=f"Line-comment marker (default: {DEFAULT_DELIMITER}).")
    parser.add_argument("--language", default=None, help="Pygments lexer alias used to pick the delimiter.")
    parser.add_argument("--filename", default=None, help="Filename used to pick the delimiter via Pygments.")
    parser.add_argument(
        "--tab-width",
        type=_positive_int,
        default=8,
        help="Columns between tab stops (default: 8).",
    )
    parser.add_argument("--save-width", action="store_true", help="Remember --width as the default.")
    parser.add_argument(
        "--save-delimiter",
        action="store_true",
        help="Remember the resolved delimiter as the default.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log wrap decisions to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr)

    width = args.width if args.width is not None else settings.load_width() or DEFAULT_WIDTH
    if args.save_width:
        if args.width is None:
            raise SystemExit("--save-width requires --width.")
        settings.save_width(args.width)

    try:
        config = WrapConfig(width=width, delimiter=resolve_delimiter(args), tab_width=args.tab_width)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    if args.save_delimiter:
        settings.save_delimiter(config.delimiter)

    sys.stdout.write(wrap_text(sys.stdin.read(), config))


if __name__ == "__main__":
    main()
