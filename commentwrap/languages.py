"""Line-comment delimiters resolved through Pygments lexers.

Language detection belongs to the host; this module lets the command line
accept a lexer alias or a filename and turn it into a comment marker.
"""

from __future__ import annotations

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.util import ClassNotFound

# Keyed by lowercased ``Lexer.name``.
LINE_COMMENT_DELIMITERS: dict[str, str] = {
    "bash": "#",
    "c": "//",
    "c#": "//",
    "c++": "//",
    "clojure": ";",
    "common lisp": ";",
    "cmake": "#",
    "d": "//",
    "dart": "//",
    "docker": "#",
    "elixir": "#",
    "emacslisp": ";",
    "erlang": "%",
    "fortranfixed": "!",
    "fortran": "!",
    "go": "//",
    "groovy": "//",
    "haskell": "--",
    "ini": ";",
    "java": "//",
    "javascript": "//",
    "julia": "#",
    "kotlin": "//",
    "lua": "--",
    "makefile": "#",
    "matlab": "%",
    "nim": "#",
    "objective-c": "//",
    "perl": "#",
    "php": "//",
    "powershell": "#",
    "python": "#",
    "r": "#",
    "s": "#",
    "ruby": "#",
    "rust": "//",
    "scala": "//",
    "scheme": ";",
    "sql": "--",
    "swift": "//",
    "tex": "%",
    "toml": "#",
    "typescript": "//",
    "viml": '"',
    "yaml": "#",
    "zig": "//",
}


def _delimiter_for_lexer(lexer: Lexer) -> str | None:
    return LINE_COMMENT_DELIMITERS.get(str(lexer.name).lower())


def delimiter_for_language(name: str) -> str | None:
    """Return the line-comment marker for a Pygments lexer alias, if known."""
    try:
        lexer = get_lexer_by_name(name.strip().lower())
    except ClassNotFound:
        return None
    return _delimiter_for_lexer(lexer)


def delimiter_for_filename(filename: str) -> str | None:
    """Return the line-comment marker for ``filename``'s lexer, if known."""
    try:
        lexer = get_lexer_for_filename(filename)
    except ClassNotFound:
        return None
    return _delimiter_for_lexer(lexer)
