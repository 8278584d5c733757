"""Line scanning helpers used to pick wrap points.

Covers delimiter lookup, word bounds, and comment content spacing.
All helpers are pure functions over ``text`` and explicit line bounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from .columns import TAB_STOP, column_at


def is_word_char(ch: str) -> bool:
    """Return whether ``ch`` belongs to a word (any non-whitespace character)."""
    return bool(ch) and not ch.isspace()


def find_delimiter(text: str, line_start: int, line_end: int, delimiter: str) -> int | None:
    """Return the first position of ``delimiter`` inside ``[line_start, line_end)``.

    Matching is purely textual, so a marker embedded in a longer token or a
    string literal still counts.
    """
    if not delimiter:
        return None
    idx = text.find(delimiter, line_start, line_end)
    return idx if idx >= 0 else None


def word_bounds_at(text: str, pos: int, line_start: int, line_end: int) -> tuple[int, int] | None:
    """Return ``(start, end)`` of the word containing or ending at ``pos``.

    A word never extends past the line bounds. ``None`` means ``pos`` sits in
    whitespace with no word immediately before it.
    """
    if line_start <= pos < line_end and is_word_char(text[pos]):
        anchor = pos
    elif line_start < pos <= line_end and is_word_char(text[pos - 1]):
        anchor = pos - 1
    else:
        return None

    start = anchor
    while start > line_start and is_word_char(text[start - 1]):
        start -= 1
    end = anchor + 1
    while end < line_end and is_word_char(text[end]):
        end += 1
    return start, end


def next_word_start(text: str, pos: int, line_end: int) -> int | None:
    """Return the first word start at or after ``pos`` on the line."""
    idx = pos
    while idx < line_end and not is_word_char(text[idx]):
        idx += 1
    return idx if idx < line_end else None


def skip_whitespace_backward(text: str, pos: int, limit: int) -> int:
    """Move ``pos`` left over spaces and tabs without passing ``limit``."""
    while pos > limit and text[pos - 1] in " \t":
        pos -= 1
    return pos


def spacing_after(text: str, delimiter_pos: int, delimiter_len: int, line_end: int) -> int:
    """Count characters between the delimiter and the first letter or digit.

    Spaces, punctuation, and bullet markers are all skipped. With no
    alphanumeric character left on the line the count runs to ``line_end``.
    """
    idx = delimiter_pos + delimiter_len
    count = 0
    while idx < line_end and not text[idx].isalnum():
        idx += 1
        count += 1
    return count


@dataclass(frozen=True)
class IndentationProfile:
    """Where the delimiter sits and how far its content is pushed right."""

    delimiter_pos: int
    delimiter_len: int
    delimiter_indent: int
    content_indent: int

    @property
    def delimiter_end(self) -> int:
        return self.delimiter_pos + self.delimiter_len

    @property
    def content_start(self) -> int:
        return self.delimiter_end + self.content_indent

    def has_content(self, line_end: int) -> bool:
        return self.content_start < line_end

    @classmethod
    def measure(
        cls,
        text: str,
        line_start: int,
        line_end: int,
        delimiter_pos: int,
        delimiter_len: int,
        tab_width: int = TAB_STOP,
    ) -> IndentationProfile:
        return cls(
            delimiter_pos=delimiter_pos,
            delimiter_len=delimiter_len,
            delimiter_indent=column_at(text, line_start, delimiter_pos, tab_width),
            content_indent=spacing_after(text, delimiter_pos, delimiter_len, line_end),
        )
