"""Splitting of unterminated string literals at the width limit.

A literal that still runs on past the end of its line is cut at the last
word start that leaves room for the ``line_end`` marker. The fragment is
closed with ``line_end`` and the rest moves to a new line opened with
``line_continue``. Fragments are never merged into an existing line below,
so separate literals stay separate. Literals that close on their own line
are left alone even when the line is too long.
"""

from __future__ import annotations

import logging

from .buffer import Line, TextBuffer
from .columns import text_display_width
from .comment import WrapResult
from .config import WrapConfig
from .scan import is_word_char, skip_whitespace_backward, word_bounds_at

logger = logging.getLogger(__name__)


def find_closing_delimiter(text: str, start: int, end: int, delimiter: str) -> int | None:
    """Return the first unescaped ``delimiter`` in ``[start, end)``.

    A backslash escapes the character after it.
    """
    idx = start
    while idx < end:
        if text[idx] == "\\":
            idx += 2
            continue
        if idx + len(delimiter) <= end and text.startswith(delimiter, idx):
            return idx
        idx += 1
    return None


class StringWrapper:
    """Split string literals that continue past the configured width.

    The defaults produce C-style adjacent literals (``"...."`` then
    ``"...."`` on the next line). Escaped-newline continuations use
    ``line_end="\\\\"`` with an empty ``line_continue``.
    """

    def __init__(
        self,
        config: WrapConfig | None = None,
        *,
        start_delim: str = '"',
        end_delim: str = '"',
        line_end: str = '"',
        line_continue: str = '"',
        align: bool = False,
    ) -> None:
        if not start_delim or not end_delim:
            raise ValueError("string delimiters must be non-empty")
        if "\n" in line_end or "\n" in line_continue:
            raise ValueError("line_end and line_continue must not span lines")
        self.config = config if config is not None else WrapConfig()
        self.start_delim = start_delim
        self.end_delim = end_delim
        self.line_end = line_end
        self.line_continue = line_continue
        self.align = align

    def wrap(self, buffer: TextBuffer, pos: int, point: int | None = None) -> WrapResult:
        """Split the literal opening at ``pos`` until every fragment fits."""
        use_buffer_point = point is None
        if point is None:
            point = buffer.point

        text = buffer.text
        if not text.startswith(self.start_delim, pos):
            return WrapResult(changed=False, point=point)

        line: Line = buffer.line_at(pos)
        content_start = pos + len(self.start_delim)
        if content_start > line.end:
            return WrapResult(changed=False, point=point)
        if find_closing_delimiter(text, content_start, line.end, self.end_delim) is not None:
            logger.debug("string at %d closes on its own line", pos)
            return WrapResult(changed=False, point=point)

        indent = buffer.column_at(pos, self.config.tab_width) if self.align else 0
        splits = 0
        # Each split moves at least one character of this line down.
        budget = len(line) + 1
        while splits < budget:
            step = self._split(buffer, line, content_start, point, indent)
            if step is None:
                break
            point, line, content_start = step
            splits += 1

        if use_buffer_point:
            buffer.point = point
        return WrapResult(changed=splits > 0, point=point, lines_wrapped=splits)

    def _split(
        self,
        buffer: TextBuffer,
        line: Line,
        content_start: int,
        point: int,
        indent: int,
    ) -> tuple[int, Line, int] | None:
        width = self.config.width
        tab_width = self.config.tab_width
        if buffer.end_column(line, tab_width) <= width:
            return None
        limit = width - text_display_width(self.line_end, tab_width=tab_width)
        if limit <= 0:
            return None

        text = buffer.text
        split = buffer.position_at_column(line, limit, tab_width)
        if not is_word_char(text[split]):
            # Whitespace stays at the end of the fragment it follows.
            split = skip_whitespace_backward(text, split, content_start)
        bounds = word_bounds_at(text, split, line.start, line.end)
        if bounds is not None:
            split = bounds[0]
        if split <= content_start:
            logger.debug("no split point inside string on line %d-%d", line.start, line.end)
            return None

        prefix = " " * indent + self.line_continue
        chunk = self.line_end + buffer.newline + prefix
        buffer.insert(split, chunk)
        if point >= split:
            point += len(chunk)

        next_content_start = split + len(chunk)
        return point, buffer.line_at(next_content_start), next_content_start
