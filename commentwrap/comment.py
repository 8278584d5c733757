"""Line-comment wrapping.

``CommentWrapper`` moves the words of a comment that run past the configured
width onto the following line. An existing continuation comment below is
extended in place; otherwise a fresh comment line is opened with the same
delimiter and content indentation. Whatever line received the text is then
checked again, so one overflow can ripple down through several lines.

Lines that fit, lines without the delimiter, and overflow that consists of
the comment's first word alone are left untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .buffer import Line, TextBuffer
from .config import WrapConfig
from .scan import (
    IndentationProfile,
    find_delimiter,
    is_word_char,
    next_word_start,
    skip_whitespace_backward,
    word_bounds_at,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrapResult:
    """Outcome of one wrap call: whether text moved and where the point ended."""

    changed: bool
    point: int
    lines_wrapped: int = 0


@dataclass(frozen=True)
class _Overflow:
    boundary: int
    word_start: int
    text: str
    profile: IndentationProfile


class CommentWrapper:
    """Wrap overflowing line comments for one ``WrapConfig``."""

    def __init__(self, config: WrapConfig | None = None) -> None:
        self.config = config if config is not None else WrapConfig()

    def wrap(self, buffer: TextBuffer, pos: int, point: int | None = None) -> WrapResult:
        """Wrap the line holding ``pos`` and cascade into the lines below.

        ``point`` defaults to the buffer's own point, which is then updated in
        place. A point inside the moved text travels with it.
        """
        use_buffer_point = point is None
        if point is None:
            point = buffer.point

        line: Line | None = buffer.line_at(pos)
        wrapped = 0
        # Every created line holds at least one moved character, so existing
        # lines plus buffer characters bound the cascade.
        budget = buffer.line_count() + len(buffer)
        while line is not None and wrapped < budget:
            step = self._wrap_line(buffer, line, point)
            if step is None:
                break
            point, line = step
            wrapped += 1
        if line is not None and wrapped >= budget:
            logger.debug("cascade stopped after %d lines", wrapped)

        if use_buffer_point:
            buffer.point = point
        return WrapResult(changed=wrapped > 0, point=point, lines_wrapped=wrapped)

    def wrap_all(self, buffer: TextBuffer) -> WrapResult:
        """Wrap every line of ``buffer`` from top to bottom."""
        point = buffer.point
        total = 0
        line: Line | None = buffer.line_at(0)
        while line is not None:
            result = self.wrap(buffer, line.start, point)
            point = result.point
            total += result.lines_wrapped
            line = buffer.next_line(buffer.line_at(line.start))
        buffer.point = point
        return WrapResult(changed=total > 0, point=point, lines_wrapped=total)

    def _find_overflow(self, buffer: TextBuffer, line: Line) -> _Overflow | None:
        config = self.config
        text = buffer.text
        if buffer.end_column(line, config.tab_width) <= config.width:
            return None

        delimiter_pos = find_delimiter(text, line.start, line.end, config.delimiter)
        if delimiter_pos is None:
            logger.debug("line %d-%d overflows but has no %r", line.start, line.end, config.delimiter)
            return None
        profile = IndentationProfile.measure(
            text,
            line.start,
            line.end,
            delimiter_pos,
            len(config.delimiter),
            config.tab_width,
        )

        at_width = buffer.position_at_column(line, config.width, config.tab_width)
        if is_word_char(buffer.char_at(at_width)):
            bounds = word_bounds_at(text, at_width, line.start, line.end)
            word_start = bounds[0] if bounds is not None else None
        else:
            word_start = next_word_start(text, at_width, line.end)
        if word_start is None or word_start <= profile.content_start:
            logger.debug("no wrap point before column %d on line %d-%d", config.width, line.start, line.end)
            return None

        boundary = skip_whitespace_backward(text, word_start, profile.delimiter_end)
        overflow = text[word_start:line.end].rstrip(" \t")
        return _Overflow(boundary=boundary, word_start=word_start, text=overflow, profile=profile)

    def _continuation_profile(self, buffer: TextBuffer, line: Line | None) -> IndentationProfile | None:
        if line is None:
            return None
        delimiter_pos = buffer.find_in_line(line, self.config.delimiter)
        if delimiter_pos is None:
            return None
        profile = IndentationProfile.measure(
            buffer.text,
            line.start,
            line.end,
            delimiter_pos,
            len(self.config.delimiter),
            self.config.tab_width,
        )
        # A bare delimiter line separates paragraphs; it is not a continuation.
        return profile if profile.has_content(line.end) else None

    def _wrap_line(self, buffer: TextBuffer, line: Line, point: int) -> tuple[int, Line] | None:
        overflow = self._find_overflow(buffer, line)
        if overflow is None:
            return None

        relocate = overflow.boundary < point <= line.end
        offset = min(max(point - overflow.word_start, 0), len(overflow.text))
        removed = line.end - overflow.boundary
        buffer.delete(overflow.boundary, line.end)
        if not relocate and point > line.end:
            point -= removed
        current = Line(line.start, overflow.boundary)

        below = buffer.next_line(current)
        below_profile = self._continuation_profile(buffer, below)
        if below is not None and below_profile is not None:
            pad = max(0, overflow.profile.content_indent - below_profile.content_indent)
            insert_at = below_profile.content_start
            chunk = " " * pad + overflow.text + " "
            text_at = insert_at + pad
            logger.debug("merging %d chars into line at %d", len(overflow.text), below.start)
        else:
            profile = overflow.profile
            prefix = " " * profile.delimiter_indent + self.config.delimiter + " " * profile.content_indent
            if below is None:
                insert_at = current.end
                chunk = buffer.newline + prefix + overflow.text
                text_at = insert_at + len(buffer.newline) + len(prefix)
            else:
                insert_at = below.start
                chunk = prefix + overflow.text + buffer.newline
                text_at = insert_at + len(prefix)
            logger.debug("opening comment line at %d for %d chars", insert_at, len(overflow.text))

        buffer.insert(insert_at, chunk)
        if relocate:
            point = text_at + offset
        elif point > current.end and point >= insert_at:
            point += len(chunk)
        return point, buffer.line_at(text_at)


def wrap_comment_at_position(
    buffer: TextBuffer,
    pos: int,
    config: WrapConfig | None = None,
) -> WrapResult:
    """Wrap the comment on the line holding ``pos`` and move the buffer point."""
    return CommentWrapper(config).wrap(buffer, pos)


def wrap_buffer(buffer: TextBuffer, config: WrapConfig | None = None) -> WrapResult:
    """Wrap every overflowing comment line in ``buffer``."""
    return CommentWrapper(config).wrap_all(buffer)
