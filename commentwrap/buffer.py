"""In-memory text buffer with line geometry and a point.

This is the host surface the wrappers operate on: range reads, line
bounds, in-line search, insertion/deletion, and a cursor position.
Lines end at ``\\n``; a ``\\r`` right before it belongs to the terminator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .columns import TAB_STOP, column_at, position_at_column


@dataclass(frozen=True)
class Line:
    """Half-open ``[start, end)`` view of one line, terminator excluded."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


class TextBuffer:
    """Mutable text with a point that shifts as text is edited around it."""

    def __init__(self, text: str = "", point: int = 0) -> None:
        self._text = text
        self._point = 0
        self.point = point

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r}, point={self._point})"

    @property
    def text(self) -> str:
        return self._text

    @property
    def point(self) -> int:
        return self._point

    @point.setter
    def point(self, pos: int) -> None:
        self._check(pos)
        self._point = pos

    @property
    def newline(self) -> str:
        """Terminator style for inserted lines, taken from the first existing one."""
        idx = self._text.find("\n")
        if idx > 0 and self._text[idx - 1] == "\r":
            return "\r\n"
        return "\n"

    def _check(self, pos: int) -> None:
        if pos < 0 or pos > len(self._text):
            raise IndexError(f"position {pos} outside buffer of length {len(self._text)}")

    def char_at(self, pos: int) -> str:
        """Return the character at ``pos``, or ``""`` past the buffer end."""
        if 0 <= pos < len(self._text):
            return self._text[pos]
        return ""

    def substring(self, start: int, end: int) -> str:
        self._check(start)
        self._check(end)
        return self._text[start:end]

    def line_start(self, pos: int) -> int:
        self._check(pos)
        return self._text.rfind("\n", 0, pos) + 1

    def line_end(self, pos: int) -> int:
        self._check(pos)
        idx = self._text.find("\n", pos)
        if idx < 0:
            return len(self._text)
        if idx > 0 and self._text[idx - 1] == "\r" and idx - 1 >= pos:
            return idx - 1
        return idx

    def line_at(self, pos: int) -> Line:
        return Line(self.line_start(pos), self.line_end(pos))

    def next_line(self, line: Line) -> Line | None:
        """Return the line after ``line``, or ``None`` when it is the last one."""
        idx = self._text.find("\n", line.end)
        if idx < 0:
            return None
        return self.line_at(idx + 1)

    def line_count(self) -> int:
        return self._text.count("\n") + 1

    def lines(self) -> list[Line]:
        out: list[Line] = []
        line: Line | None = self.line_at(0)
        while line is not None:
            out.append(line)
            line = self.next_line(line)
        return out

    def column_at(self, pos: int, tab_width: int = TAB_STOP) -> int:
        return column_at(self._text, self.line_start(pos), pos, tab_width)

    def end_column(self, line: Line, tab_width: int = TAB_STOP) -> int:
        return column_at(self._text, line.start, line.end, tab_width)

    def position_at_column(self, line: Line, column: int, tab_width: int = TAB_STOP) -> int:
        return position_at_column(self._text, line.start, line.end, column, tab_width)

    def find_in_line(self, line: Line, needle: str) -> int | None:
        """Return the first position of ``needle`` lying wholly inside ``line``."""
        if not needle:
            return None
        idx = self._text.find(needle, line.start, line.end)
        return idx if idx >= 0 else None

    def insert(self, pos: int, text: str) -> None:
        """Insert ``text`` at ``pos``; a point after ``pos`` moves right."""
        self._check(pos)
        if not text:
            return
        self._text = self._text[:pos] + text + self._text[pos:]
        if self._point > pos:
            self._point += len(text)

    def delete(self, start: int, end: int) -> str:
        """Remove and return ``[start, end)``; a point inside collapses to ``start``."""
        self._check(start)
        self._check(end)
        if end <= start:
            return ""
        removed = self._text[start:end]
        self._text = self._text[:start] + self._text[end:]
        if self._point >= end:
            self._point -= end - start
        elif self._point > start:
            self._point = start
        return removed
