"""Display-column measurement for buffer positions.

Maps offsets inside one line to terminal columns and back.
Tabs, combining marks, and wide characters follow terminal cell rules.
"""

from __future__ import annotations

import unicodedata

TAB_STOP = 8


def char_display_width(ch: str, col: int, tab_width: int = TAB_STOP) -> int:
    """Return column width for one character drawn at visual column ``col``.

    Tabs expand to the next ``tab_width`` stop, combining marks consume no
    columns, and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return tab_width - (col % tab_width)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def text_display_width(text: str, start_col: int = 0, tab_width: int = TAB_STOP) -> int:
    """Return columns consumed by ``text`` when drawn starting at ``start_col``."""
    col = start_col
    for ch in text:
        col += char_display_width(ch, col, tab_width)
    return col - start_col


def column_at(text: str, line_start: int, pos: int, tab_width: int = TAB_STOP) -> int:
    """Return the zero-based display column of ``pos`` within its line."""
    col = 0
    for idx in range(line_start, pos):
        col += char_display_width(text[idx], col, tab_width)
    return col


def position_at_column(
    text: str,
    line_start: int,
    line_end: int,
    column: int,
    tab_width: int = TAB_STOP,
) -> int:
    """Return the position of the character covering ``column``.

    A wide character or tab straddling ``column`` yields its own position.
    Lines shorter than ``column`` yield ``line_end``.
    """
    col = 0
    for idx in range(line_start, line_end):
        w = char_display_width(text[idx], col, tab_width)
        if col + w > column:
            return idx
        col += w
    return line_end
