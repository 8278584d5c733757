"""Wrap configuration value passed to every wrapper instance."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .columns import TAB_STOP

DEFAULT_WIDTH = 80
DEFAULT_DELIMITER = "//"


@dataclass(frozen=True)
class WrapConfig:
    """Maximum column, line-comment marker, and tab stop for one wrapper."""

    width: int = DEFAULT_WIDTH
    delimiter: str = DEFAULT_DELIMITER
    tab_width: int = TAB_STOP

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise ValueError(f"width must be a positive integer, got {self.width!r}")
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if "\n" in self.delimiter:
            raise ValueError("delimiter must not span lines")
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int) or self.tab_width <= 0:
            raise ValueError(f"tab_width must be a positive integer, got {self.tab_width!r}")

    def with_width(self, width: int) -> WrapConfig:
        return replace(self, width=width)

    def with_delimiter(self, delimiter: str) -> WrapConfig:
        return replace(self, delimiter=delimiter)
