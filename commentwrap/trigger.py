"""Keystroke adapter that wraps comments while the user types.

One ``InteractiveTrigger`` belongs to one editing context and carries that
context's on/off flag. Hosts forward every typed key to ``handle_key``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .buffer import TextBuffer
from .comment import CommentWrapper

logger = logging.getLogger(__name__)

DEFAULT_TRIGGER_KEYS = (" ",)


class InteractiveTrigger:
    """Run ``CommentWrapper`` around word-boundary keystrokes."""

    def __init__(
        self,
        wrapper: CommentWrapper | None = None,
        trigger_keys: Iterable[str] = DEFAULT_TRIGGER_KEYS,
        enabled: bool = True,
    ) -> None:
        self.wrapper = wrapper if wrapper is not None else CommentWrapper()
        self.trigger_keys = frozenset(trigger_keys)
        self.enabled = enabled

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False

    def toggle(self) -> bool:
        """Flip the flag and return the new state."""
        self.enabled = not self.enabled
        return self.enabled

    def handle_key(self, buffer: TextBuffer, key: str) -> bool:
        """Insert ``key`` at the point, wrapping around it when enabled.

        Returns ``False`` for keys that are not triggers so the host can
        dispatch them normally.
        """
        if key not in self.trigger_keys:
            return False
        if not self.enabled:
            logger.debug("trigger disabled, inserting %r", key)
            self._insert(buffer, key)
            return True

        if buffer.point == buffer.line_end(buffer.point):
            # Wrap before appending so the new text starts on a line with room.
            self.wrapper.wrap(buffer, buffer.point)
            self._insert(buffer, key)
        else:
            # Mid-line typing: the point is carried through the wrap with its text.
            self._insert(buffer, key)
            self.wrapper.wrap(buffer, buffer.point)
        return True

    @staticmethod
    def _insert(buffer: TextBuffer, key: str) -> None:
        pos = buffer.point
        buffer.insert(pos, key)
        buffer.point = pos + len(key)
