"""Public package surface for commentwrap.

Exports the wrappers, the buffer they edit, and ``main`` for programmatic
CLI invocation.
"""

from __future__ import annotations

from .buffer import Line, TextBuffer
from .comment import CommentWrapper, WrapResult, wrap_buffer, wrap_comment_at_position
from .config import WrapConfig
from .strings import StringWrapper
from .trigger import InteractiveTrigger


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "CommentWrapper",
    "InteractiveTrigger",
    "Line",
    "StringWrapper",
    "TextBuffer",
    "WrapConfig",
    "WrapResult",
    "main",
    "wrap_buffer",
    "wrap_comment_at_position",
]
