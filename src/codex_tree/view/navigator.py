"""Keyboard state machine for the interactive tree view."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .viewport import Viewport, clamp


class Mode(str, Enum):
    TREE = "tree"
    PREVIEW = "preview"


class Key(Enum):
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    EXPORT = "export"
    QUIT = "quit"
    OTHER = "other"


class Action(Enum):
    """What the render loop should do after a key press."""

    NONE = "none"
    EXPORT = "export"
    QUIT = "quit"


# Raw sequences as returned by click.getchar() on POSIX and Windows terminals
_KEYS: dict[str, Key] = {
    "\x1b[A": Key.UP,
    "\x1bOA": Key.UP,
    "\xe0H": Key.UP,
    "\x00H": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1bOB": Key.DOWN,
    "\xe0P": Key.DOWN,
    "\x00P": Key.DOWN,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\r\n": Key.ENTER,
    "s": Key.EXPORT,
    "S": Key.EXPORT,
    "q": Key.QUIT,
    "Q": Key.QUIT,
    "\x1b": Key.QUIT,
    "\x03": Key.QUIT,
}


def decode_key(raw: str) -> Key:
    return _KEYS.get(raw, Key.OTHER)


class Navigator:
    """Selection, viewport and preview scroll state for one session.

    ``preview_limit`` maps a line index to the largest preview scroll
    offset of that line's source file.
    """

    def __init__(
        self,
        total_lines: int,
        visible_rows: int,
        preview_limit: Callable[[int], int] = lambda _index: 0,
    ) -> None:
        self.mode = Mode.TREE
        self.selected = 0
        self.preview_offset = 0
        self.status: Optional[str] = None
        self.viewport = Viewport(visible_rows=visible_rows, total=total_lines)
        self._preview_limit = preview_limit

    @property
    def scroll_offset(self) -> int:
        return self.viewport.offset

    @property
    def total_lines(self) -> int:
        return self.viewport.total

    def handle(self, key: Key) -> Action:
        self.status = None
        if key is Key.QUIT:
            return Action.QUIT
        if key is Key.EXPORT:
            return Action.EXPORT
        if key is Key.ENTER:
            self.mode = Mode.PREVIEW if self.mode is Mode.TREE else Mode.TREE
            self.preview_offset = 0
        elif key in (Key.UP, Key.DOWN):
            step = -1 if key is Key.UP else 1
            if self.mode is Mode.TREE:
                self._move_selection(step)
            else:
                self._scroll_preview(step)
        return Action.NONE

    def _move_selection(self, step: int) -> None:
        if not self.total_lines:
            return
        self.selected = clamp(self.selected + step, 0, self.total_lines - 1)
        self.viewport.follow(self.selected)
        self.preview_offset = 0

    def _scroll_preview(self, step: int) -> None:
        limit = max(0, self._preview_limit(self.selected))
        self.preview_offset = clamp(self.preview_offset + step, 0, limit)
