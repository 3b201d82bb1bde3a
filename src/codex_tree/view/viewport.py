"""Scroll bookkeeping for a fixed-height window over a list of lines."""

from __future__ import annotations

from dataclasses import dataclass


def scroll_to_show(selected: int, offset: int, visible_rows: int) -> int:
    """Smallest change to ``offset`` that keeps ``selected`` on screen."""
    if selected < offset:
        return selected
    if selected >= offset + visible_rows:
        return selected - visible_rows + 1
    return offset


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class Viewport:
    """A window of ``visible_rows`` lines over ``total`` lines."""

    visible_rows: int
    total: int
    offset: int = 0

    def follow(self, selected: int) -> int:
        self.offset = scroll_to_show(selected, self.offset, self.visible_rows)
        return self.offset

    def window(self) -> range:
        return range(self.offset, min(self.offset + self.visible_rows, self.total))

    @property
    def hidden_below(self) -> int:
        return max(0, self.total - (self.offset + self.visible_rows))
