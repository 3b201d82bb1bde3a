"""Scrollable source preview of the selected class's file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from rich.text import Text

from .highlight import SyntaxHighlighter, highlighter_for
from .viewport import clamp

logger = logging.getLogger(__name__)

HighlighterFactory = Callable[[str], Optional[SyntaxHighlighter]]

LINE_NUMBER_WIDTH = 4
SEPARATOR = " │ "


class FilePreview:
    """Renders a fixed-height window of a source file with line numbers."""

    def __init__(
        self,
        height: int = 16,
        width: int = 70,
        highlighter_factory: HighlighterFactory = highlighter_for,
    ) -> None:
        self.height = height
        self.width = width
        self._highlighter_factory = highlighter_factory

    @property
    def column_width(self) -> int:
        """Width of the preview column including line numbers and separator."""
        return self.width + LINE_NUMBER_WIDTH + len(SEPARATOR)

    def max_scroll_offset(self, file_path: str | None) -> int:
        """Largest useful scroll offset; 0 when the file cannot be read."""
        if not file_path or not Path(file_path).is_file():
            return 0
        try:
            return max(0, len(self._read_lines(file_path)) - self.height)
        except OSError:
            return 0

    def render(self, file_path: str | None, scroll_offset: int) -> Text:
        """Preview text starting ``scroll_offset`` lines into the file.

        A missing or unreadable file yields an inline message instead.
        """
        if not file_path or not Path(file_path).is_file():
            return Text("File not found", style="dim")

        try:
            lines = self._read_lines(file_path)
        except OSError as exc:
            logger.debug("Preview of %s failed: %s", file_path, exc)
            return Text(f"Error reading file: {exc.strerror or exc}", style="red")

        start = clamp(scroll_offset, 0, max(0, len(lines) - self.height))
        end = min(start + self.height, len(lines))
        highlighter = self._highlighter_factory(file_path)

        preview = Text()
        for index in range(start, end):
            if index > start:
                preview.append("\n")
            preview.append(f"{index + 1:>{LINE_NUMBER_WIDTH}}", style="dim")
            preview.append(SEPARATOR)
            preview.append_text(self._format_line(lines[index], highlighter))

        if end < len(lines):
            preview.append(f"\n... ({len(lines) - end} more lines below)", style="dim")

        return preview

    def _format_line(self, line: str, highlighter: Optional[SyntaxHighlighter]) -> Text:
        # Truncate before highlighting so the width is measured on source text
        content = line.expandtabs(4)
        if len(content) > self.width:
            content = content[: self.width - 3] + "..."
        if highlighter is None:
            return Text(content)
        return highlighter.highlight_line(content)

    @staticmethod
    def _read_lines(file_path: str) -> list[str]:
        return Path(file_path).read_text(encoding="utf-8", errors="replace").splitlines()
