"""Export of the rendered tree to an image file."""

from __future__ import annotations

import io
import logging
from datetime import datetime
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from rich.console import Console
from rich.text import Text

from .tree_lines import TreeLine, max_line_width

logger = logging.getLogger(__name__)

MIN_EXPORT_WIDTH = 40


@runtime_checkable
class TreeExporter(Protocol):
    """Writes rendered tree lines somewhere and returns the file path."""

    def export(self, lines: Sequence[TreeLine], title: str) -> Path:
        ...


class SvgTreeExporter:
    """Records the tree on an off-screen console and saves it as SVG."""

    def __init__(self, output_dir: Path, width: int | None = None) -> None:
        self.output_dir = Path(output_dir)
        self.width = width

    def export(self, lines: Sequence[TreeLine], title: str) -> Path:
        width = self.width or max(MIN_EXPORT_WIDTH, max_line_width(list(lines)) + 2, len(title) + 2)
        console = Console(record=True, file=io.StringIO(), width=width, color_system="truecolor")
        console.print(Text(title, style="bold"))
        for line in lines:
            console.print(line.text, no_wrap=True, overflow="ignore")

        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / f"inheritance_tree_{datetime.now():%Y%m%d_%H%M%S}.svg"
        console.save_svg(str(target), title=title)
        logger.info("Exported %d tree lines to %s", len(lines), target)
        return target
