"""Interactive terminal loop over a rendered inheritance forest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

import click
from rich import box
from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..analysis.statistics import build_statistics_panel
from ..config import Config
from ..models import HierarchyNode, TreeStats
from .details import DetailsPanel
from .export import SvgTreeExporter, TreeExporter
from .navigator import Action, Mode, Navigator, decode_key
from .preview import FilePreview
from .tree_lines import TreeLine, build_tree_lines

logger = logging.getLogger(__name__)

KEY_HELP = "↑/↓ arrows, Enter to toggle mode, S to export, Q to quit"
SELECTED_STYLE = "black on white"


class InteractiveRenderer:
    """Draws the tree with a details or preview column and reacts to keys.

    Terminal I/O goes through ``console`` and ``read_key`` so the loop can
    be driven without a real terminal.
    """

    def __init__(
        self,
        roots: list[HierarchyNode],
        config: Config,
        stats: Optional[TreeStats] = None,
        base_directory: Optional[Path] = None,
        title: str = "Inheritance Tree",
        console: Optional[Console] = None,
        read_key: Callable[[], str] = click.getchar,
        exporter: Optional[TreeExporter] = None,
    ) -> None:
        self.roots = roots
        self.stats = stats
        self.title = title
        self.console = console or Console()
        self.read_key = read_key
        self.exporter = exporter or SvgTreeExporter(config.export_dir)

        self.lines: list[TreeLine] = build_tree_lines(roots)
        self.details = DetailsPanel(base_directory)
        self.preview = FilePreview(config.preview_height, config.preview_width)
        self.navigator = Navigator(
            total_lines=len(self.lines),
            visible_rows=config.viewport_height,
            preview_limit=self._preview_limit,
        )

    @property
    def selected_node(self) -> Optional[HierarchyNode]:
        if not self.lines:
            return None
        return self.lines[self.navigator.selected].node

    def run(self) -> None:
        """Run until the user quits or interrupts with Ctrl-C."""
        if not self.lines:
            self.console.print("[yellow]No classes to display.[/yellow]")
            return

        while True:
            self.console.clear()
            self.console.print(self.build_view())
            try:
                raw = self.read_key()
            except KeyboardInterrupt:
                break

            action = self.navigator.handle(decode_key(raw))
            if action is Action.QUIT:
                break
            if action is Action.EXPORT:
                self.export()

    def export(self) -> Optional[Path]:
        """Export the tree; failures become the status line."""
        try:
            path = self.exporter.export(self.lines, self.title)
        except OSError as exc:
            logger.error("Export failed: %s", exc)
            self.navigator.status = f"[red]Export failed: {escape(str(exc))}[/red]"
            return None
        self.navigator.status = f"[green]Exported to {escape(str(path))}[/green]"
        return path

    def build_view(self) -> RenderableType:
        mode = self.navigator.mode
        table = Table(
            title=f"{self.title} - {KEY_HELP}",
            caption=f"Mode: {'Preview' if mode is Mode.PREVIEW else 'Tree'}",
            box=box.ROUNDED,
            expand=True,
        )
        table.add_column("Classes", no_wrap=True)
        if mode is Mode.PREVIEW:
            table.add_column("Preview", no_wrap=True, min_width=self.preview.column_width)
        else:
            table.add_column("Details", no_wrap=True)
        table.add_row(self._tree_column(), self._side_column())

        parts: list[RenderableType] = [table]
        if self.stats is not None:
            parts.append(build_statistics_panel(self.stats))
        if self.navigator.status:
            parts.append(Text.from_markup(self.navigator.status))
        return Group(*parts)

    def _tree_column(self) -> Text:
        viewport = self.navigator.viewport
        column = Text()
        if viewport.offset:
            column.append(f"... ({viewport.offset} more above)\n", style="dim")

        for index in viewport.window():
            line = self.lines[index]
            if index == self.navigator.selected:
                column.append(line.plain, style=SELECTED_STYLE)
            else:
                column.append_text(line.text)
            column.append("\n")

        if viewport.hidden_below:
            column.append(f"... ({viewport.hidden_below} more below)", style="dim")
        column.rstrip()
        return column

    def _side_column(self) -> RenderableType:
        node = self.selected_node
        if node is None:
            return Text("")
        if self.navigator.mode is Mode.PREVIEW:
            return self.preview.render(node.entity.file_path, self.navigator.preview_offset)
        return self.details.render(node)

    def _preview_limit(self, index: int) -> int:
        return self.preview.max_scroll_offset(self.lines[index].node.entity.file_path)
