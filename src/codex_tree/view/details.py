"""Details side panel for the selected class."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from rich.filesize import decimal
from rich.table import Table
from rich.text import Text

from ..models import HierarchyNode
from .tree_lines import class_color, node_label

MAX_SUBTREE_INDENT = 12
SUBTREE_INDENT = "│  "
SEPARATOR_WIDTH = 50

BADGE_STYLES = {
    "abstract": "black on yellow",
    "sealed": "white on blue",
    "static": "black on cyan",
    "nested": "black on white",
}


def count_descendants(node: HierarchyNode) -> tuple[int, int]:
    """Recursive descendant count split into (inherited, nested) edges."""
    inherited = nested = 0
    stack = [node]
    seen = {id(node)}
    while stack:
        current = stack.pop()
        for child, is_nested in current.combined_children():
            if id(child) in seen:
                continue
            seen.add(id(child))
            if is_nested:
                nested += 1
            else:
                inherited += 1
            stack.append(child)
    return inherited, nested


class DetailsPanel:
    """Builds the details grid for one node."""

    def __init__(self, base_directory: Optional[Path] = None) -> None:
        self.base_directory = Path(base_directory) if base_directory else None

    def render(self, node: HierarchyNode) -> Table:
        entity = node.entity
        grid = Table.grid()
        grid.add_column(no_wrap=True)

        if entity.namespace:
            grid.add_row(Text(entity.namespace, style="dim"))

        title = Text(entity.name, style=f"bold {class_color(entity)}")
        for badge in self._badges(node):
            title.append(" ")
            title.append(f" {badge} ", style=BADGE_STYLES[badge])
        grid.add_row(title)
        grid.add_row("")

        grid.add_row(self._field("Depth", str(node.depth)))
        if entity.base_class:
            grid.add_row(self._field("Base", entity.base_class))
        if entity.parent_class_name:
            grid.add_row(self._field("Declared in", entity.parent_class_name))
        grid.add_row("")

        if entity.interfaces:
            grid.add_row(Text("Interfaces:", style="bold"))
            for interface in entity.interfaces:
                grid.add_row(Text(f"  - {interface}"))
            grid.add_row("")

        if node.children or node.nested_children:
            inherited, nested = count_descendants(node)
            grid.add_row(
                self._field("Descendants", f"{inherited + nested} ({inherited} inherited, {nested} nested)")
            )
            self._add_subtree(grid, node, "", {id(node)})
            grid.add_row("")

        grid.add_row(self._field("Methods", str(entity.method_count)))
        grid.add_row(self._field("Lines", str(entity.line_count)))
        grid.add_row("")

        grid.add_row(Text("─" * SEPARATOR_WIDTH, style="dim"))
        if entity.file_path:
            location = Text(self.display_path(entity.file_path), style="grey50")
            size = self._file_size(entity.file_path)
            if size is not None:
                location.append(f"  ({size})", style="dim")
            grid.add_row(location)

        return grid

    def display_path(self, file_path: str) -> str:
        """Path relative to the scanned root as ``.../rel/path``; unchanged outside it."""
        if not self.base_directory:
            return file_path
        try:
            relative = Path(os.path.abspath(file_path)).relative_to(os.path.abspath(self.base_directory))
        except ValueError:
            return file_path
        return ".../" + relative.as_posix()

    @staticmethod
    def _badges(node: HierarchyNode) -> list[str]:
        entity = node.entity
        badges = [
            name for name, flag in (
                ("abstract", entity.is_abstract),
                ("sealed", entity.is_sealed),
                ("static", entity.is_static),
                ("nested", entity.is_nested),
            )
            if flag
        ]
        return badges

    @staticmethod
    def _field(label: str, value: str) -> Text:
        text = Text(f"{label}: ", style="bold")
        text.append(value, style="not bold")
        return text

    def _add_subtree(self, grid: Table, node: HierarchyNode, indent: str, path: set[int]) -> None:
        for child, is_nested in node.combined_children():
            if id(child) in path:
                continue
            row = Text(f"{indent}├─ ")
            row.append_text(node_label(child, is_nested))
            grid.add_row(row)

            has_children = child.children or child.nested_children
            if has_children and len(indent) < MAX_SUBTREE_INDENT:
                path.add(id(child))
                self._add_subtree(grid, child, indent + SUBTREE_INDENT, path)
                path.discard(id(child))

    @staticmethod
    def _file_size(file_path: str) -> Optional[str]:
        try:
            return decimal(os.path.getsize(file_path))
        except OSError:
            return None
