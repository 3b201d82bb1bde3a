"""Builds connector-drawn tree lines from an inheritance forest."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from ..models import ClassEntity, HierarchyNode, ModifierClass

CLASS_COLORS: dict[ModifierClass, str] = {
    ModifierClass.ABSTRACT: "yellow",
    ModifierClass.SEALED: "blue",
    ModifierClass.STATIC: "cyan",
    ModifierClass.NORMAL: "white",
}

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


@dataclass(frozen=True)
class TreeLine:
    """One rendered row of the tree and the node it stands for."""

    node: HierarchyNode
    text: Text
    is_nested: bool = False

    @property
    def plain(self) -> str:
        return self.text.plain


def class_color(entity: ClassEntity) -> str:
    """Color by modifier priority: abstract > sealed > static > normal."""
    return CLASS_COLORS[entity.modifier_class]


def node_label(node: HierarchyNode, is_nested: bool = False) -> Text:
    """Colored class name with the abstract and nested markers."""
    entity = node.entity
    label = Text(entity.name, style=class_color(entity))
    if entity.is_abstract:
        label.append(" (abstract)")
    if is_nested:
        label.append(" (nested)", style="dim")
    return label


def build_tree_lines(roots: list[HierarchyNode]) -> list[TreeLine]:
    """Flatten the forest into display rows.

    Every root is drawn as a last sibling. Below each node come its
    inheritance children, then its nested classes.
    """
    lines: list[TreeLine] = []
    for root in roots:
        _add_lines(root, "", True, False, lines, set())
    return lines


def max_line_width(lines: list[TreeLine]) -> int:
    return max((line.text.cell_len for line in lines), default=0)


def _add_lines(
    node: HierarchyNode,
    indent: str,
    is_last: bool,
    is_nested: bool,
    lines: list[TreeLine],
    path: set[int],
) -> None:
    if id(node) in path:
        return

    text = Text(indent + (LAST_BRANCH if is_last else BRANCH))
    text.append_text(node_label(node, is_nested))
    lines.append(TreeLine(node=node, text=text, is_nested=is_nested))

    child_indent = indent + (SPACE if is_last else PIPE)
    combined = node.combined_children()
    path.add(id(node))
    for index, (child, child_nested) in enumerate(combined):
        _add_lines(child, child_indent, index == len(combined) - 1, child_nested, lines, path)
    path.discard(id(node))
