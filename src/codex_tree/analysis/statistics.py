"""Aggregate statistics over an inheritance forest."""

from __future__ import annotations

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..models import HierarchyNode, ModifierClass, TreeStats

DEEP_INHERITANCE_THRESHOLD = 3
MAX_LISTED_DEEP_CLASSES = 10


def aggregate(roots: list[HierarchyNode]) -> TreeStats:
    """Walk the forest once and summarise it.

    Nested classes count toward the totals and modifier breakdown but only
    inheritance edges feed the deepest-chain and deep-inheritance tracking.
    """
    stats = TreeStats()
    seen_chains: set[tuple[int, ...]] = set()
    best_length = -1

    stack: list[HierarchyNode] = list(reversed(roots))
    visited: set[int] = set()
    while stack:
        node = stack.pop()
        if id(node) in visited:
            continue
        visited.add(id(node))
        entity = node.entity

        stats.total += 1
        stats.modifier_counts[entity.modifier_class] += 1
        if entity.is_nested:
            stats.nested += 1

        stats.max_depth = max(stats.max_depth, node.depth)
        if node.depth >= DEEP_INHERITANCE_THRESHOLD:
            stats.deep_inheritance.append(entity)

        if not entity.is_nested:
            length = node.depth + node.max_depth_below()
            if length > best_length:
                best_length = length
                stats.deepest_chains.clear()
                seen_chains.clear()
            if length == best_length:
                for chain in _deepest_paths_through(node):
                    key = tuple(id(link) for link in chain)
                    if key not in seen_chains:
                        seen_chains.add(key)
                        stats.deepest_chains.append(chain)

        if stats.largest is None or entity.line_count > stats.largest.line_count:
            stats.largest = entity

        stack.extend(reversed(node.nested_children))
        stack.extend(reversed(node.children))

    return stats


def _deepest_paths_through(node: HierarchyNode) -> list[tuple[HierarchyNode, ...]]:
    """Root-to-leaf inheritance paths through ``node`` of maximal length below it."""
    prefix = node.inheritance_chain()[:-1]
    return [tuple(prefix) + tail for tail in _deepest_tails(node)]


def _deepest_tails(node: HierarchyNode) -> list[tuple[HierarchyNode, ...]]:
    if not node.children:
        return [(node,)]
    below = node.max_depth_below()
    tails: list[tuple[HierarchyNode, ...]] = []
    for child in node.children:
        if child.max_depth_below() == below - 1:
            tails.extend((node,) + tail for tail in _deepest_tails(child))
    return tails


def build_statistics_panel(stats: TreeStats) -> Panel:
    """Render a statistics summary as a rich panel."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()

    grid.add_row("Total classes:", str(stats.total))
    grid.add_row("Nested classes:", str(stats.nested))
    breakdown = ", ".join(
        f"{stats.modifier_counts[modifier]} {modifier.value}"
        for modifier in ModifierClass
        if stats.modifier_counts[modifier]
    )
    grid.add_row("Modifiers:", breakdown or "-")
    grid.add_row("Max depth:", f"{stats.max_depth} levels")

    if stats.largest is not None:
        grid.add_row("Largest class:", f"{stats.largest.name} ({stats.largest.line_count} lines)")

    if stats.deepest_chains and stats.deepest_chain_length > 0:
        for index, chain in enumerate(stats.deepest_chains):
            label = "Deepest chain:" if index == 0 else ""
            grid.add_row(label, " → ".join(link.entity.name for link in chain))

    parts = [grid]
    if stats.deep_inheritance:
        warning = Text()
        warning.append(
            f"\nDeep inheritance: {len(stats.deep_inheritance)} classes "
            f"({DEEP_INHERITANCE_THRESHOLD}+ levels)\n",
            style="yellow",
        )
        listed = stats.deep_inheritance[:MAX_LISTED_DEEP_CLASSES]
        if len(stats.deep_inheritance) > MAX_LISTED_DEEP_CLASSES:
            warning.append(f"   (showing first {MAX_LISTED_DEEP_CLASSES})\n", style="dim")
        for entity in listed:
            warning.append(f"   - {entity.full_name}\n", style="dim")
        warning.rstrip()
        parts.append(warning)

    return Panel(
        Group(*parts),
        title="Statistics",
        title_align="left",
        box=box.ROUNDED,
        border_style="blue",
        expand=False,
    )
