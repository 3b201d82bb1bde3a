"""Builds an inheritance forest from a flat list of extracted classes."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ..models import ClassEntity, HierarchyNode

logger = logging.getLogger(__name__)


def build_forest(entities: Iterable[ClassEntity]) -> list[HierarchyNode]:
    """Resolve base-class and nesting references into a forest.

    Args:
        entities: Extracted classes in extraction order.

    Returns:
        Root nodes sorted by name. Every node reachable from a root is
        either an inheritance child (``children``) or a nested class
        (``nested_children``) of exactly one node.

    Resolution rules:
        - ``full_name`` is the lookup key; on duplicates the last entity wins.
        - A nested class hangs under the first class whose ``name`` equals
          its ``parent_class_name`` and skips inheritance resolution.
        - A base class resolves by exact ``full_name``, then by
          ``{namespace}.{base}``, then by the first class with that plain
          ``name`` in table order. Unresolved bases make the class a root.
        - An edge that would close a cycle is dropped.
    """
    node_map: dict[str, HierarchyNode] = {}
    for entity in entities:
        previous = node_map.get(entity.full_name)
        if previous is not None:
            logger.debug(
                "Duplicate class %s: %s replaces %s",
                entity.full_name, entity.file_path, previous.entity.file_path,
            )
        node_map[entity.full_name] = HierarchyNode(entity=entity)

    nodes = list(node_map.values())
    first_by_name: dict[str, HierarchyNode] = {}
    for node in nodes:
        first_by_name.setdefault(node.entity.name, node)
    # Ownership edge of every attached node, for the cycle guard
    owners: dict[int, HierarchyNode] = {}
    roots: list[HierarchyNode] = []

    for node in nodes:
        entity = node.entity

        if entity.is_nested:
            container = first_by_name.get(entity.parent_class_name)
            if container is not None and not _closes_cycle(node, container, owners):
                node.container = container
                container.nested_children.append(node)
                owners[id(node)] = container
                continue

        if not entity.base_class:
            roots.append(node)
            continue

        parent = _resolve_base(node_map, first_by_name, entity)
        if parent is None:
            logger.debug("Base %s of %s not found, treating as root", entity.base_class, entity.full_name)
            roots.append(node)
        elif _closes_cycle(node, parent, owners):
            logger.debug("Inheritance cycle through %s, treating as root", entity.full_name)
            roots.append(node)
        else:
            node.parent = parent
            parent.children.append(node)
            owners[id(node)] = parent

    for node in nodes:
        node.children.sort(key=lambda child: child.entity.name)
        node.nested_children.sort(key=lambda child: child.entity.name)
    roots.sort(key=lambda root: root.entity.name)

    _assign_depths(roots)
    return roots


def find_node(roots: list[HierarchyNode], class_name: str) -> Optional[HierarchyNode]:
    """Find a node by plain or full name anywhere in the forest."""
    for node in iter_forest(roots):
        if class_name in (node.entity.name, node.entity.full_name):
            return node
    return None


def iter_forest(roots: list[HierarchyNode]) -> Iterator[HierarchyNode]:
    """Every node reachable from ``roots`` over both edge kinds, in display order."""
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed([child for child, _ in node.combined_children()]))


def _resolve_base(
    node_map: dict[str, HierarchyNode],
    first_by_name: dict[str, HierarchyNode],
    entity: ClassEntity,
) -> Optional[HierarchyNode]:
    base = entity.base_class
    parent = node_map.get(base)
    if parent is None and entity.namespace:
        parent = node_map.get(f"{entity.namespace}.{base}")
    if parent is None:
        parent = first_by_name.get(base)
    return parent


def _closes_cycle(node: HierarchyNode, candidate: HierarchyNode, owners: dict[int, HierarchyNode]) -> bool:
    """Whether hanging ``node`` under ``candidate`` would make ``node`` its own ancestor."""
    current: Optional[HierarchyNode] = candidate
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if current is node:
            return True
        seen.add(id(current))
        current = owners.get(id(current))
    return False


def _assign_depths(roots: list[HierarchyNode]) -> None:
    """Inheritance depth from the roots; nested classes start again at 0."""
    stack: list[tuple[HierarchyNode, int]] = [(root, 0) for root in roots]
    while stack:
        node, depth = stack.pop()
        node.depth = depth
        stack.extend((child, depth + 1) for child in node.children)
        stack.extend((nested, 0) for nested in node.nested_children)
