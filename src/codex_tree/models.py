"""Data models for extracted classes and the inheritance forest."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class ModifierClass(str, Enum):
    """Display class of an entity, picked by modifier priority."""

    ABSTRACT = "abstract"
    SEALED = "sealed"
    STATIC = "static"
    NORMAL = "normal"


@dataclass(frozen=True)
class ClassEntity:
    """One class-like declaration found in a source file."""

    name: str
    file_path: str = ""
    namespace: str | None = None
    base_class: str | None = None
    interfaces: tuple[str, ...] = ()
    is_abstract: bool = False
    is_sealed: bool = False
    is_static: bool = False
    method_count: int = 0
    line_count: int = 0
    parent_class_name: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ClassEntity.name must not be empty")
        # Accept any iterable for interfaces but store it immutably
        if not isinstance(self.interfaces, tuple):
            object.__setattr__(self, "interfaces", tuple(self.interfaces))

    @property
    def is_nested(self) -> bool:
        return bool(self.parent_class_name)

    @property
    def full_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

    @property
    def modifier_class(self) -> ModifierClass:
        if self.is_abstract:
            return ModifierClass.ABSTRACT
        if self.is_sealed:
            return ModifierClass.SEALED
        if self.is_static:
            return ModifierClass.STATIC
        return ModifierClass.NORMAL

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "full_name": self.full_name,
            "base_class": self.base_class,
            "interfaces": list(self.interfaces),
            "is_abstract": self.is_abstract,
            "is_sealed": self.is_sealed,
            "is_static": self.is_static,
            "method_count": self.method_count,
            "line_count": self.line_count,
            "file_path": self.file_path,
            "parent_class_name": self.parent_class_name,
        }


@dataclass(eq=False)
class HierarchyNode:
    """A node in the inheritance forest wrapping exactly one entity.

    ``children`` holds inheritance edges, ``nested_children`` holds
    containment edges. Back-references to the inheritance parent and the
    containing class are weak so the child lists stay the only owners.
    """

    entity: ClassEntity
    children: list[HierarchyNode] = field(default_factory=list)
    nested_children: list[HierarchyNode] = field(default_factory=list)
    depth: int = 0
    _parent: weakref.ReferenceType | None = field(default=None, repr=False)
    _container: weakref.ReferenceType | None = field(default=None, repr=False)

    @property
    def parent(self) -> HierarchyNode | None:
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, node: HierarchyNode | None) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    @property
    def container(self) -> HierarchyNode | None:
        return self._container() if self._container is not None else None

    @container.setter
    def container(self, node: HierarchyNode | None) -> None:
        self._container = weakref.ref(node) if node is not None else None

    @property
    def name(self) -> str:
        return self.entity.name

    def combined_children(self) -> list[tuple[HierarchyNode, bool]]:
        """Inheritance children followed by nested classes, flagged with ``is_nested``."""
        combined = [(child, False) for child in self.children]
        combined.extend((nested, True) for nested in self.nested_children)
        return combined

    def max_depth_below(self, _visiting: set[int] | None = None) -> int:
        """Longest run of inheritance edges below this node.

        A node already on the current path contributes nothing, so a
        malformed cyclic structure still terminates.
        """
        if not self.children:
            return 0

        visiting = _visiting if _visiting is not None else set()
        if id(self) in visiting:
            return 0

        visiting.add(id(self))
        try:
            return 1 + max(child.max_depth_below(visiting) for child in self.children)
        finally:
            visiting.discard(id(self))

    def descendants(self) -> Iterator[HierarchyNode]:
        """All inheritance descendants, depth first."""
        seen: set[int] = {id(self)}
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            yield node
            stack.extend(reversed(node.children))

    def inheritance_chain(self) -> list[HierarchyNode]:
        """Nodes from the inheritance root down to this node."""
        chain: list[HierarchyNode] = []
        seen: set[int] = set()
        current: HierarchyNode | None = self
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            chain.insert(0, current)
            current = current.parent
        return chain


@dataclass
class TreeStats:
    """Aggregate snapshot of a forest."""

    total: int = 0
    nested: int = 0
    modifier_counts: dict[ModifierClass, int] = field(
        default_factory=lambda: {modifier: 0 for modifier in ModifierClass}
    )
    max_depth: int = 0
    largest: ClassEntity | None = None
    deep_inheritance: list[ClassEntity] = field(default_factory=list)
    deepest_chains: list[tuple[HierarchyNode, ...]] = field(default_factory=list)

    @property
    def abstract(self) -> int:
        return self.modifier_counts[ModifierClass.ABSTRACT]

    @property
    def deepest_chain_length(self) -> int:
        """Number of inheritance edges in the deepest chain(s)."""
        if not self.deepest_chains:
            return 0
        return len(self.deepest_chains[0]) - 1
