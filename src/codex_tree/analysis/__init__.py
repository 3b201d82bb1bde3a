"""Hierarchy resolution and statistics over extracted classes."""

from .hierarchy import build_forest, find_node, iter_forest
from .statistics import DEEP_INHERITANCE_THRESHOLD, aggregate, build_statistics_panel

__all__ = [
    "build_forest",
    "find_node",
    "iter_forest",
    "aggregate",
    "build_statistics_panel",
    "DEEP_INHERITANCE_THRESHOLD",
]
