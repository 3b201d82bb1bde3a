"""Terminal presentation of inheritance forests."""

from .details import DetailsPanel
from .export import SvgTreeExporter, TreeExporter
from .navigator import Action, Key, Mode, Navigator, decode_key
from .preview import FilePreview
from .renderer import InteractiveRenderer
from .tree_lines import TreeLine, build_tree_lines
from .viewport import Viewport, scroll_to_show

__all__ = [
    "Action",
    "DetailsPanel",
    "FilePreview",
    "InteractiveRenderer",
    "Key",
    "Mode",
    "Navigator",
    "SvgTreeExporter",
    "TreeExporter",
    "TreeLine",
    "Viewport",
    "build_tree_lines",
    "decode_key",
    "scroll_to_show",
]
