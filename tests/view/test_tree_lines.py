"""Tests for connector-drawn tree lines."""

from codex_tree.analysis import build_forest
from codex_tree.models import ClassEntity
from codex_tree.view.tree_lines import build_tree_lines, class_color, max_line_width, node_label


def _forest():
    return build_forest([
        ClassEntity(name="Base", is_abstract=True),
        ClassEntity(name="Left", base_class="Base"),
        ClassEntity(name="Right", base_class="Base", is_sealed=True),
        ClassEntity(name="Helper", parent_class_name="Left"),
        ClassEntity(name="Solo", is_static=True),
    ])


def test_tree_lines_draw_connectors():
    lines = build_tree_lines(_forest())

    assert [line.plain for line in lines] == [
        "└── Base (abstract)",
        "    ├── Left",
        "    │   └── Helper (nested)",
        "    └── Right",
        "└── Solo",
    ]


def test_tree_lines_keep_nodes_and_nested_flag():
    lines = build_tree_lines(_forest())

    assert [line.node.name for line in lines] == ["Base", "Left", "Helper", "Right", "Solo"]
    assert [line.is_nested for line in lines] == [False, False, True, False, False]


def test_inheritance_children_come_before_nested_classes():
    roots = build_forest([
        ClassEntity(name="Root"),
        ClassEntity(name="Aaa", parent_class_name="Root"),
        ClassEntity(name="Zzz", base_class="Root"),
    ])

    assert [line.plain for line in build_tree_lines(roots)] == [
        "└── Root",
        "    ├── Zzz",
        "    └── Aaa (nested)",
    ]


def test_class_color_priority():
    assert class_color(ClassEntity(name="A", is_abstract=True, is_sealed=True)) == "yellow"
    assert class_color(ClassEntity(name="S", is_sealed=True, is_static=True)) == "blue"
    assert class_color(ClassEntity(name="T", is_static=True)) == "cyan"
    assert class_color(ClassEntity(name="N")) == "white"


def test_node_label_styles():
    node = _forest()[0]

    label = node_label(node)

    assert label.plain == "Base (abstract)"
    assert label.style == "yellow"


def test_empty_forest_and_width():
    assert build_tree_lines([]) == []
    assert max_line_width([]) == 0
    assert max_line_width(build_tree_lines(_forest())) == len("    │   └── Helper (nested)")
