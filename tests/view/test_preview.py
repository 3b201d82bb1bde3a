"""Tests for the source preview panel."""

from unittest.mock import patch

from codex_tree.view.highlight import SyntaxHighlighter, highlighter_for
from codex_tree.view.preview import FilePreview


def _plain_preview(height=5, width=10):
    return FilePreview(height=height, width=width, highlighter_factory=lambda path: None)


def _write_lines(path, count):
    path.write_text("\n".join(f"line {i}" for i in range(1, count + 1)) + "\n")
    return str(path)


def test_window_with_line_numbers_and_remaining_indicator(tmp_path):
    path = _write_lines(tmp_path / "a.txt", 30)

    text = _plain_preview().render(path, 0).plain

    assert text.splitlines() == [
        "   1 │ line 1",
        "   2 │ line 2",
        "   3 │ line 3",
        "   4 │ line 4",
        "   5 │ line 5",
        "... (25 more lines below)",
    ]


def test_scroll_offset_is_clamped(tmp_path):
    path = _write_lines(tmp_path / "a.txt", 30)
    preview = _plain_preview()

    text = preview.render(path, 100).plain

    assert preview.max_scroll_offset(path) == 25
    assert text.splitlines()[0] == "  26 │ line 26"
    assert "more lines below" not in text


def test_long_lines_are_truncated(tmp_path):
    path = tmp_path / "wide.txt"
    path.write_text("abcdefghijklmnopqrstuvwxyz\n\tx\n")

    lines = _plain_preview(width=10).render(str(path), 0).plain.splitlines()

    assert lines[0] == "   1 │ abcdefg..."
    assert lines[1] == "   2 │     x"


def test_short_file_has_no_scroll(tmp_path):
    path = _write_lines(tmp_path / "short.txt", 2)

    assert _plain_preview().max_scroll_offset(path) == 0


def test_missing_file():
    preview = _plain_preview()

    assert preview.render("/no/such/File.cs", 0).plain == "File not found"
    assert preview.render("", 0).plain == "File not found"
    assert preview.max_scroll_offset("/no/such/File.cs") == 0


def test_unreadable_file_is_reported_inline(tmp_path):
    path = _write_lines(tmp_path / "locked.cs", 3)

    with patch.object(FilePreview, "_read_lines", side_effect=PermissionError(13, "Permission denied")):
        text = _plain_preview().render(path, 0)

    assert text.plain == "Error reading file: Permission denied"
    assert text.style == "red"


def test_default_highlighter_keeps_source_text(tmp_path):
    path = tmp_path / "mod.py"
    path.write_text("class A:\n    def run(self):\n        return 1\n")

    text = FilePreview(height=16, width=70).render(str(path), 0)

    assert "   2 │     def run(self):" in text.plain
    assert text.spans


def test_highlighter_for_extension():
    assert highlighter_for("Shape.CS").lexer == "csharp"
    assert highlighter_for("shape.hpp").lexer == "cpp"
    assert highlighter_for("notes.txt") is None
    assert isinstance(highlighter_for("mod.py"), SyntaxHighlighter)
