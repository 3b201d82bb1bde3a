"""Per-language syntax highlighting for preview lines."""

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePosixPath
from typing import Optional

from rich.syntax import Syntax
from rich.text import Text

# Extension to pygments lexer name
LEXERS: dict[str, str] = {
    ".cs": "csharp",
    ".cpp": "cpp",
    ".h": "cpp",
    ".hpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".py": "python",
}

DEFAULT_THEME = "monokai"


class SyntaxHighlighter:
    """Highlights single lines through a pygments lexer."""

    def __init__(self, lexer: str, theme: str = DEFAULT_THEME) -> None:
        self.lexer = lexer
        self._syntax = Syntax("", lexer, theme=theme, background_color="default")

    def highlight_line(self, line: str) -> Text:
        text = self._syntax.highlight(line)
        text.rstrip()
        return text


@lru_cache(maxsize=None)
def _highlighter(lexer: str) -> SyntaxHighlighter:
    return SyntaxHighlighter(lexer)


def highlighter_for(file_path: str) -> Optional[SyntaxHighlighter]:
    """Highlighter for the file's extension, or None for plain text."""
    lexer = LEXERS.get(PurePosixPath(file_path).suffix.lower())
    if lexer is None:
        return None
    return _highlighter(lexer)
