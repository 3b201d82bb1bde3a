"""Scanning utilities shared by the brace- and indentation-based extractors."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..errors import ExtractionError
from ..models import ClassEntity

logger = logging.getLogger(__name__)

TAB_WIDTH = 4

_BRACE_RE = re.compile(r"[{}]")

# Comments are blanked, string literals are kept so "//" inside them survives
_COMMENT_OR_STRING_RE = re.compile(
    r'(?P<string>"(?:\\.|[^"\\\n])*")|//[^\n]*|/\*.*?\*/',
    re.DOTALL,
)


class BaseExtractor:
    """File reading and error wrapping common to every extractor."""

    display_name: str = ""
    file_extensions: tuple[str, ...] = ()
    excluded_dirs: tuple[str, ...] = ()

    def extract_source(self, source: str, file_path: str) -> list[ClassEntity]:
        raise NotImplementedError

    def extract_file(self, file_path: str) -> list[ClassEntity]:
        path = Path(file_path)
        try:
            source = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ExtractionError(str(path), exc.strerror or str(exc)) from exc

        try:
            entities = self.extract_source(source, str(path))
        except (re.error, ValueError, IndexError) as exc:
            raise ExtractionError(str(path), str(exc)) from exc

        logger.debug("Extracted %d classes from %s", len(entities), path)
        return entities


def split_inheritance(text: str | None) -> list[str]:
    """Split a captured inheritance list on commas, dropping blanks."""
    if not text:
        return []
    tokens = [" ".join(token.split()) for token in text.split(",")]
    return [token for token in tokens if token]


def looks_like_interface(name: str) -> bool:
    """``IFoo`` naming convention: an ``I`` followed by an uppercase letter."""
    return len(name) > 1 and name[0] == "I" and name[1].isupper()


# Brace-based utilities (C#, C++)


def blank(text: str) -> str:
    """Spaces in place of ``text``, keeping its newlines so offsets stay valid."""
    return "".join("\n" if ch == "\n" else " " for ch in text)


def blank_comments(source: str) -> str:
    """Blank out ``//`` and ``/* */`` comments, leaving string literals alone."""
    return _COMMENT_OR_STRING_RE.sub(
        lambda m: m.group() if m.group("string") else blank(m.group()),
        source,
    )


def brace_depth_at(content: str, position: int) -> int:
    """Net ``{``/``}`` balance from the start of ``content`` up to ``position``."""
    return content.count("{", 0, position) - content.count("}", 0, position)


def find_body_end(content: str, start: int) -> int:
    """Index of the brace closing the first body opened at or after ``start``.

    Returns ``len(content)`` when the body never closes (or never opens).
    """
    depth = 0
    opened = False
    for match in _BRACE_RE.finditer(content, start):
        if match.group() == "{":
            depth += 1
            opened = True
        else:
            depth -= 1
            if depth == 0 and opened:
                return match.start()
    return len(content)


def extract_body(content: str, start: int) -> str:
    """Text from the first ``{`` after ``start`` up to (excluding) its closing brace."""
    open_at = content.find("{", start)
    if open_at == -1:
        return ""
    return content[open_at:find_body_end(content, start)]


def is_in_comment(content: str, position: int) -> bool:
    """Whether ``position`` sits after ``//`` on its line or inside ``/* */``."""
    line_start = content.rfind("\n", 0, position) + 1
    if "//" in content[line_start:position]:
        return True

    block_start = content.rfind("/*", 0, position)
    if block_start != -1:
        block_end = content.rfind("*/", 0, position)
        if block_end < block_start:
            return True

    return False


# Indentation-based utilities (Python)


def indent_width(text: str) -> int:
    """Width of the leading whitespace in ``text`` with tabs as four columns."""
    stripped = text.lstrip(" \t")
    return len(text[: len(text) - len(stripped)].replace("\t", " " * TAB_WIDTH))


def line_number_at(content: str, position: int) -> int:
    """Zero-based line index of ``position``."""
    return content.count("\n", 0, position)


def find_block_end(lines: list[str], start_line: int, block_indent: int) -> int:
    """Last line index belonging to the block declared on ``start_line``.

    Blank and comment-only lines never end a block, and trailing ones are
    not part of it. The block stops at the first line indented at or left
    of ``block_indent``.
    """
    last = start_line
    for index in range(start_line + 1, len(lines)):
        line = lines[index]
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if indent_width(line) <= block_indent:
            break
        last = index
    return last
