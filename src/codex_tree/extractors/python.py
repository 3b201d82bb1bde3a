"""Python extractor driven by indentation rather than braces."""

from __future__ import annotations

import re

from ..models import ClassEntity
from .base import (
    BaseExtractor,
    find_block_end,
    indent_width,
    line_number_at,
    split_inheritance,
)
from .protocol import Language

_CLASS_RE = re.compile(
    r"^(?P<indent>[ \t]*)class\s+(?P<name>\w+)\s*(?:\[[^\]]*\])?\s*(?:\((?P<inheritance>[^)]*)\))?\s*:",
    re.MULTILINE,
)

_METHOD_RE = re.compile(r"^[ \t]+(?:async[ \t]+)?def[ \t]+(\w+)[ \t]*\(", re.MULTILINE)


class PythonExtractor(BaseExtractor):
    """Extract classes from Python sources.

    Python has no namespaces and no abstract/sealed/static modifiers, so
    those fields always keep their defaults. Every listed base is kept
    because Python allows multiple inheritance.
    """

    language = Language.PYTHON
    display_name = "Python"
    file_extensions = (".py",)
    excluded_dirs = ("__pycache__", ".venv", "venv", ".tox", "build", "dist")

    def extract_source(self, source: str, file_path: str) -> list[ClassEntity]:
        content = self._strip_comments(source)
        lines = content.split("\n")
        matches = list(_CLASS_RE.finditer(content))

        # (start line, end line, indent) per match, computed once
        spans: list[tuple[int, int, int]] = []
        for match in matches:
            indent = indent_width(match.group("indent"))
            start_line = line_number_at(content, match.start())
            spans.append((start_line, find_block_end(lines, start_line, indent), indent))

        entities: list[ClassEntity] = []
        for index, match in enumerate(matches):
            start_line, end_line, indent = spans[index]
            parent_name = self._find_parent(matches, spans, index) if indent > 0 else None
            bases = self._parse_bases(match.group("inheritance"))

            entities.append(
                ClassEntity(
                    name=match.group("name"),
                    base_class=bases[0] if bases else None,
                    interfaces=tuple(bases[1:]),
                    method_count=self._count_methods(lines, start_line, end_line),
                    line_count=end_line - start_line + 1,
                    file_path=file_path,
                    parent_class_name=parent_name,
                )
            )

        return entities

    def _find_parent(
        self,
        matches: list[re.Match],
        spans: list[tuple[int, int, int]],
        index: int,
    ) -> str | None:
        """Nearest earlier, less indented class whose block still covers this one."""
        line, _, indent = spans[index]
        for candidate in range(index - 1, -1, -1):
            parent_line, parent_end, parent_indent = spans[candidate]
            if parent_indent < indent and parent_line < line <= parent_end:
                return matches[candidate].group("name")
        return None

    def _parse_bases(self, inheritance: str | None) -> list[str]:
        # metaclass=ABCMeta and friends are keyword arguments, not bases
        return [token for token in split_inheritance(inheritance) if "=" not in token]

    def _count_methods(self, lines: list[str], start_line: int, end_line: int) -> int:
        """Public methods only; dunder and underscore-prefixed names are skipped."""
        block = "\n".join(lines[start_line:end_line + 1])
        return sum(
            1 for match in _METHOD_RE.finditer(block)
            if not match.group(1).startswith("_")
        )

    @staticmethod
    def _strip_comments(content: str) -> str:
        """Drop ``#`` comments, keeping line structure intact.

        A ``#`` counts as a comment only when an even number of each quote
        character precedes it on the line.
        """
        lines = content.split("\n")
        for index, line in enumerate(lines):
            hash_index = line.find("#")
            if hash_index < 0:
                continue
            before = line[:hash_index]
            if before.count("'") % 2 == 0 and before.count('"') % 2 == 0:
                lines[index] = before
        return "\n".join(lines)
