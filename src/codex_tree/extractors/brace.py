"""Shared scanning loop for brace-delimited (C-family) languages."""

from __future__ import annotations

import re

from ..models import ClassEntity
from .base import (
    BaseExtractor,
    brace_depth_at,
    extract_body,
    find_body_end,
    is_in_comment,
)


class BraceDelimitedExtractor(BaseExtractor):
    """Regex-driven extractor for languages whose class bodies live in braces.

    Subclasses supply ``class_pattern`` (with ``name`` and ``inheritance``
    groups), ``namespace_pattern`` and ``method_pattern``, and turn each
    accepted match into an entity in ``build_entity``.
    """

    class_pattern: re.Pattern
    namespace_pattern: re.Pattern
    method_pattern: re.Pattern

    def preprocess(self, source: str) -> str:
        """Hook to clean the text before scanning. Must keep offsets stable."""
        return source

    def accept_match(self, content: str, match: re.Match) -> bool:
        return not is_in_comment(content, match.start())

    def find_namespace(self, content: str) -> str | None:
        match = self.namespace_pattern.search(content)
        if not match:
            return None
        return match.group(1).replace("::", ".")

    def count_methods(self, body: str) -> int:
        return sum(1 for _ in self.method_pattern.finditer(body))

    def build_entity(
        self,
        match: re.Match,
        body: str,
        namespace: str | None,
        parent_name: str | None,
        file_path: str,
    ) -> ClassEntity:
        raise NotImplementedError

    def extract_source(self, source: str, file_path: str) -> list[ClassEntity]:
        content = self.preprocess(source)
        namespace = self.find_namespace(content)

        matches = [
            match for match in self.class_pattern.finditer(content)
            if self.accept_match(content, match)
        ]
        body_ends = [find_body_end(content, match.start()) for match in matches]

        entities: list[ClassEntity] = []
        for index, match in enumerate(matches):
            parent_name = self._find_parent(content, matches, body_ends, index)
            body = extract_body(content, match.start())
            entities.append(self.build_entity(match, body, namespace, parent_name, file_path))

        return entities

    def _find_parent(
        self,
        content: str,
        matches: list[re.Match],
        body_ends: list[int],
        index: int,
    ) -> str | None:
        """Name of the nearest earlier declaration whose body encloses match ``index``."""
        position = matches[index].start()
        if brace_depth_at(content, position) <= 0:
            return None

        for candidate in range(index - 1, -1, -1):
            if matches[candidate].start() < position < body_ends[candidate]:
                return matches[candidate].group("name")

        return None
