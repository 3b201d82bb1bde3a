"""C# extractor using regex patterns."""

from __future__ import annotations

import re

from ..models import ClassEntity
from .base import blank_comments, looks_like_interface, split_inheritance
from .brace import BraceDelimitedExtractor
from .protocol import Language

_NAMESPACE_RE = re.compile(r"\bnamespace\s+([\w\.]+)")

_CLASS_RE = re.compile(
    r"\b(?P<modifiers>(?:(?:public|private|protected|internal|abstract|sealed|static|partial)\s+)*)"
    r"(?:class|struct)\s+(?P<name>\w+)"
    r"(?:\s*<[^<>{};]*>)?"
    r"(?:\s*:\s*(?P<inheritance>[\w\s,\.]+))?",
    re.MULTILINE,
)

_METHOD_RE = re.compile(
    r"(?:public|private|protected|internal|static|virtual|override|async)\s+(?:\w+\s+)+\w+\s*\(",
    re.MULTILINE,
)

# Generic constraints follow the base list: "class Foo : Bar where T : new()"
_WHERE_RE = re.compile(r"\bwhere\b")


class CSharpExtractor(BraceDelimitedExtractor):
    """Extract classes and structs from C# sources."""

    language = Language.CSHARP
    display_name = "C#"
    file_extensions = (".cs",)
    excluded_dirs = ("bin", "obj")

    class_pattern = _CLASS_RE
    namespace_pattern = _NAMESPACE_RE
    method_pattern = _METHOD_RE

    def preprocess(self, source: str) -> str:
        return blank_comments(source)

    def build_entity(
        self,
        match: re.Match,
        body: str,
        namespace: str | None,
        parent_name: str | None,
        file_path: str,
    ) -> ClassEntity:
        modifiers = set(match.group("modifiers").split())
        base_class, interfaces = self._split_bases(match.group("inheritance"))

        return ClassEntity(
            name=match.group("name"),
            namespace=namespace,
            base_class=base_class,
            interfaces=interfaces,
            is_abstract="abstract" in modifiers,
            is_sealed="sealed" in modifiers,
            is_static="static" in modifiers,
            method_count=self.count_methods(body),
            line_count=body.count("\n"),
            file_path=file_path,
            parent_class_name=parent_name,
        )

    def _split_bases(self, inheritance: str | None) -> tuple[str | None, tuple[str, ...]]:
        if inheritance:
            inheritance = _WHERE_RE.split(inheritance, maxsplit=1)[0]
        tokens = split_inheritance(inheritance)
        if not tokens:
            return None, ()

        # "class Foo : IBar, IBaz" has no base class at all
        if looks_like_interface(tokens[0]):
            return None, tuple(tokens)
        return tokens[0], tuple(tokens[1:])
