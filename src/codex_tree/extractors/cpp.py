"""C++ extractor using regex patterns."""

from __future__ import annotations

import re

from ..models import ClassEntity
from .base import blank, blank_comments, split_inheritance
from .brace import BraceDelimitedExtractor
from .protocol import Language

_NAMESPACE_RE = re.compile(r"\bnamespace\s+(\w+(?:::\w+)*)\s*\{")

_CLASS_RE = re.compile(
    r"\b(?P<kind>class|struct)\s+(?P<name>\w+)(?P<final>\s+final)?"
    r"(?:\s*:\s*(?P<inheritance>[\w\s,:<>]+))?\s*\{",
    re.MULTILINE,
)

_METHOD_RE = re.compile(
    r"(?:public|private|protected)?\s*(?:virtual|static|inline|constexpr)?\s*"
    r"(?P<type>[\w<>:\*&]+)\s+(?P<name>\w+)\s*\([^)]*\)\s*(?:const)?\s*(?:override)?\s*(?:final)?\s*"
    r"(?:=\s*(?:0|default|delete)\s*)?[{;]",
    re.MULTILINE,
)

_PURE_VIRTUAL_RE = re.compile(
    r"\bvirtual\b[^;{}]*\)\s*(?:const\s*)?(?:noexcept\s*)?(?:override\s*)?=\s*0\s*;"
)

_PREPROCESSOR_RE = re.compile(r"^[ \t]*#[^\n]*(?:\\\n[^\n]*)*", re.MULTILINE)

_ACCESS_RE = re.compile(r"\b(?:public|private|protected|virtual)\s+")
_ENUM_BEFORE_RE = re.compile(r"\benum\s*$")

# Statement keywords the method pattern would otherwise read as return types
_NOT_A_TYPE = frozenset({"return", "else", "new", "delete", "throw", "case", "goto", "co_return"})
_NOT_A_METHOD = frozenset({"if", "for", "while", "switch", "catch", "sizeof", "operator", "return"})


class CppExtractor(BraceDelimitedExtractor):
    """Extract classes and structs from C++ sources and headers."""

    language = Language.CPP
    display_name = "C++"
    file_extensions = (".cpp", ".h", ".hpp", ".cc", ".cxx")
    excluded_dirs = ("bin", "obj", "build", "Debug", "Release")

    class_pattern = _CLASS_RE
    namespace_pattern = _NAMESPACE_RE
    method_pattern = _METHOD_RE

    def preprocess(self, source: str) -> str:
        source = _PREPROCESSOR_RE.sub(lambda m: blank(m.group()), source)
        return blank_comments(source)

    def accept_match(self, content: str, match: re.Match) -> bool:
        # "enum class Color {" declares an enumeration, not a class
        window = content[max(0, match.start() - 16):match.start()]
        if _ENUM_BEFORE_RE.search(window):
            return False
        return super().accept_match(content, match)

    def count_methods(self, body: str) -> int:
        count = 0
        for match in self.method_pattern.finditer(body):
            if match.group("type") in _NOT_A_TYPE:
                continue
            if match.group("name") in _NOT_A_METHOD:
                continue
            count += 1
        return count

    def build_entity(
        self,
        match: re.Match,
        body: str,
        namespace: str | None,
        parent_name: str | None,
        file_path: str,
    ) -> ClassEntity:
        bases = [
            self._normalize_name(_ACCESS_RE.sub("", token))
            for token in split_inheritance(match.group("inheritance"))
        ]
        bases = [base for base in bases if base]

        return ClassEntity(
            name=match.group("name"),
            namespace=namespace,
            base_class=bases[0] if bases else None,
            interfaces=tuple(bases[1:]),
            is_abstract=bool(_PURE_VIRTUAL_RE.search(_own_members(body))),
            is_sealed=bool(match.group("final")),
            method_count=self.count_methods(body),
            line_count=body.count("\n"),
            file_path=file_path,
            parent_class_name=parent_name,
        )

    @staticmethod
    def _normalize_name(token: str) -> str:
        """``::ns::Base`` -> ``ns.Base`` so it can match a namespaced full name."""
        token = " ".join(token.split())
        return token.strip(":").replace("::", ".")


def _own_members(body: str) -> str:
    """``body`` with every nested ``{...}`` block blanked, leaving depth-1 declarations."""
    kept = []
    depth = 0
    for ch in body:
        if ch == "}":
            depth -= 1
        kept.append(ch if depth <= 1 or ch == "\n" else " ")
        if ch == "{":
            depth += 1
    return "".join(kept)
