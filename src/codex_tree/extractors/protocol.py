"""Protocol definition for per-language class extractors.

Every supported language is one member of the closed ``Language`` set and
has exactly one extractor:
- CSharpExtractor and CppExtractor: brace-delimited scanning
- PythonExtractor: indentation-delimited scanning
"""

from __future__ import annotations
from enum import Enum
from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import ClassEntity


class Language(str, Enum):
    """Languages with a registered extractor."""

    CSHARP = "csharp"
    CPP = "cpp"
    PYTHON = "python"


@runtime_checkable
class ClassExtractor(Protocol):
    """Protocol for lexical class extractors.

    Extractors never build a syntax tree. They pattern-match declaration
    introducers over raw text, so comments, strings and macros can fool
    them; that trade-off keeps them fast and dependency free.
    """

    language: Language
    display_name: str
    file_extensions: tuple[str, ...]
    excluded_dirs: tuple[str, ...]

    def extract_source(self, source: str, file_path: str) -> list[ClassEntity]:
        """Extract class entities from already-loaded source text.

        Args:
            source: File content as string.
            file_path: Recorded on every entity; not read.

        Returns:
            Entities in declaration order. Empty when nothing matches.
        """
        ...

    def extract_file(self, file_path: str) -> list[ClassEntity]:
        """Read a file and extract its class entities.

        Raises:
            ExtractionError: The file could not be read or scanned.
        """
        ...
