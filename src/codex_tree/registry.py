"""Registry mapping languages and file extensions to extractors."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .config import Config
from .errors import UnsupportedLanguageError
from .extractors import ClassExtractor, CppExtractor, CSharpExtractor, Language, PythonExtractor
from .scanner import ExtractionResult, ProgressCallback, SourceScanner

logger = logging.getLogger(__name__)


class ExtractorRegistry:
    """Immutable lookup table of extractors, one per ``Language``.

    Build it once at startup (``default_registry()``) and hand it to the
    components that need it.
    """

    def __init__(self, extractors: Iterable[ClassExtractor]) -> None:
        table: dict[Language, ClassExtractor] = {}
        for extractor in extractors:
            if extractor.language in table:
                raise ValueError(f"Duplicate extractor for {extractor.language.value}")
            table[extractor.language] = extractor
        self._extractors: Mapping[Language, ClassExtractor] = MappingProxyType(table)

        by_extension: dict[str, ClassExtractor] = {}
        for extractor in table.values():
            for ext in extractor.file_extensions:
                by_extension.setdefault(ext.lower(), extractor)
        self._by_extension: Mapping[str, ClassExtractor] = MappingProxyType(by_extension)

    def __contains__(self, language: object) -> bool:
        try:
            return Language(language) in self._extractors
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._extractors)

    def languages(self) -> list[Language]:
        return list(self._extractors)

    def get(self, language: Language | str) -> ClassExtractor:
        """Extractor for a language id such as ``"csharp"``."""
        try:
            return self._extractors[Language(language)]
        except (ValueError, KeyError):
            raise UnsupportedLanguageError(f"No extractor registered for {language!r}") from None

    def for_extension(self, extension: str) -> ClassExtractor:
        """Extractor for a file extension including the dot (``".cs"``)."""
        extractor = self._by_extension.get(extension.lower())
        if extractor is None:
            raise UnsupportedLanguageError(f"No extractor registered for extension {extension!r}")
        return extractor

    def for_path(self, file_path: str) -> ClassExtractor:
        return self.for_extension(PurePosixPath(file_path).suffix)

    def detect_language(self, root: Path, config: Config, recursive: bool = True) -> Optional[Language]:
        """Language with the most candidate files under ``root``.

        Ties go to the earlier registered language. Returns None when no
        registered extractor finds a single file.
        """
        scanner = SourceScanner(config)
        best: Optional[Language] = None
        best_count = 0
        for language, extractor in self._extractors.items():
            count = scanner.count_candidates(root, extractor, recursive)
            logger.debug("%s: %d candidate files", extractor.display_name, count)
            if count > best_count:
                best, best_count = language, count
        return best

    def extract_directory(
        self,
        language: Language | str,
        root: Path,
        config: Config,
        recursive: bool = True,
        progress: Optional[ProgressCallback] = None,
    ) -> ExtractionResult:
        """Extract every class from ``root`` with the language's extractor."""
        extractor = self.get(language)
        return SourceScanner(config).extract(Path(root), extractor, recursive, progress)


def default_registry() -> ExtractorRegistry:
    """Registry with every built-in extractor."""
    return ExtractorRegistry([CSharpExtractor(), CppExtractor(), PythonExtractor()])
