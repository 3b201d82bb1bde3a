"""Source tree scanner: finds candidate files and runs an extractor over them."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from .config import Config
from .errors import ExtractionError
from .extractors import ClassExtractor
from .models import ClassEntity

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


@dataclass
class ExtractionResult:
    """Everything one extraction batch produced."""

    entities: list[ClassEntity] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    files_scanned: int = 0


class SourceScanner:
    """Walks a directory and extracts class entities file by file."""

    def __init__(self, config: Config):
        """Initialize scanner with configuration.

        Args:
            config: Application configuration with ignored_dirs, max_file_size
        """
        self.config = config
        self.ignored_dirs: set[str] = set(config.ignored_dirs)

    def discover(self, root: Path, extractor: ClassExtractor, recursive: bool = True) -> list[Path]:
        """Collect files the extractor understands, sorted by path.

        Args:
            root: Directory to scan
            extractor: Supplies file extensions and its own excluded directories
            recursive: Descend into subdirectories

        Returns:
            Absolute file paths
        """
        root = Path(root)
        extensions = {ext.lower() for ext in extractor.file_extensions}
        excluded = self.ignored_dirs | set(extractor.excluded_dirs)
        gitignore_spec = self._load_gitignore(root) if self.config.respect_gitignore else None

        files: list[Path] = []
        for current, dirs, filenames in os.walk(root):
            current_path = Path(current)

            if recursive:
                # Prune directories before descending further
                dirs[:] = [
                    directory for directory in dirs
                    if not self._should_ignore(current_path / directory, root, excluded, gitignore_spec)
                ]
            else:
                dirs[:] = []

            for filename in filenames:
                file_path = current_path / filename
                if file_path.suffix.lower() not in extensions:
                    continue
                if self._should_ignore(file_path, root, excluded, gitignore_spec):
                    continue
                files.append(file_path)

        return sorted(files)

    def count_candidates(self, root: Path, extractor: ClassExtractor, recursive: bool = True) -> int:
        return len(self.discover(root, extractor, recursive))

    def extract(
        self,
        root: Path,
        extractor: ClassExtractor,
        recursive: bool = True,
        progress: Optional[ProgressCallback] = None,
    ) -> ExtractionResult:
        """Run ``extractor`` over every discovered file.

        A failing file is logged and recorded in ``errors``; it contributes
        no entities and never stops the batch. ``progress`` is called with
        ``(processed, total)`` after each file, failures included.
        """
        files = self.discover(root, extractor, recursive)
        total = len(files)
        result = ExtractionResult()

        for processed, file_path in enumerate(files, start=1):
            try:
                result.entities.extend(extractor.extract_file(str(file_path)))
            except ExtractionError as exc:
                logger.warning("%s", exc)
                result.errors.append(str(exc))

            result.files_scanned = processed
            if progress is not None:
                progress(processed, total)

        logger.info(
            "Extracted %d classes from %d files (%d errors)",
            len(result.entities), total, len(result.errors),
        )
        return result

    def _should_ignore(
        self,
        path: Path,
        root: Path,
        excluded: set[str],
        gitignore_spec: PathSpec | None = None,
    ) -> bool:
        """Check if path should be ignored.

        Args:
            path: Path to check
            root: Scan root
            excluded: Directory names that are never entered

        Returns:
            True if path should be ignored
        """
        rel_path = path.relative_to(root)
        parts = rel_path.parts if path.is_dir() else rel_path.parts[:-1]
        for part in parts:
            if part in excluded:
                return True

        if gitignore_spec:
            candidate = rel_path.as_posix() + ("/" if path.is_dir() else "")
            if gitignore_spec.match_file(candidate):
                return True

        if path.is_file():
            try:
                if path.stat().st_size > self.config.max_file_size:
                    logger.debug("Skipping %s: larger than %d bytes", path, self.config.max_file_size)
                    return True
            except OSError:
                return True

        return False

    def _load_gitignore(self, root: Path) -> PathSpec | None:
        """Load .gitignore patterns if present."""
        gitignore_path = root / ".gitignore"
        if not gitignore_path.exists():
            return None

        try:
            patterns = gitignore_path.read_text().splitlines()
        except OSError:
            return None

        if not patterns:
            return None

        return PathSpec.from_lines(GitWildMatchPattern, patterns)
