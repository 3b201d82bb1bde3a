"""Exception types raised by Codex Tree."""

from __future__ import annotations


class CodexTreeError(Exception):
    """Base class for all Codex Tree errors."""


class ExtractionError(CodexTreeError):
    """A single source file could not be scanned.

    Raised by extractors and caught by the scanning batch, which logs it
    and moves on to the next file.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error parsing {path}: {reason}")
        self.path = path
        self.reason = reason


class UnsupportedLanguageError(CodexTreeError):
    """No extractor is registered for the requested language or extension."""
