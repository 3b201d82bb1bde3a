"""Tests for the extractor registry."""

import pytest
from codex_tree.errors import UnsupportedLanguageError
from codex_tree.extractors import CppExtractor, CSharpExtractor, Language, PythonExtractor
from codex_tree.registry import ExtractorRegistry, default_registry


class TestExtractorRegistry:
    """Lookup by language id and file extension."""

    def setup_method(self):
        self.registry = default_registry()

    def test_default_registry_has_every_language(self):
        assert len(self.registry) == 3
        assert self.registry.languages() == [Language.CSHARP, Language.CPP, Language.PYTHON]

    def test_get_by_id(self):
        assert isinstance(self.registry.get("csharp"), CSharpExtractor)
        assert isinstance(self.registry.get(Language.CPP), CppExtractor)

    def test_get_unknown_language_raises(self):
        with pytest.raises(UnsupportedLanguageError):
            self.registry.get("java")

    def test_contains(self):
        assert "python" in self.registry
        assert Language.CSHARP in self.registry
        assert "java" not in self.registry

    def test_for_extension_is_case_insensitive(self):
        assert isinstance(self.registry.for_extension(".HPP"), CppExtractor)
        assert isinstance(self.registry.for_path("pkg/module.py"), PythonExtractor)

    def test_for_unknown_extension_raises(self):
        with pytest.raises(UnsupportedLanguageError):
            self.registry.for_extension(".java")

    def test_duplicate_language_is_rejected(self):
        with pytest.raises(ValueError):
            ExtractorRegistry([CSharpExtractor(), CSharpExtractor()])


def test_detect_language_picks_most_files(csharp_repo, config):
    (csharp_repo / "tool.py").write_text("class Tool:\n    pass\n")

    assert default_registry().detect_language(csharp_repo, config) is Language.CSHARP


def test_detect_language_ignores_excluded_dirs(python_repo, config):
    assert default_registry().detect_language(python_repo, config) is Language.PYTHON


def test_detect_language_empty_directory(tmp_path, config):
    assert default_registry().detect_language(tmp_path, config) is None


def test_extract_directory(cpp_repo, config):
    result = default_registry().extract_directory("cpp", cpp_repo, config)

    assert [e.name for e in result.entities] == ["Shape", "Circle", "Square"]
    assert result.files_scanned == 1
