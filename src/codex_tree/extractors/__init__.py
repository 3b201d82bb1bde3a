"""Language-specific class extractors."""

from .protocol import ClassExtractor, Language
from .csharp import CSharpExtractor
from .cpp import CppExtractor
from .python import PythonExtractor

__all__ = [
    "ClassExtractor",
    "Language",
    "CSharpExtractor",
    "CppExtractor",
    "PythonExtractor",
]
