"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from codex_tree.config import Config


CSHARP_SHAPES = """\
using System;

namespace Shapes.Core
{
    public abstract class Shape
    {
        public abstract double Area();
        public virtual string Describe() { return "shape"; }
    }

    public class Circle : Shape, IComparable
    {
        public double Radius { get; set; }
        public override double Area() { return 3.14 * Radius * Radius; }

        private class Cache
        {
        }
    }

    public sealed class Square : Shape
    {
        public override double Area() { return 1.0; }
    }

    public static class Helpers
    {
    }

    public class Widget : IDisposable, IComparable
    {
        public void Dispose() { }
    }
}
"""

CPP_SHAPES = """\
#include <string>

namespace geo {

class Shape {
public:
    virtual ~Shape() = default;
    virtual double area() const = 0;
};

class Circle : public Shape {
public:
    double area() const override { return 3.14; }
    double radius() const { return r_; }
private:
    double r_;
};

class Square final : public Shape, private Printable {
public:
    double area() const override;
};

enum class Color { Red, Green };

}
"""

PYTHON_ANIMALS = """\
from abc import ABC


class Animal(ABC):
    \"\"\"Base animal.\"\"\"

    def speak(self):
        raise NotImplementedError

    def _secret(self):
        pass

    def __repr__(self):
        return "Animal"


class Dog(Animal):
    # class Fake(Animal):
    def speak(self):
        return "woof"

    class Collar:
        def size(self):
            return 1


class Meta(Base, metaclass=ABCMeta):
    pass
"""


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Provide a test configuration."""
    return Config(export_dir=tmp_path / "exports")


@pytest.fixture
def csharp_repo(tmp_path: Path) -> Path:
    """A small C# project with a bin/ directory that must be skipped."""
    repo = tmp_path / "csharp_repo"
    (repo / "src").mkdir(parents=True)
    (repo / "bin").mkdir()
    (repo / "src" / "Shapes.cs").write_text(CSHARP_SHAPES)
    (repo / "src" / "Triangle.cs").write_text(
        "namespace Shapes.Core\n{\n    public class Triangle : Shape\n    {\n    }\n}\n"
    )
    (repo / "bin" / "Generated.cs").write_text("public class Generated { }\n")
    (repo / "README.md").write_text("# Shapes")
    return repo


@pytest.fixture
def cpp_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "cpp_repo"
    repo.mkdir()
    (repo / "shapes.hpp").write_text(CPP_SHAPES)
    return repo


@pytest.fixture
def python_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "python_repo"
    (repo / "pkg").mkdir(parents=True)
    (repo / "pkg" / "animals.py").write_text(PYTHON_ANIMALS)
    (repo / "pkg" / "__pycache__").mkdir()
    (repo / "pkg" / "__pycache__" / "stale.py").write_text("class Stale:\n    pass\n")
    return repo


@pytest.fixture
def csharp_source() -> str:
    return CSHARP_SHAPES


@pytest.fixture
def cpp_source() -> str:
    return CPP_SHAPES


@pytest.fixture
def python_source() -> str:
    return PYTHON_ANIMALS
