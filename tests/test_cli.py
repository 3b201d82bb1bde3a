"""CLI regression tests."""

import pytest
from unittest.mock import patch
from click.testing import CliRunner
from codex_tree.main import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep exports inside the test directory."""
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "exports"))


class TestShow:
    """Non-interactive tree printing."""

    def test_show_help(self, runner):
        result = runner.invoke(cli, ["show", "--help"])

        assert result.exit_code == 0
        assert "--language" in result.output
        assert "--no-recursive" in result.output

    def test_show_auto_detects_language(self, runner, csharp_repo):
        result = runner.invoke(cli, ["show", str(csharp_repo)])

        assert result.exit_code == 0, result.output
        assert "Shape (abstract)" in result.output
        assert "Cache (nested)" in result.output
        assert "Triangle" in result.output
        assert "Statistics" in result.output

    def test_show_with_explicit_language(self, runner, cpp_repo):
        result = runner.invoke(cli, ["show", str(cpp_repo), "-l", "cpp"])

        assert result.exit_code == 0, result.output
        assert "Circle" in result.output
        assert "Color" not in result.output

    def test_show_python(self, runner, python_repo):
        result = runner.invoke(cli, ["show", str(python_repo), "--language", "python"])

        assert result.exit_code == 0, result.output
        assert "Collar (nested)" in result.output
        assert "Stale" not in result.output

    def test_show_requires_existing_path(self, runner):
        result = runner.invoke(cli, ["show", "/nonexistent/path"])

        assert result.exit_code != 0
        assert "does not exist" in result.output

    def test_show_rejects_unknown_language(self, runner, csharp_repo):
        result = runner.invoke(cli, ["show", str(csharp_repo), "-l", "java"])

        assert result.exit_code != 0
        assert "Invalid value" in result.output


class TestNothingToDisplay:
    """Empty results exit with status 1."""

    def test_no_supported_files(self, runner, tmp_path):
        (tmp_path / "notes.txt").write_text("nothing here")

        result = runner.invoke(cli, ["show", str(tmp_path)])

        assert result.exit_code == 1
        assert "No supported source files found" in result.output

    def test_no_files_for_language(self, runner, csharp_repo):
        result = runner.invoke(cli, ["show", str(csharp_repo), "-l", "cpp"])

        assert result.exit_code == 1
        assert "No C++ files found" in result.output

    def test_files_without_classes(self, runner, tmp_path):
        (tmp_path / "script.py").write_text("print('hello')\n")

        result = runner.invoke(cli, ["show", str(tmp_path)])

        assert result.exit_code == 1
        assert "No classes found in 1 Python files" in result.output

    def test_non_recursive_skips_subdirectories(self, runner, csharp_repo):
        result = runner.invoke(cli, ["show", str(csharp_repo), "-l", "csharp", "--no-recursive"])

        assert result.exit_code == 1
        assert "No C# files found" in result.output


class TestExploreAndExport:
    """Interactive and export commands."""

    @patch("codex_tree.main.InteractiveRenderer")
    def test_explore_starts_renderer(self, mock_renderer, runner, csharp_repo):
        result = runner.invoke(cli, ["explore", str(csharp_repo), "--debug"])

        assert result.exit_code == 0, result.output
        mock_renderer.assert_called_once()
        roots = mock_renderer.call_args.args[0]
        kwargs = mock_renderer.call_args.kwargs
        assert [root.name for root in roots] == ["Helpers", "Shape", "Widget"]
        assert kwargs["base_directory"] == csharp_repo.resolve()
        assert kwargs["stats"].total == 7
        mock_renderer.return_value.run.assert_called_once()

    def test_export_writes_svg(self, runner, csharp_repo, tmp_path):
        output_dir = tmp_path / "svg"

        result = runner.invoke(cli, ["export", str(csharp_repo), "-o", str(output_dir)])

        assert result.exit_code == 0, result.output
        assert "Exported to" in result.output
        assert len(list(output_dir.glob("inheritance_tree_*.svg"))) == 1

    def test_export_defaults_to_configured_directory(self, runner, cpp_repo, tmp_path):
        result = runner.invoke(cli, ["export", str(cpp_repo)])

        assert result.exit_code == 0, result.output
        assert len(list((tmp_path / "exports").glob("*.svg"))) == 1


def test_languages_lists_extractors(runner):
    result = runner.invoke(cli, ["languages"])

    assert result.exit_code == 0
    for expected in ("csharp", "cpp", "python", ".cs", ".hpp", ".py"):
        assert expected in result.output
