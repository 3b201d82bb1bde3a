"""Main CLI entry point for Codex Tree."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table

from .analysis import aggregate, build_forest, build_statistics_panel
from .config import Config
from .errors import CodexTreeError
from .extractors import Language
from .models import HierarchyNode, TreeStats
from .observability import configure_logging
from .registry import ExtractorRegistry, default_registry
from .view import InteractiveRenderer, SvgTreeExporter, build_tree_lines

LANGUAGE_CHOICES = ["auto"] + [language.value for language in Language]

console = Console()


def _common_options(func):
    func = click.option("--debug", is_flag=True, help="Log debug output to stderr")(func)
    func = click.option(
        "--recursive/--no-recursive",
        default=True,
        show_default=True,
        help="Descend into subdirectories",
    )(func)
    func = click.option(
        "--language",
        "-l",
        type=click.Choice(LANGUAGE_CHOICES),
        default="auto",
        show_default=True,
        help="Source language; auto picks the one with the most files",
    )(func)
    func = click.argument("path", type=click.Path(exists=True, file_okay=False, path_type=Path))(func)
    return func


@click.group()
def cli():
    """Codex Tree - explore class inheritance trees in the terminal."""
    pass


@cli.command()
@_common_options
def explore(path: Path, language: str, recursive: bool, debug: bool):
    """Browse the inheritance tree of PATH interactively.

    Examples:
        codex-tree explore ./src

        codex-tree explore ./engine -l cpp --no-recursive
    """
    configure_logging(debug)
    config = Config.from_env()
    roots, stats, root = _load_forest(path, language, recursive, config)

    renderer = InteractiveRenderer(
        roots,
        config,
        stats=stats,
        base_directory=root,
        title=f"Inheritance Tree - {root.name or root}",
    )
    renderer.run()


@cli.command()
@_common_options
def show(path: Path, language: str, recursive: bool, debug: bool):
    """Print the inheritance tree of PATH once and exit."""
    configure_logging(debug)
    config = Config.from_env()
    roots, stats, _ = _load_forest(path, language, recursive, config)

    for line in build_tree_lines(roots):
        console.print(line.text, no_wrap=True, overflow="ignore")
    console.print()
    console.print(build_statistics_panel(stats))


@cli.command()
@_common_options
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), help="Export directory")
def export(path: Path, language: str, recursive: bool, debug: bool, output: Optional[Path]):
    """Write the inheritance tree of PATH to an SVG file."""
    configure_logging(debug)
    config = Config.from_env()
    roots, _, root = _load_forest(path, language, recursive, config)

    exporter = SvgTreeExporter(output or config.export_dir)
    try:
        target = exporter.export(build_tree_lines(roots), f"Inheritance Tree - {root.name or root}")
    except OSError as exc:
        console.print(f"[red]Export failed: {escape(str(exc))}[/red]")
        sys.exit(1)
    console.print(f"[green]✓[/green] Exported to {escape(str(target))}")


@cli.command()
def languages():
    """List supported languages and their file extensions."""
    registry = default_registry()
    table = Table(title="Supported languages")
    table.add_column("Id", style="cyan")
    table.add_column("Language")
    table.add_column("Extensions")
    for language in registry.languages():
        extractor = registry.get(language)
        table.add_row(language.value, extractor.display_name, " ".join(extractor.file_extensions))
    console.print(table)


def _load_forest(
    path: Path,
    language: str,
    recursive: bool,
    config: Config,
    registry: Optional[ExtractorRegistry] = None,
) -> tuple[list[HierarchyNode], TreeStats, Path]:
    """Extract, resolve and summarise; exits with status 1 when there is nothing to display."""
    registry = registry or default_registry()
    root = path.resolve()

    if language == "auto":
        detected = registry.detect_language(root, config, recursive)
        if detected is None:
            _nothing_to_display(f"No supported source files found in {root}")
        language = detected.value

    try:
        extractor = registry.get(language)
    except CodexTreeError as exc:
        console.print(f"[red]{exc}[/red]")
        sys.exit(1)

    console.print(f"Scanning [bold]{escape(str(root))}[/bold] for {extractor.display_name} classes")
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Extracting", total=None)

        def _advance(processed: int, total: int) -> None:
            progress.update(task, completed=processed, total=total)

        result = registry.extract_directory(language, root, config, recursive, progress=_advance)

    if result.errors:
        console.print(f"[yellow]{len(result.errors)} file(s) could not be parsed[/yellow]")
    if not result.files_scanned:
        _nothing_to_display(f"No {extractor.display_name} files found in {root}")
    if not result.entities:
        _nothing_to_display(f"No classes found in {result.files_scanned} {extractor.display_name} files")

    roots = build_forest(result.entities)
    stats = aggregate(roots)
    console.print(f"Found {stats.total} classes in {result.files_scanned} files")
    return roots, stats, root


def _nothing_to_display(message: str) -> NoReturn:
    console.print(f"[yellow]{escape(message)}[/yellow]")
    sys.exit(1)


if __name__ == "__main__":
    cli()
