"""Tests for logging configuration."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler
from codex_tree.observability import configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("codex_tree")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_default_level_is_warning():
    logger = configure_logging()

    assert logger.name == "codex_tree"
    assert logger.level == logging.WARNING


def test_debug_level_and_output():
    stream = io.StringIO()
    logger = configure_logging(debug=True, console=Console(file=stream, width=120, color_system=None))

    logging.getLogger("codex_tree.scanner").debug("Scanning %s", "src")

    assert logger.level == logging.DEBUG
    assert "Scanning src" in stream.getvalue()


def test_reconfiguring_replaces_handler():
    configure_logging()
    logger = configure_logging(debug=True)

    assert sum(isinstance(handler, RichHandler) for handler in logger.handlers) == 1
