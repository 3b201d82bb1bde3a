"""Codex Tree - class inheritance explorer for source trees."""

__version__ = "0.1.0"
