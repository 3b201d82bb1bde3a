"""Configuration management for Codex Tree."""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


DEFAULT_IGNORED_DIRS = [
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
]


class Config(BaseModel):
    """Application configuration."""

    # Scanner Settings
    max_file_size: int = Field(default=1_000_000)  # 1MB
    ignored_dirs: list[str] = Field(default_factory=lambda: DEFAULT_IGNORED_DIRS.copy())
    respect_gitignore: bool = Field(default=True)

    # Display Settings
    viewport_height: int = Field(default=16, ge=1)
    preview_height: int = Field(default=16, ge=1)
    preview_width: int = Field(default=70, ge=4)

    # Output Settings
    export_dir: Path = Field(default=Path("exports"))

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        def _parse_int(value: Optional[str], fallback: int) -> int:
            try:
                return int(value) if value is not None else fallback
            except ValueError:
                return fallback

        def _parse_bool(value: Optional[str], fallback: bool) -> bool:
            if value is None:
                return fallback
            return value.strip().lower() in ("1", "true", "yes", "on")

        ignored_dirs = DEFAULT_IGNORED_DIRS.copy()
        extra_ignored = os.getenv("IGNORED_DIRS")
        if extra_ignored:
            ignored_dirs.extend(
                [entry.strip() for entry in extra_ignored.split(",") if entry.strip()]
            )

        export_dir_env = os.getenv("EXPORT_DIR")

        return cls(
            max_file_size=_parse_int(os.getenv("MAX_FILE_SIZE"), 1_000_000),
            ignored_dirs=ignored_dirs,
            respect_gitignore=_parse_bool(os.getenv("RESPECT_GITIGNORE"), True),
            viewport_height=max(1, _parse_int(os.getenv("VIEWPORT_HEIGHT"), 16)),
            preview_height=max(1, _parse_int(os.getenv("PREVIEW_HEIGHT"), 16)),
            preview_width=max(4, _parse_int(os.getenv("PREVIEW_WIDTH"), 70)),
            export_dir=Path(export_dir_env) if export_dir_env else Path("exports"),
        )
