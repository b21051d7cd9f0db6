"""Shared helpers for template_tooling (text, file read).

Used by the bootstrap patchers and the CLI.
"""

from __future__ import annotations

from pathlib import Path

# --- Text ---


def strip_trailing_blank_lines(lines: list[str]) -> list[str]:
    """Return lines without trailing whitespace-only entries."""
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


# --- File ---


def read_file_or_default(path: Path | None, default: str = "") -> str:
    """Return file text if path is a file, else default."""
    if path is not None and path.is_file():
        return path.read_text(encoding="utf-8")
    return default


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
