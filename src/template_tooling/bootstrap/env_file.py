""".env handling: read KEY=value pairs; update tool-owned keys in place.

Comments, blank lines and unrelated keys keep their text and position. Keys not
already assigned are appended after a single blank separator line.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from template_tooling.helpers import read_file_or_default, strip_trailing_blank_lines

log = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


def parse_env_line(line: str) -> tuple[str, str] | None:
    """(key, value) for an assignment line; None for blank, comment or keyless lines."""
    s = line.strip()
    if not s or s.startswith(COMMENT_PREFIX):
        return None
    key, _, value = s.partition("=")
    key = key.strip()
    if not key:
        return None
    return key, value.strip()


def read_env_file(path: Path) -> dict[str, str]:
    """Ordered key -> value from path. Missing file is empty; unreadable file warns and is empty."""
    env: dict[str, str] = {}
    if not path.exists():
        return env
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.warning("Could not read %s: %s", path, e)
        return env
    for line in content.split("\n"):
        parsed = parse_env_line(line)
        if parsed:
            key, value = parsed
            env[key] = value
    return env


def _is_assignment(line: str, key: str) -> bool:
    parsed = parse_env_line(line)
    return parsed is not None and parsed[0] == key


def apply_env_values(content: str, values: Mapping[str, str]) -> str:
    """Return content with each key in values assigned; always ends with exactly one newline."""
    lines = content.split("\n")
    to_add: list[str] = []
    for key, value in values.items():
        new_line = f"{key}={value or ''}"
        for i, line in enumerate(lines):
            if _is_assignment(line, key):
                lines[i] = new_line
                break
        else:
            to_add.append(new_line)

    lines = strip_trailing_blank_lines(lines)
    if to_add:
        if lines:
            lines.append("")
        lines.extend(to_add)
    return "\n".join(lines) + "\n" if lines else ""


def write_env_file(path: Path, values: Mapping[str, str]) -> None:
    """Read path (missing is empty), assign values, write back."""
    original = read_file_or_default(path)
    path.write_text(apply_env_values(original, values), encoding="utf-8")
