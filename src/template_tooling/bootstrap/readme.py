"""README.md: title heading on line 1 and a Resources section appended once."""

from __future__ import annotations

from pathlib import Path

RESOURCES_HEADER = "## Resources"

RESOURCES_SECTION = f"""{RESOURCES_HEADER}

This project is based on the [topheman/vite-react-ts-template](https://github.com/topheman/vite-react-ts-template) template.
"""


def update_readme_title(content: str, name: str) -> str:
    """Replace a heading on line 1 with `# name`, or insert one above line 1."""
    lines = content.split("\n")
    if lines[0].startswith("#"):
        lines[0] = f"# {name}"
    else:
        lines.insert(0, f"# {name}")
    return "\n".join(lines)


def append_resources_section(content: str) -> str:
    """Append the Resources section unless its header is already present."""
    if RESOURCES_HEADER in content:
        return content
    separator = "\n" if content.endswith("\n") else "\n\n"
    return content + separator + RESOURCES_SECTION


def patch_readme(content: str, name: str) -> str:
    return append_resources_section(update_readme_title(content, name))


def update_readme(path: Path, name: str) -> None:
    """Rewrite README title and ensure the Resources section. Missing file raises OSError."""
    content = path.read_text(encoding="utf-8")
    path.write_text(patch_readme(content, name), encoding="utf-8")
