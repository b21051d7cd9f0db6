"""Bootstrap configuration: defaults, package managers, install commands, target files, merge."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "pnpm", "yarn")

# Template values; resolution copies, never mutates.
DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType(
    {
        "name": "topheman/vite-react-ts-template",
        "description": "A starter template for frontend projects.",
        "package_manager": "npm",
        "interactive": True,
    }
)

# One-time local setup (.cursor/worktrees.json).
WORKTREE_INSTALL_COMMANDS: Mapping[str, str] = MappingProxyType(
    {
        "npm": "npm install",
        "pnpm": "pnpm install",
        "yarn": "yarn",
    }
)

# CI installs must be reproducible from the lockfile.
CI_INSTALL_COMMANDS: Mapping[str, str] = MappingProxyType(
    {
        "npm": "npm ci",
        "pnpm": "pnpm install",
        "yarn": "yarn install --frozen-lockfile",
    }
)

ENV_TITLE = "VITE_TITLE"
ENV_DESCRIPTION = "VITE_DESCRIPTION"

# Paths relative to project_root, in the order they are patched.
TARGET_FILES: Mapping[str, str] = MappingProxyType(
    {
        "manifest": "package.json",
        "readme": "README.md",
        "env": ".env",
        "worktrees": ".cursor/worktrees.json",
        "workflow": ".github/workflows/deploy.yml",
    }
)


def validate_package_manager(pm: str) -> str:
    """Return pm if it is a supported package manager. Raises ValueError otherwise."""
    if pm in PACKAGE_MANAGERS:
        return pm
    msg = f"Invalid package manager: {pm}. Must be one of: {', '.join(PACKAGE_MANAGERS)}"
    raise ValueError(msg)


def worktree_install_command(package_manager: str) -> str:
    return WORKTREE_INSTALL_COMMANDS[validate_package_manager(package_manager)]


def ci_install_command(package_manager: str) -> str:
    return CI_INSTALL_COMMANDS[validate_package_manager(package_manager)]


def env_values(options: Mapping[str, Any]) -> dict[str, str]:
    """Tool-owned .env keys for options, in the order they are appended."""
    return {
        ENV_TITLE: options["name"],
        ENV_DESCRIPTION: options["description"],
    }


def merge_options(
    cli_options: Mapping[str, Any],
    manifest_values: Mapping[str, str],
    defaults: Mapping[str, Any] = DEFAULT_OPTIONS,
) -> dict[str, Any]:
    """Merge by precedence: CLI value > current package.json value > default.

    Empty strings count as missing. Returns a new dict; inputs are not modified.
    """
    interactive = cli_options.get("interactive")
    return {
        "name": cli_options.get("name") or manifest_values.get("name") or defaults["name"],
        "description": (
            cli_options.get("description")
            or manifest_values.get("description")
            or defaults["description"]
        ),
        "package_manager": cli_options.get("package_manager") or defaults["package_manager"],
        "interactive": defaults["interactive"] if interactive is None else interactive,
    }


def should_skip_interactive(cli_options: Mapping[str, Any], argv: list[str] | None = None) -> bool:
    """True when interactivity is disabled by a parsed flag or a raw argv form.

    Raw forms: --no-interactive, --interactive=false.
    """
    argv = argv or []
    return (
        cli_options.get("interactive") is False
        or "--no-interactive" in argv
        or "--interactive=false" in argv
    )
