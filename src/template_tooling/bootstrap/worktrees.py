""".cursor/worktrees.json: fully owned, rewritten on every run."""

from __future__ import annotations

import json
from pathlib import Path

from template_tooling.bootstrap.config import worktree_install_command
from template_tooling.helpers import write_text

SETUP_KEY = "setup-worktree"


def build_worktrees_config(package_manager: str) -> dict[str, list[str]]:
    return {SETUP_KEY: [worktree_install_command(package_manager)]}


def update_worktrees_json(path: Path, package_manager: str) -> None:
    """Overwrite path with the setup command for package_manager (prior content discarded)."""
    config = build_worktrees_config(package_manager)
    write_text(path, json.dumps(config, indent=2) + "\n")
