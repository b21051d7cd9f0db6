"""Preview of the changes a bootstrap run will make. Reads nothing, writes nothing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from template_tooling.bootstrap.config import (
    ENV_DESCRIPTION,
    ENV_TITLE,
    TARGET_FILES,
    ci_install_command,
    worktree_install_command,
)
from template_tooling.bootstrap.worktrees import SETUP_KEY
from template_tooling.bootstrap.workflow import INSTALL_STEP_NAME


def render_summary(
    options: Mapping[str, Any],
    current_manifest: Mapping[str, str],
    current_ci_command: str | None = None,
) -> list[str]:
    """Summary lines, one block per target file in patch order."""
    name = options["name"]
    description = options["description"]
    pm = options["package_manager"]
    old_name = current_manifest.get("name", "")
    ci_cmd = ci_install_command(pm)
    ci_change = (
        f'"{current_ci_command}" → "{ci_cmd}"' if current_ci_command is not None else f'"{ci_cmd}"'
    )
    return [
        "\n📋 Summary of changes:\n",
        f"  • {TARGET_FILES['manifest']}:",
        f'    - name: "{old_name}" → "{name}"',
        f'    - description: "{current_manifest.get("description", "")}" → "{description}"',
        f"  • {TARGET_FILES['readme']}:",
        f'    - title: "{old_name}" → "{name}"',
        "    - Resources section will be added (if not present)",
        f"  • {TARGET_FILES['env']}:",
        f'    - {ENV_TITLE}: "{name}"',
        f'    - {ENV_DESCRIPTION}: "{description}"',
        f"  • {TARGET_FILES['worktrees']}:",
        f'    - {SETUP_KEY}: "{worktree_install_command(pm)}"',
        f"  • {TARGET_FILES['workflow']}:",
        f"    - {INSTALL_STEP_NAME}: {ci_change}",
    ]
