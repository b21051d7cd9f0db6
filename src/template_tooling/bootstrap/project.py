"""Bootstrap a project from the template: resolve options, confirm, patch the five target files.

Patches are applied one file at a time with no rollback: if a step fails, files
already patched stay patched and the rest are left untouched.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

from template_tooling.bootstrap.config import (
    DEFAULT_OPTIONS,
    TARGET_FILES,
    env_values,
    merge_options,
    should_skip_interactive,
)
from template_tooling.bootstrap.env_file import write_env_file
from template_tooling.bootstrap.manifest import get_manifest_values, update_manifest
from template_tooling.bootstrap.prompts import Prompter, confirm_changes, prompt_for_options
from template_tooling.bootstrap.readme import update_readme
from template_tooling.bootstrap.summary import render_summary
from template_tooling.bootstrap.workflow import read_install_command, update_deploy_workflow
from template_tooling.bootstrap.worktrees import update_worktrees_json


def collect_options(
    prompter: Prompter,
    cli_options: Mapping[str, Any],
    manifest_values: Mapping[str, str],
    argv: list[str] | None = None,
    defaults: Mapping[str, Any] = DEFAULT_OPTIONS,
) -> dict[str, Any]:
    """Merge CLI, package.json and defaults; prompt when interactive.

    The returned "interactive" is False whenever any form of --no-interactive was given.
    """
    options = merge_options(cli_options, manifest_values, defaults)
    options["interactive"] = options["interactive"] and not should_skip_interactive(
        cli_options, argv
    )
    if options["interactive"]:
        options = prompt_for_options(prompter, options)
    return options


def apply_bootstrap_changes(
    project_root: Path, options: Mapping[str, Any], prompter: Prompter
) -> None:
    """Patch every target file in order. First failure propagates; earlier writes remain."""
    prompter.say("\n🚀 Applying changes...\n")

    prompter.say(f"  ✓ Updating {TARGET_FILES['manifest']}...")
    update_manifest(project_root, options["name"], options["description"])

    prompter.say(f"  ✓ Updating {TARGET_FILES['readme']}...")
    update_readme(project_root / TARGET_FILES["readme"], options["name"])

    prompter.say(f"  ✓ Updating {TARGET_FILES['env']}...")
    write_env_file(project_root / TARGET_FILES["env"], env_values(options))

    prompter.say(f"  ✓ Updating {TARGET_FILES['worktrees']}...")
    update_worktrees_json(project_root / TARGET_FILES["worktrees"], options["package_manager"])

    prompter.say(f"  ✓ Updating {TARGET_FILES['workflow']}...")
    update_deploy_workflow(project_root / TARGET_FILES["workflow"], options["package_manager"])

    prompter.say("\n✅ Bootstrap complete!\n")


def run_bootstrap(
    cli_options: Mapping[str, Any],
    *,
    project_root: Path | None = None,
    argv: list[str] | None = None,
    dry_run: bool = False,
    input_stream: IO[str] | None = None,
    output_stream: IO[str] | None = None,
    defaults: Mapping[str, Any] = DEFAULT_OPTIONS,
) -> int:
    """Run the bootstrap. Returns 0 on success, dry-run or cancellation; 1 on error."""
    root = project_root if project_root is not None else Path.cwd()
    with Prompter(input_stream, output_stream) as prompter:
        try:
            _run_impl(root, cli_options, prompter, argv=argv, dry_run=dry_run, defaults=defaults)
            return 0
        except (ValueError, RuntimeError, OSError) as e:
            print(f"\n❌ error: {e}", file=sys.stderr)
            return 1
        except Exception as e:  # noqa: BLE001
            print(f"\n❌ error: {type(e).__name__}: {e}", file=sys.stderr)
            return 1


def _run_impl(
    root: Path,
    cli_options: Mapping[str, Any],
    prompter: Prompter,
    *,
    argv: list[str] | None,
    dry_run: bool,
    defaults: Mapping[str, Any],
) -> None:
    current_manifest = get_manifest_values(root, defaults)
    options = collect_options(prompter, cli_options, current_manifest, argv, defaults)

    if options["interactive"] or dry_run:
        current_ci = read_install_command(root / TARGET_FILES["workflow"])
        for line in render_summary(options, current_manifest, current_ci):
            prompter.say(line)

    if dry_run:
        prompter.say("\nDry-run: no files written. Run without --dry-run to apply.")
        return

    if options["interactive"] and not confirm_changes(prompter):
        prompter.say("\n❌ Cancelled.")
        return

    apply_bootstrap_changes(root, options, prompter)
