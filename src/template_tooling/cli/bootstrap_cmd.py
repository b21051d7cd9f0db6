"""CLI for bootstrap: template-bootstrap [--name ...] [--description ...] [options]."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from template_tooling.bootstrap import run_bootstrap, validate_package_manager
from template_tooling.cli.parse_common import collect_flag_value, parse_flags, path_resolver

USAGE = """Usage: template-bootstrap [options]
Options:
  --name <words...>           Project name (multi-word, no quoting needed)
  --description <words...>    Project description
  --packageManager <pm>       npm, pnpm or yarn
  --interactive [false|0]     Prompt and confirm (default), or disable with false/0
  --no-interactive            Apply without prompting
  --project-root PATH         Directory holding the template files (default: cwd)
  --dry-run                   Show the summary; write nothing"""


def parse_bootstrap_args(args: list[str]) -> dict[str, Any]:
    """Parse bootstrap flags into partial options; absent keys mean no CLI override.

    Unknown args are ignored. Raises ValueError for an unsupported --packageManager.
    """
    options: dict[str, Any] = {}
    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--name", "--description"):
            value, i = collect_flag_value(args, i + 1)
            if value:
                options[arg[2:]] = value
            continue
        if arg == "--packageManager" and i + 1 < len(args):
            options["package_manager"] = validate_package_manager(args[i + 1])
            i += 2
            continue
        if arg == "--interactive":
            if i + 1 < len(args) and args[i + 1] in ("false", "0"):
                options["interactive"] = False
                i += 1
            else:
                options["interactive"] = True
        elif arg == "--no-interactive":
            options["interactive"] = False
        i += 1
    return options


def run_bootstrap_argv(argv: list[str] | None = None) -> None:
    """Parse bootstrap flags and run. argv defaults to sys.argv[2:] when called from main."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    if "--help" in argv or "-h" in argv:
        print(USAGE)
        sys.exit(0)

    # --name/--description values end at the next --flag; parse before flags are removed.
    try:
        cli_options = parse_bootstrap_args(argv)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    flags, _rest = parse_flags(argv, ("project_root", "--project-root", Path.cwd, path_resolver))
    code = run_bootstrap(
        cli_options,
        project_root=flags["project_root"],
        argv=argv,
        dry_run="--dry-run" in argv,
    )
    sys.exit(code)


def main() -> None:
    """Console entry point for template-bootstrap."""
    run_bootstrap_argv(sys.argv[1:])


if __name__ == "__main__":
    main()
