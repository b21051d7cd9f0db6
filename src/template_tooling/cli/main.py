"""Main CLI entry point for template tooling."""

import sys

from template_tooling.cli import bootstrap_cmd


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: template-tooling <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  bootstrap [options]  - Personalize package.json, README, .env, worktrees and CI",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "bootstrap":
        bootstrap_cmd.run_bootstrap_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
