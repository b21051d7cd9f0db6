"""Bootstrap a new project from the template (package.json, README, .env, worktrees, CI)."""

from template_tooling.bootstrap.config import (
    DEFAULT_OPTIONS,
    PACKAGE_MANAGERS,
    merge_options,
    validate_package_manager,
)
from template_tooling.bootstrap.env_file import read_env_file, write_env_file
from template_tooling.bootstrap.project import run_bootstrap

__all__ = [
    "DEFAULT_OPTIONS",
    "PACKAGE_MANAGERS",
    "merge_options",
    "read_env_file",
    "run_bootstrap",
    "validate_package_manager",
    "write_env_file",
]
