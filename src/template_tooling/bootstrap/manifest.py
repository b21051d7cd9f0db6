"""package.json name/description via `npm pkg get|set` (npm owns the JSON structure)."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from template_tooling.bootstrap.config import DEFAULT_OPTIONS

log = logging.getLogger(__name__)

MANIFEST_FIELDS = ("name", "description")


def _npm_pkg(args: list[str], cwd: Path) -> str:
    cmd = ["npm", "pkg", *args]
    log.debug("Running %s in %s", cmd, cwd)
    r = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=True)
    return r.stdout


def parse_npm_pkg_value(output: str) -> str:
    """Decode the JSON printed by `npm pkg get <key>`; an unset key prints {} and maps to "".

    Raises ValueError if output is not JSON.
    """
    value = json.loads(output)
    if isinstance(value, dict) and not value:
        return ""
    return value if isinstance(value, str) else str(value)


def get_manifest_values(
    project_root: Path, defaults: Mapping[str, Any] = DEFAULT_OPTIONS
) -> dict[str, str]:
    """Current name and description from package.json; defaults (with a warning) on failure."""
    try:
        return {
            key: parse_npm_pkg_value(_npm_pkg(["get", key], project_root))
            for key in MANIFEST_FIELDS
        }
    except (subprocess.CalledProcessError, OSError, ValueError) as e:
        log.warning("Could not read package.json (%s); using defaults", e)
        return {key: defaults[key] for key in MANIFEST_FIELDS}


def update_manifest(project_root: Path, name: str, description: str) -> None:
    """Set package.json name and description. Raises RuntimeError if npm fails."""
    for key, value in (("name", name), ("description", description)):
        try:
            _npm_pkg(["set", f"{key}={value}"], project_root)
        except subprocess.CalledProcessError as e:
            msg = f"npm pkg set {key} failed in {project_root}: {(e.stderr or e.stdout or '').strip()}"
            raise RuntimeError(msg) from e
        except FileNotFoundError as e:
            msg = f"npm not found; cannot update package.json: {e}"
            raise RuntimeError(msg) from e
