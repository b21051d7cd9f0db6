"""GitHub Actions deploy workflow: set the `run:` of the "Install dependencies" step.

Two strategies, first match only:
  pattern   - regex across the `- name:` line and the following `run:` line
  line-scan - line containing the step name whose next line contains `run:`
The text is edited in place so comments and formatting survive; PyYAML is only
used to read the current command and to check the result still parses.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from template_tooling.bootstrap.config import ci_install_command

log = logging.getLogger(__name__)

INSTALL_STEP_NAME = "Install dependencies"

_INSTALL_STEP_RE = re.compile(r"(\s+- name: " + re.escape(INSTALL_STEP_NAME) + r"\s+run: )(.+)")
_RUN_RE = re.compile(r"run: .+")

STRATEGY_PATTERN = "pattern"
STRATEGY_LINE_SCAN = "line-scan"
STRATEGY_NONE = "none"


def replace_install_command(content: str, command: str) -> tuple[str, str]:
    """Return (new content, strategy used). Content is unchanged when strategy is "none"."""
    if _INSTALL_STEP_RE.search(content):
        new = _INSTALL_STEP_RE.sub(lambda m: m.group(1) + command, content, count=1)
        return new, STRATEGY_PATTERN

    lines = content.split("\n")
    for i in range(len(lines) - 1):
        if INSTALL_STEP_NAME in lines[i] and "run:" in lines[i + 1]:
            lines[i + 1] = _RUN_RE.sub(lambda _m: f"run: {command}", lines[i + 1], count=1)
            return "\n".join(lines), STRATEGY_LINE_SCAN
    return content, STRATEGY_NONE


def _parses(text: str) -> bool:
    try:
        yaml.safe_load(text)
    except yaml.YAMLError:
        return False
    return True


def find_install_step_command(workflow: Any) -> str | None:
    """`run` of the first "Install dependencies" step in a loaded workflow, if any."""
    if not isinstance(workflow, dict):
        return None
    jobs = workflow.get("jobs")
    if not isinstance(jobs, dict):
        return None
    for job in jobs.values():
        steps = job.get("steps") if isinstance(job, dict) else None
        if not isinstance(steps, list):
            continue
        for step in steps:
            if isinstance(step, dict) and step.get("name") == INSTALL_STEP_NAME:
                run = step.get("run")
                return str(run).strip() if run is not None else None
    return None


def read_install_command(path: Path) -> str | None:
    """Current install command in the workflow at path; None if missing or unreadable."""
    if not path.is_file():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            return find_install_step_command(yaml.safe_load(f))
    except (OSError, yaml.YAMLError) as e:
        log.debug("Could not read install step from %s: %s", path, e)
        return None


def update_deploy_workflow(path: Path, package_manager: str) -> str:
    """Patch the install step for package_manager and write path. Returns the strategy used.

    Raises OSError if path cannot be read or written, ValueError if a workflow that
    parsed as YAML before patching no longer does.
    """
    content = path.read_text(encoding="utf-8")
    new, strategy = replace_install_command(content, ci_install_command(package_manager))
    if strategy == STRATEGY_NONE:
        log.warning("No %r step with a run command found in %s", INSTALL_STEP_NAME, path)
    elif _parses(content) and not _parses(new):
        msg = f"{path} is no longer valid YAML after patching the {INSTALL_STEP_NAME!r} step"
        raise ValueError(msg)
    path.write_text(new, encoding="utf-8")
    return strategy
