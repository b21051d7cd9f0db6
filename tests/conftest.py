"""Pytest fixtures for template tooling tests."""

from pathlib import Path

import pytest

DEPLOY_YML = """name: Deploy

on:
  push:
    branches: [main]

jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - name: Setup Node
        uses: actions/setup-node@v4
        with:
          node-version: 20
      - name: Install dependencies
        run: npm ci
      - name: Build
        run: npm run build
"""


@pytest.fixture
def deploy_yml() -> str:
    return DEPLOY_YML


@pytest.fixture
def tmp_template_project(tmp_path: Path) -> Path:
    """Temporary copy of the template's target files (package.json is handled by npm, mocked in tests)."""
    (tmp_path / "package.json").write_text(
        '{\n  "name": "topheman/vite-react-ts-template",\n  "description": "A starter template."\n}\n'
    )
    (tmp_path / "README.md").write_text("# vite-react-ts-template\n\nSome intro.\n")
    (tmp_path / ".env").write_text("# app settings\nVITE_TITLE=Old\n\nOTHER=1\n")
    (tmp_path / ".cursor").mkdir()
    (tmp_path / ".cursor" / "worktrees.json").write_text('{"old": true}\n')
    (tmp_path / ".github" / "workflows").mkdir(parents=True)
    (tmp_path / ".github" / "workflows" / "deploy.yml").write_text(DEPLOY_YML)
    return tmp_path
