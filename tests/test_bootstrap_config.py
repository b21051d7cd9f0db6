"""Tests for template_tooling.bootstrap.config (validation, command tables, merge)."""

import pytest


class TestValidatePackageManager:
    def test_accepts_supported(self) -> None:
        from template_tooling.bootstrap.config import validate_package_manager

        for pm in ("npm", "pnpm", "yarn"):
            assert validate_package_manager(pm) == pm

    def test_rejects_unknown(self) -> None:
        from template_tooling.bootstrap.config import validate_package_manager

        with pytest.raises(ValueError, match="Invalid package manager: bun"):
            validate_package_manager("bun")

    def test_rejects_case_variant(self) -> None:
        from template_tooling.bootstrap.config import validate_package_manager

        with pytest.raises(ValueError, match="Must be one of: npm, pnpm, yarn"):
            validate_package_manager("NPM")


class TestInstallCommands:
    def test_worktree_commands(self) -> None:
        from template_tooling.bootstrap.config import worktree_install_command

        assert worktree_install_command("npm") == "npm install"
        assert worktree_install_command("pnpm") == "pnpm install"
        assert worktree_install_command("yarn") == "yarn"

    def test_ci_commands_are_locked(self) -> None:
        from template_tooling.bootstrap.config import ci_install_command

        assert ci_install_command("npm") == "npm ci"
        assert ci_install_command("pnpm") == "pnpm install"
        assert ci_install_command("yarn") == "yarn install --frozen-lockfile"


class TestMergeOptions:
    def test_cli_wins(self) -> None:
        from template_tooling.bootstrap.config import merge_options

        got = merge_options(
            {"name": "cli", "description": "cli desc", "package_manager": "yarn"},
            {"name": "pkg", "description": "pkg desc"},
        )
        assert got == {
            "name": "cli",
            "description": "cli desc",
            "package_manager": "yarn",
            "interactive": True,
        }

    def test_manifest_then_default(self) -> None:
        from template_tooling.bootstrap.config import DEFAULT_OPTIONS, merge_options

        got = merge_options({}, {"name": "pkg", "description": ""})
        assert got["name"] == "pkg"
        assert got["description"] == DEFAULT_OPTIONS["description"]
        assert got["package_manager"] == "npm"

    def test_interactive_false_kept(self) -> None:
        from template_tooling.bootstrap.config import merge_options

        assert merge_options({"interactive": False}, {})["interactive"] is False

    def test_custom_defaults_not_mutated(self) -> None:
        from template_tooling.bootstrap.config import merge_options

        defaults = {
            "name": "d",
            "description": "dd",
            "package_manager": "pnpm",
            "interactive": False,
        }
        got = merge_options({"name": "x"}, {}, defaults)
        got["name"] = "changed"
        assert defaults["name"] == "d"
        assert got["package_manager"] == "pnpm"
        assert got["interactive"] is False

    def test_default_options_read_only(self) -> None:
        from template_tooling.bootstrap.config import DEFAULT_OPTIONS

        with pytest.raises(TypeError):
            DEFAULT_OPTIONS["name"] = "x"  # type: ignore[index]


class TestShouldSkipInteractive:
    def test_parsed_flag(self) -> None:
        from template_tooling.bootstrap.config import should_skip_interactive

        assert should_skip_interactive({"interactive": False}) is True
        assert should_skip_interactive({"interactive": True}) is False
        assert should_skip_interactive({}) is False

    def test_raw_forms(self) -> None:
        from template_tooling.bootstrap.config import should_skip_interactive

        assert should_skip_interactive({}, ["--no-interactive"]) is True
        assert should_skip_interactive({}, ["--interactive=false"]) is True
        assert should_skip_interactive({}, ["--name", "x"]) is False


class TestEnvValues:
    def test_owned_keys_in_order(self) -> None:
        from template_tooling.bootstrap.config import env_values

        got = env_values({"name": "demo", "description": "desc"})
        assert list(got.items()) == [("VITE_TITLE", "demo"), ("VITE_DESCRIPTION", "desc")]
