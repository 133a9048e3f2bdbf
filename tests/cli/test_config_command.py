# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_config_command.py
#   file_relpath : tests/cli/test_config_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `cssplus config` command group."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli


def test_defaults_are_printed_as_toml() -> None:
    result: Result = run_cli(["config", "defaults"])

    assert_SUCCESS(result)
    assert 'use = ["cssplus", "simple-reset"]' in result.output
    assert "lint = true" in result.output
    assert "[autoprefixer]" in result.output
    assert "debug" not in result.output


def test_dump_merges_the_discovered_config(isolation: Path) -> None:
    (isolation / "cssplus.toml").write_text(
        'lint = false\nuse = ["postcss-at2x"]\n', encoding="utf-8"
    )

    result: Result = run_cli_in(isolation, ["config", "dump"])

    assert_SUCCESS(result)
    assert "lint = false" in result.output
    assert 'use = ["cssplus", "simple-reset", "postcss-at2x"]' in result.output


def test_dump_without_config(isolation: Path) -> None:
    (isolation / "cssplus.toml").write_text("lint = false\n", encoding="utf-8")

    result: Result = run_cli_in(isolation, ["config", "dump", "--no-config"])

    assert_SUCCESS(result)
    assert "lint = true" in result.output


def test_dump_reads_pyproject_tool_table(isolation: Path) -> None:
    (isolation / "cssplus.toml").unlink()
    (isolation / "pyproject.toml").write_text(
        '[project]\nname = "site"\n\n[tool.cssplus]\nminify = true\n', encoding="utf-8"
    )

    result: Result = run_cli_in(isolation, ["config", "dump"])

    assert_SUCCESS(result)
    assert "minify = true" in result.output


def test_dump_rejects_broken_config(isolation: Path) -> None:
    (isolation / "cssplus.toml").write_text("lint = \n", encoding="utf-8")

    result: Result = run_cli_in(isolation, ["config", "dump"])

    assert_CONFIG_ERROR(result)


def test_path_prints_the_discovered_file(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["config", "path"])

    assert_SUCCESS(result)
    assert result.output.strip() == str((isolation / "cssplus.toml").resolve())


def test_path_without_config(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["config", "path"])

    assert_SUCCESS(result)
    assert "No config file found" in result.output
