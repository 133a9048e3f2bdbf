# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_build.py
#   file_relpath : tests/cli/test_build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `cssplus build`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cssplus.cli.commands.build import apply_cli_overrides
from cssplus.core.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_LINT_FAILED,
    assert_SUCCESS,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark = pytest.mark.cli

COMPONENT_OUT: str = (
    ".u-img {\n  border-radius: 50%;\n}\n\n/** @define Foo */\n\n\n.Foo {\n  color: red;\n}\n"
)


def test_build_to_stdout(fixtures_dir: Path) -> None:
    result: Result = run_cli_in(fixtures_dir, ["build", "component.css", "--no-config"])

    assert_SUCCESS(result)
    assert result.output == COMPONENT_OUT


def test_build_to_file(fixtures_dir: Path, tmp_path: Path) -> None:
    out: Path = tmp_path / "dist.css"
    result: Result = run_cli_in(
        fixtures_dir, ["build", "component.css", "--no-config", "-o", str(out)]
    )

    assert_SUCCESS(result)
    assert result.output == ""
    assert out.read_text(encoding="utf-8") == COMPONENT_OUT


def test_build_from_stdin(isolation: Path) -> None:
    result: Result = run_cli_in(
        isolation, ["build", "-"], input_text=".test { filter: blur(1px) }"
    )

    assert_SUCCESS(result)
    assert result.output == ".test { -webkit-filter: blur(1px); filter: blur(1px) }\n"


def test_stdin_is_read_without_deprecation_warnings(
    isolation: Path, recwarn: pytest.WarningsRecorder
) -> None:
    result: Result = run_cli_in(isolation, ["build", "-", "--no-lint"], input_text=".a {}\n")

    assert_SUCCESS(result)
    assert [
        w
        for w in recwarn.list
        if issubclass(w.category, DeprecationWarning) and "cssplus" in w.filename
    ] == []


def test_root_option_anchors_stdin_imports(isolation: Path, fixtures_dir: Path) -> None:
    result: Result = run_cli_in(
        isolation,
        ["build", "-", "--root", str(fixtures_dir), "--no-lint"],
        input_text='@import "./util.css";\n',
    )

    assert_SUCCESS(result)
    assert result.output == ".u-img {\n  border-radius: 50%;\n}\n"


def test_minify_flag(isolation: Path) -> None:
    result: Result = run_cli_in(
        isolation, ["build", "-", "--minify"], input_text="body {\n  margin: 0;\n}\n"
    )

    assert_SUCCESS(result)
    assert result.output == "body{margin:0}\n"


def test_discovered_config_is_applied(isolation: Path) -> None:
    (isolation / "cssplus.toml").write_text("minify = true\n", encoding="utf-8")

    result: Result = run_cli_in(isolation, ["build", "-"], input_text="body {\n  margin: 0;\n}\n")

    assert_SUCCESS(result)
    assert result.output == "body{margin:0}\n"


def test_cli_flags_override_the_config_file(isolation: Path) -> None:
    (isolation / "cssplus.toml").write_text("minify = true\n", encoding="utf-8")

    result: Result = run_cli_in(
        isolation, ["build", "-", "--no-minify"], input_text="body {\n  margin: 0;\n}\n"
    )

    assert_SUCCESS(result)
    assert result.output == "body {\n  margin: 0;\n}\n"


def test_lint_failure_exits_with_lint_failed(fixtures_dir: Path) -> None:
    result: Result = run_cli_in(fixtures_dir, ["build", "stylelint.css", "--no-config"])

    assert_LINT_FAILED(result)
    assert "indentation" in result.output
    assert "warnings or errors were found" in result.output


def test_reporter_can_be_relaxed_in_config(fixtures_dir: Path) -> None:
    (fixtures_dir / "cssplus.toml").write_text(
        "[reporter]\nthrow_error = false\n", encoding="utf-8"
    )

    result: Result = run_cli_in(fixtures_dir, ["build", "stylelint.css"])

    assert_SUCCESS(result)
    assert "Expected indentation of 2 spaces" in result.output


def test_missing_input(isolation: Path) -> None:
    result: Result = run_cli_in(isolation, ["build", "nope.css"])

    assert_FILE_NOT_FOUND(result)


def test_missing_import(isolation: Path) -> None:
    (isolation / "index.css").write_text('@import "./gone.css";\n', encoding="utf-8")

    result: Result = run_cli_in(isolation, ["build", "index.css", "--no-lint"])

    assert_FILE_NOT_FOUND(result)


def test_invalid_config_file(isolation: Path) -> None:
    bad: Path = isolation / "bad.toml"
    bad.write_text("use = [\n", encoding="utf-8")

    result: Result = run_cli_in(isolation, ["build", "-", "--config", str(bad)], input_text="")

    assert_CONFIG_ERROR(result)


def test_unknown_plugin(isolation: Path) -> None:
    result: Result = run_cli_in(
        isolation, ["build", "-", "--use", "postcss-at2x"], input_text="body {}"
    )

    assert_CONFIG_ERROR(result)
    assert "postcss-at2x" in result.output


def test_apply_cli_overrides_appends_plugins(tmp_path: Path) -> None:
    options = apply_cli_overrides(
        {"use": "postcss-at2x", "lint": True},
        root=tmp_path,
        use=("easy-import",),
        minify=None,
        lint=False,
    )

    assert options == {
        "use": ["postcss-at2x", "easy-import"],
        "lint": False,
        "root": str(tmp_path.resolve()),
    }


def test_refuses_to_overwrite_the_input(fixtures_dir: Path) -> None:
    result: Result = run_cli_in(
        fixtures_dir, ["build", "component.css", "--no-config", "-o", "component.css"]
    )

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
    assert (fixtures_dir / "component.css").read_text(encoding="utf-8").startswith("@import")
