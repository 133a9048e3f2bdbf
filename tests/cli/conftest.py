# topmark:header:start
#
#   project      : CSSPlus
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running CSSPlus in a controlled working directory.

`run_cli_in()` changes the process working directory to the given path before
invoking the click CLI, so relative input paths and config discovery resolve
against the temporary test directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from cssplus.cli.main import cli
from cssplus.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["build", "a.css"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input
            (for ``build -``).

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["build", "index.css", "--no-config"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g. ``version`` or ``plugins``) or when all provided paths are
    absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_LINT_FAILED(result: Result) -> None:
    """Assert that the reporter failed the build (code 2)."""
    assert result.exit_code == ExitCode.LINT_FAILED, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command failed on configuration (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that an input or imported file was missing (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
