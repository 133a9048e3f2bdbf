# topmark:header:start
#
#   project      : CSSPlus
#   file         : errors.py
#   file_relpath : src/cssplus/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the CSSPlus CLI.

Usage:
    Commands translate library errors (`cssplus.core.errors`) and I/O failures
    into these click exceptions, which carry the matching `ExitCode`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the click context, they fall back to click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from cssplus.core.exit_codes import ExitCode


class CssplusCliError(click.ClickException):
    """Base class for all CSSPlus CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console: Any = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CssplusUsageError(CssplusCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CssplusLintFailedError(CssplusCliError):
    """Lint findings failed the build."""

    exit_code = ExitCode.LINT_FAILED


class CssplusConfigError(CssplusCliError):
    """Error for configuration errors (invalid config file, unknown plugin)."""

    exit_code = ExitCode.CONFIG_ERROR


class CssplusFileNotFoundError(CssplusCliError):
    """Error when an input or imported path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CssplusIOError(CssplusCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class CssplusPipelineError(CssplusCliError):
    """Error raised by a plugin or collaborator while processing."""

    exit_code = ExitCode.PIPELINE_ERROR
