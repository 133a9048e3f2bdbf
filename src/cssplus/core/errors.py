# topmark:header:start
#
#   project      : CSSPlus
#   file         : errors.py
#   file_relpath : src/cssplus/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the CSSPlus pipeline and configuration layers.

These exceptions carry no presentation logic. The CLI maps them to exit codes
and user-facing messages (see `cssplus.cli.errors`).

Errors raised by plugins or collaborators (malformed CSS, I/O failures inside a
custom ``load`` hook, ...) are **not** wrapped; they propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cssplus.constants import LINT_FAILURE_MESSAGE

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cssplus.core.diagnostics import Diagnostic


class CssplusError(Exception):
    """Base class for all CSSPlus errors."""


class ConfigError(CssplusError):
    """Configuration error (missing/invalid/malformed config file)."""


class PluginNotFoundError(CssplusError):
    """A plugin named in ``use`` is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown plugin: {name!r}")
        self.name = name


class LintError(CssplusError):
    """Lint warnings or errors were found and the reporter is set to fail.

    Attributes:
        diagnostics (tuple[Diagnostic, ...]): The diagnostics that triggered the failure.
    """

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        super().__init__(LINT_FAILURE_MESSAGE)
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
