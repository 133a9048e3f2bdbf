# topmark:header:start
#
#   project      : CSSPlus
#   file         : diagnostics.py
#   file_relpath : src/cssplus/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics support for lint findings."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while linting.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding.

    Attributes:
        level (DiagnosticLevel): Severity.
        message (str): Human-readable message.
        source (str): Identifier of the linter that produced it (e.g. ``"stylelint"``).
        rule (str | None): Rule name, if the linter has named rules.
        line (int | None): 1-based line number in the linted text, if known.
    """

    level: DiagnosticLevel
    message: str
    source: str = ""
    rule: str | None = None
    line: int | None = None

    def render(self, *, color: bool = False) -> str:
        """Return a one-line rendering: ``source: line N: message (rule)``."""
        parts: list[str] = []
        if self.source:
            parts.append(f"{self.source}:")
        if self.line is not None:
            parts.append(f"line {self.line}:")
        parts.append(self.message)
        if self.rule:
            parts.append(f"({self.rule})")
        text: str = " ".join(parts)
        return self.level.color(text) if color else text


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
