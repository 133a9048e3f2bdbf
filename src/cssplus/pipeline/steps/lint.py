# topmark:header:start
#
#   project      : CSSPlus
#   file         : lint.py
#   file_relpath : src/cssplus/pipeline/steps/lint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lint step: run the configured linters over the import-resolved source.

Runs only when the ``lint`` option is true. A linter whose option table is set
to ``false`` (e.g. ``stylelint = false``) is skipped. Findings are collected on
the context; the report step decides whether they fail the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cssplus.adapters.linters import default_linters
from cssplus.config.logging import get_logger
from cssplus.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger
    from cssplus.core.diagnostics import Diagnostic
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import Linter

logger: CssplusLogger = get_logger(__name__)


@dataclass
class LintStep(BaseStep):
    """Collect diagnostics from every enabled linter."""

    name: str = "lint"
    linters: list[Linter] = field(default_factory=default_linters)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.options.lint

    async def run(self, ctx: ProcessingContext) -> None:
        for linter in self.linters:
            if ctx.options.is_disabled(linter.name):
                logger.debug("Linter %s disabled by options", linter.name)
                continue
            found: list[Diagnostic] = linter.lint(ctx.css, ctx.options.plugin_options(linter.name))
            logger.debug("Linter %s: %d finding(s)", linter.name, len(found))
            ctx.diagnostics.extend(found)
