# topmark:header:start
#
#   project      : CSSPlus
#   file         : report.py
#   file_relpath : src/cssplus/pipeline/steps/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report step: log lint findings and fail the run when the reporter says so.

With ``reporter.throw_error`` (default ``True``) any finding raises
`LintError`, whose message carries the fixed fragment
``"warnings or errors were found"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cssplus.config.keys import Opt, Plugin
from cssplus.config.logging import get_logger
from cssplus.core.diagnostics import DiagnosticLevel
from cssplus.core.errors import LintError
from cssplus.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cssplus.config.logging import CssplusLogger
    from cssplus.core.diagnostics import DiagnosticStats
    from cssplus.pipeline.context import ProcessingContext

logger: CssplusLogger = get_logger(__name__)


@dataclass
class ReportStep(BaseStep):
    """Surface diagnostics collected by the lint step."""

    name: str = "report"

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return bool(ctx.diagnostics)

    async def run(self, ctx: ProcessingContext) -> None:
        label: str = ctx.filename or "<input>"
        stats: DiagnosticStats = ctx.diagnostic_stats
        logger.info(
            "%s: %d error(s), %d warning(s), %d info",
            label,
            stats.n_error,
            stats.n_warning,
            stats.n_info,
        )
        for diag in ctx.diagnostics:
            if diag.level == DiagnosticLevel.ERROR:
                logger.error("%s: %s", label, diag.render())
            else:
                logger.warning("%s: %s", label, diag.render())

        tbl: Mapping[str, Any] = ctx.options.plugin_options(Plugin.REPORTER)
        if tbl.get(Opt.KEY_THROW_ERROR, True):
            raise LintError(ctx.diagnostics)
