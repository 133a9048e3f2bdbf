# topmark:header:start
#
#   project      : CSSPlus
#   file         : prefix.py
#   file_relpath : src/cssplus/pipeline/steps/prefix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Prefix step: apply vendor prefixing per the ``autoprefixer`` table.

Setting ``autoprefixer = false`` skips the step entirely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cssplus.adapters.prefixer import TablePrefixer
from cssplus.config.keys import Plugin
from cssplus.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import Prefixer


@dataclass
class PrefixStep(BaseStep):
    """Apply the configured `Prefixer`."""

    name: str = "prefix"
    prefixer: Prefixer = field(default_factory=TablePrefixer)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return not ctx.options.is_disabled(Plugin.AUTOPREFIXER)

    async def run(self, ctx: ProcessingContext) -> None:
        ctx.css = self.prefixer.prefix(ctx.css, ctx.options.plugin_options(Plugin.AUTOPREFIXER))
