# topmark:header:start
#
#   project      : CSSPlus
#   file         : minify.py
#   file_relpath : src/cssplus/pipeline/steps/minify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minify step: shrink the output when the ``minify`` option is true."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cssplus.adapters.minifier import WhitespaceMinifier
from cssplus.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import Minifier


@dataclass
class MinifyStep(BaseStep):
    """Apply the configured `Minifier`."""

    name: str = "minify"
    minifier: Minifier = field(default_factory=WhitespaceMinifier)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return ctx.options.minify

    async def run(self, ctx: ProcessingContext) -> None:
        ctx.css = self.minifier.minify(ctx.css)
