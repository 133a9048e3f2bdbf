# topmark:header:start
#
#   project      : CSSPlus
#   file         : transform.py
#   file_relpath : src/cssplus/pipeline/steps/transform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transform step: hand the instantiated plugins to the transform pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cssplus.adapters.transform import SequentialTransform
from cssplus.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import TransformPipeline


@dataclass
class TransformStep(BaseStep):
    """Run ``ctx.plugins`` over ``ctx.css`` with the processor options."""

    name: str = "transform"
    pipeline: TransformPipeline = field(default_factory=SequentialTransform)

    async def run(self, ctx: ProcessingContext) -> None:
        ctx.css = await self.pipeline.run(ctx.css, ctx.plugins, ctx.processor_options)
