# topmark:header:start
#
#   project      : CSSPlus
#   file         : runner.py
#   file_relpath : src/cssplus/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the CSSPlus step pipeline for a single stylesheet."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cssplus.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import Step

logger: CssplusLogger = get_logger(__name__)


async def run(ctx: ProcessingContext, steps: Sequence[Step]) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
            Each step is awaited with the context and returns it.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    logger.info("Processing %s (use: %s)", ctx.filename or "<input>", ", ".join(ctx.options.use))
    for step in steps:
        ctx = await step(ctx)
    logger.debug("Steps run: %s", " -> ".join(ctx.steps))
    return ctx
