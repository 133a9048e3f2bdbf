# topmark:header:start
#
#   project      : CSSPlus
#   file         : base.py
#   file_relpath : src/cssplus/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner awaits steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = await step(ctx)  # internally: may_proceed → run?

Design goals
------------
- Single place for per-step bookkeeping (the ``ctx.steps`` trail, tracing).
- Clear separation between gating (`may_proceed`) and mutation (`run`).
- Collaborators are passed to the step constructors, never looked up globally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cssplus.config.logging import get_logger

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.context import ProcessingContext

logger: CssplusLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``
    and ``run()``. Do not override ``__call__`` unless you need custom
    lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
    """

    name: str

    async def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Exceptions raised by ``run()`` propagate unchanged.

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        if not self.may_proceed(ctx):
            logger.debug("Pipeline step %s skipped", self.name)
            return ctx

        logger.debug("Pipeline step %s running", self.name)
        ctx.steps.append(self.name)
        await self.run(ctx)
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: ``True`` (always run).
        """
        return True

    async def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass
