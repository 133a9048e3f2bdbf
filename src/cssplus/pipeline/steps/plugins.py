# topmark:header:start
#
#   project      : CSSPlus
#   file         : plugins.py
#   file_relpath : src/cssplus/pipeline/steps/plugins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin step: instantiate the plugins named in ``use``, in order.

Each identifier is created through the `PluginRegistry` with its own option
table. When a ``debug`` hook is configured it is called once with the instance
list; a non-``None`` return value replaces the list that will run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cssplus.config.logging import get_logger
from cssplus.pipeline.hooks import resolve
from cssplus.pipeline.steps.base import BaseStep
from cssplus.plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import Plugin

logger: CssplusLogger = get_logger(__name__)


@dataclass
class PluginStep(BaseStep):
    """Materialize ``use`` into plugin instances."""

    name: str = "plugins"
    registry: PluginRegistry = field(default_factory=PluginRegistry.with_builtins)

    async def run(self, ctx: ProcessingContext) -> None:
        plugins: list[Plugin] = [
            self.registry.create(name, ctx.options.plugin_options(name))
            for name in ctx.options.use
        ]
        logger.debug("Instantiated plugins: %s", [p.name for p in plugins])

        debug = ctx.options.debug
        if debug is not None:
            returned: Any = await resolve(debug(list(plugins)))
            if returned is not None:
                plugins = list(returned)

        ctx.plugins = plugins
