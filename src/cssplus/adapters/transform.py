# topmark:header:start
#
#   project      : CSSPlus
#   file         : transform.py
#   file_relpath : src/cssplus/adapters/transform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequential transform pipeline: runs each plugin on the previous plugin's output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cssplus.config.logging import get_logger
from cssplus.pipeline.hooks import resolve

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.contracts import Plugin

logger: CssplusLogger = get_logger(__name__)


class SequentialTransform:
    """`TransformPipeline` that applies plugins one after another."""

    async def run(
        self,
        css: str,
        plugins: Sequence[Plugin],
        options: Mapping[str, Any],
    ) -> str:
        for plugin in plugins:
            css = await resolve(plugin(css, options))
            logger.trace("Plugin %s applied (%d chars)", plugin.name, len(css))
        return css
