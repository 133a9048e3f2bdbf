# topmark:header:start
#
#   project      : CSSPlus
#   file         : imports.py
#   file_relpath : src/cssplus/pipeline/steps/imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Import step: inline ``@import`` directives and report the imported files.

Reads the ``easy-import`` table of the merged options:

- ``root``: base directory for relative imports (falls back to the source
  file's directory, then to the current working directory);
- ``load``: optional hook ``load(path) -> str`` (or an awaitable resolving to a
  string) replacing the default file read;
- ``on_import``: optional hook receiving the list of imported file paths.

The watch notifier receives the same list on every run, whether or not a
custom ``on_import`` hook is configured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cssplus.adapters.imports import FileImportResolver
from cssplus.adapters.watch import WatchFileList
from cssplus.config.keys import Opt, Plugin
from cssplus.config.logging import get_logger
from cssplus.pipeline.hooks import resolve
from cssplus.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.context import ProcessingContext
    from cssplus.pipeline.contracts import ImportResolver, WatchNotifier

logger: CssplusLogger = get_logger(__name__)


def import_root(ctx: ProcessingContext) -> Path:
    """Return the directory relative imports resolve against."""
    tbl: Mapping[str, Any] = ctx.options.plugin_options(Plugin.EASY_IMPORT)
    root: Any = tbl.get(Opt.ROOT) or ctx.options.root
    if root:
        return Path(str(root))
    if ctx.filename:
        return Path(ctx.filename).parent
    return Path.cwd()


@dataclass
class ImportStep(BaseStep):
    """Inline imports through the configured `ImportResolver`."""

    name: str = "imports"
    resolver: ImportResolver = field(default_factory=FileImportResolver)
    watcher: WatchNotifier = field(default_factory=WatchFileList)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        return not ctx.options.is_disabled(Plugin.EASY_IMPORT)

    async def run(self, ctx: ProcessingContext) -> None:
        tbl: Mapping[str, Any] = ctx.options.plugin_options(Plugin.EASY_IMPORT)
        load: Any = tbl.get(Opt.KEY_LOAD)
        root: Path = import_root(ctx)

        css, files = await self.resolver.resolve(
            ctx.css,
            root=root,
            load=load if callable(load) else None,
            source=ctx.filename,
        )
        ctx.css = css
        ctx.imported_files = list(files)
        logger.debug("Imported %d file(s) from %s", len(files), root)

        self.watcher.update(list(files))

        on_import: Any = tbl.get(Opt.KEY_ON_IMPORT)
        if callable(on_import):
            await resolve(on_import(list(files)))
