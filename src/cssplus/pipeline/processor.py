# topmark:header:start
#
#   project      : CSSPlus
#   file         : processor.py
#   file_relpath : src/cssplus/pipeline/processor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The CSSPlus processor: validates input, merges options, runs the steps.

`Processor` owns the collaborators of a pipeline run. They are passed to the
constructor (each has a default), which keeps runs independent of each other
and lets tests inject fakes:

```python
processor = Processor(registry=PluginRegistry.with_entry_points())
result = await processor.process(".a { color: red; }", {"lint": False})
```

Step order: imports → lint → plugins → transform → prefix → report → minify.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cssplus.adapters.imports import FileImportResolver
from cssplus.adapters.linters import default_linters
from cssplus.adapters.minifier import WhitespaceMinifier
from cssplus.adapters.prefixer import TablePrefixer
from cssplus.adapters.transform import SequentialTransform
from cssplus.adapters.watch import WatchFileList
from cssplus.config.defaults import DEFAULTS
from cssplus.config.logging import get_logger
from cssplus.config.merge import merge_options
from cssplus.pipeline import runner
from cssplus.pipeline.context import ProcessingContext
from cssplus.pipeline.steps import (
    ImportStep,
    LintStep,
    MinifyStep,
    PluginStep,
    PrefixStep,
    ReportStep,
    TransformStep,
)
from cssplus.plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from collections.abc import Coroutine, Sequence

    from cssplus.config.logging import CssplusLogger
    from cssplus.config.model import Options
    from cssplus.pipeline.context import Result
    from cssplus.pipeline.contracts import (
        ImportResolver,
        Linter,
        Minifier,
        Prefixer,
        Step,
        TransformPipeline,
        WatchNotifier,
    )

logger: CssplusLogger = get_logger(__name__)


class Processor:
    """Configured CSSPlus pipeline.

    Args:
        registry (PluginRegistry | None): Plugin factories (default: built-ins).
        resolver (ImportResolver | None): ``@import`` inliner.
        linters (Sequence[Linter] | None): Linters run by the lint step.
        prefixer (Prefixer | None): Vendor prefixer.
        minifier (Minifier | None): Output minifier.
        watcher (WatchNotifier | None): Receives the imported file list of each run.
        pipeline (TransformPipeline | None): Runs the plugins over the text.
        defaults (Mapping[str, Any]): Defaults layer for `merge_options`.
    """

    def __init__(
        self,
        *,
        registry: PluginRegistry | None = None,
        resolver: ImportResolver | None = None,
        linters: Sequence[Linter] | None = None,
        prefixer: Prefixer | None = None,
        minifier: Minifier | None = None,
        watcher: WatchNotifier | None = None,
        pipeline: TransformPipeline | None = None,
        defaults: Mapping[str, Any] = DEFAULTS,
    ) -> None:
        self.registry: PluginRegistry = registry or PluginRegistry.with_builtins()
        self.resolver: ImportResolver = resolver or FileImportResolver()
        self.linters: list[Linter] = list(linters) if linters is not None else default_linters()
        self.prefixer: Prefixer = prefixer or TablePrefixer()
        self.minifier: Minifier = minifier or WhitespaceMinifier()
        self.watcher: WatchNotifier = watcher or WatchFileList()
        self.pipeline: TransformPipeline = pipeline or SequentialTransform()
        self.defaults: Mapping[str, Any] = defaults

    def steps(self) -> tuple[Step, ...]:
        """Return fresh step instances wired to this processor's collaborators."""
        return (
            ImportStep(resolver=self.resolver, watcher=self.watcher),
            LintStep(linters=self.linters),
            PluginStep(registry=self.registry),
            TransformStep(pipeline=self.pipeline),
            PrefixStep(prefixer=self.prefixer),
            ReportStep(),
            MinifyStep(minifier=self.minifier),
        )

    def process(
        self,
        css: str,
        options: Mapping[str, Any] | None = None,
        filename: str | None = None,
    ) -> Coroutine[Any, Any, Result]:
        """Process a stylesheet.

        Input validation happens immediately, so a bad ``css`` argument raises
        before any coroutine is created.

        Args:
            css (str): The stylesheet text.
            options (Mapping[str, Any] | None): User options (merged over the defaults).
            filename (str | None): Source file name; anchors relative imports
                and is passed to plugins as ``from``.

        Returns:
            Coroutine[Any, Any, Result]: Awaitable resolving to the `Result`.

        Raises:
            TypeError: If ``css`` is not a string.
        """
        if not isinstance(css, str):
            raise TypeError(f"css must be a string, not {type(css).__name__}")
        if options is not None and not isinstance(options, Mapping):
            raise TypeError(f"options must be a mapping, not {type(options).__name__}")

        merged: Options = merge_options(options, defaults=self.defaults)
        return self._run(ProcessingContext(css=css, options=merged, filename=filename))

    async def _run(self, ctx: ProcessingContext) -> Result:
        ctx = await runner.run(ctx, self.steps())
        return ctx.to_result()
