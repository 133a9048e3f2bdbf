# topmark:header:start
#
#   project      : CSSPlus
#   file         : contracts.py
#   file_relpath : src/cssplus/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for the pipeline and its collaborators.

The runner never parses CSS itself. Everything that touches stylesheet text is a
collaborator reached through one of the protocols below and handed to
`cssplus.pipeline.processor.Processor` at construction time:

- `Plugin`: a named transform applied in ``use`` order.
- `TransformPipeline`: runs the instantiated plugins over the text.
- `ImportResolver`: inlines ``@import`` directives.
- `Linter`: reports convention/style findings as diagnostics.
- `Prefixer` / `Minifier`: post-processing.
- `WatchNotifier`: receives the files an import pass pulled in.

Return values typed as `MaybeAwaitable` may be plain values or awaitables; the
runner awaits both uniformly (see `cssplus.pipeline.hooks.resolve`).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, Union

if TYPE_CHECKING:
    from pathlib import Path

    from cssplus.core.diagnostics import Diagnostic
    from cssplus.pipeline.context import ProcessingContext

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]

# load(path) -> css text (plain or awaitable)
LoadHook = Callable[[str], MaybeAwaitable[str]]


class Plugin(Protocol):
    """A named CSS transform.

    Plugins are created by a factory registered under their identifier and called
    with the current text and the processor options (``from`` plus the
    ``processor`` pass-through table).
    """

    name: str

    def __call__(self, css: str, options: Mapping[str, Any]) -> MaybeAwaitable[str]:
        """Return the transformed text."""
        ...


PluginFactory = Callable[[Mapping[str, Any]], Plugin]


class TransformPipeline(Protocol):
    """Runs plugins over stylesheet text, in order."""

    async def run(
        self,
        css: str,
        plugins: Sequence[Plugin],
        options: Mapping[str, Any],
    ) -> str:
        """Apply ``plugins`` to ``css`` and return the result.

        Args:
            css (str): Input text.
            plugins (Sequence[Plugin]): Instantiated plugins, in run order.
            options (Mapping[str, Any]): Processor options (``from`` + pass-through keys).

        Returns:
            str: The transformed text.
        """
        ...


class ImportResolver(Protocol):
    """Inlines ``@import`` directives."""

    async def resolve(
        self,
        css: str,
        *,
        root: Path,
        load: LoadHook | None = None,
        source: str | None = None,
    ) -> tuple[str, list[str]]:
        """Return ``(css_with_imports_inlined, imported_file_paths)``.

        ``source`` is the entry file, if any; imports leading back to it are cycles.
        """
        ...


class Linter(Protocol):
    """Inspects stylesheet text and reports findings."""

    name: str

    def lint(self, css: str, options: Mapping[str, Any]) -> list[Diagnostic]:
        """Return diagnostics for ``css`` (empty when it conforms)."""
        ...


class Prefixer(Protocol):
    """Adds/removes vendor-prefixed declarations."""

    def prefix(self, css: str, options: Mapping[str, Any]) -> str:
        """Return ``css`` with vendor prefixes applied per ``options``."""
        ...


class Minifier(Protocol):
    """Shrinks stylesheet text."""

    def minify(self, css: str) -> str:
        """Return minified ``css``."""
        ...


class WatchNotifier(Protocol):
    """Receives the file list of each import pass (e.g. to refresh a file watcher)."""

    def update(self, paths: list[str]) -> None:
        """Record ``paths`` as the current set of imported files."""
        ...


class Step(Protocol):
    """A pipeline step: awaited with the context, returns the same context."""

    name: str

    async def __call__(self, ctx: ProcessingContext) -> ProcessingContext: ...
