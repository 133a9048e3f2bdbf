# topmark:header:start
#
#   project      : CSSPlus
#   file         : context.py
#   file_relpath : src/cssplus/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context and result model for the CSSPlus pipeline.

`ProcessingContext` carries the state of one ``process()`` call as it flows
through the steps: the current stylesheet text, the merged options, the files
pulled in by imports, the instantiated plugins and collected diagnostics.
`Result` is the immutable value the pipeline resolves to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cssplus.config.keys import Opt
from cssplus.core.diagnostics import Diagnostic, DiagnosticStats, compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cssplus.config.model import Options
    from cssplus.pipeline.contracts import Plugin


@dataclass
class ProcessingContext:
    """Mutable state of a single pipeline run.

    Attributes:
        css (str): Current stylesheet text; each step replaces it.
        options (Options): Merged, read-only options for the run.
        filename (str | None): Source file name, used for import resolution and
            passed to plugins as ``from``.
        imported_files (list[str]): Files inlined by the import step.
        plugins (list[Plugin]): Plugins instantiated from ``options.use``.
        diagnostics (list[Diagnostic]): Lint findings.
        steps (list[str]): Names of the steps that ran, in order.
    """

    css: str
    options: Options
    filename: str | None = None
    imported_files: list[str] = field(default_factory=lambda: [])
    plugins: list[Plugin] = field(default_factory=lambda: [])
    diagnostics: list[Diagnostic] = field(default_factory=lambda: [])
    steps: list[str] = field(default_factory=lambda: [])

    @property
    def processor_options(self) -> Mapping[str, Any]:
        """Options handed to the transform pipeline: ``from`` plus the pass-through table."""
        opts: dict[str, Any] = {Opt.KEY_FROM: self.filename}
        opts.update(self.options.plugin_options(Opt.PROCESSOR))
        return opts

    @property
    def diagnostic_stats(self) -> DiagnosticStats:
        return compute_diagnostic_stats(self.diagnostics)

    def to_result(self) -> Result:
        """Freeze the context into a `Result`."""
        return Result(
            css=self.css,
            options=self.options,
            diagnostics=tuple(self.diagnostics),
            imported_files=tuple(self.imported_files),
        )


@dataclass(frozen=True)
class Result:
    """Outcome of a successful pipeline run.

    Attributes:
        css (str): The processed stylesheet.
        options (Options): The merged options the run used.
        diagnostics (tuple[Diagnostic, ...]): Lint findings that did not fail the run.
        imported_files (tuple[str, ...]): Files inlined by the import step.
    """

    css: str
    options: Options
    diagnostics: tuple[Diagnostic, ...] = ()
    imported_files: tuple[str, ...] = ()
