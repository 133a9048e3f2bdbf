# topmark:header:start
#
#   project      : CSSPlus
#   file         : build.py
#   file_relpath : src/cssplus/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus `build` command.

Processes one stylesheet through the pipeline and writes the result to a file
or to stdout. Lint findings are printed to stderr; when the reporter fails the
build the command exits with `ExitCode.LINT_FAILED`.

Examples:
    cssplus build src/index.css -o dist/index.css
    cat index.css | cssplus build - --root src --no-lint
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from cssplus.cli.config_resolver import resolve_user_options
from cssplus.cli.console import get_console
from cssplus.cli.errors import (
    CssplusConfigError,
    CssplusFileNotFoundError,
    CssplusIOError,
    CssplusLintFailedError,
    CssplusPipelineError,
    CssplusUsageError,
)
from cssplus.cli.options import config_options
from cssplus.config.keys import Opt
from cssplus.config.logging import get_logger
from cssplus.config.merge import as_identifiers
from cssplus.core.errors import ConfigError, LintError, PluginNotFoundError
from cssplus.pipeline.processor import Processor
from cssplus.plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cssplus.cli.console import ConsoleLike
    from cssplus.config.logging import CssplusLogger
    from cssplus.core.diagnostics import Diagnostic
    from cssplus.pipeline.context import Result

logger: CssplusLogger = get_logger(__name__)

STDIO: str = "-"


def apply_cli_overrides(
    options: dict[str, Any],
    *,
    root: Path | None,
    use: tuple[str, ...],
    minify: bool | None,
    lint: bool | None,
) -> dict[str, Any]:
    """Layer CLI flags over the config-file options (in place; returned for chaining).

    ``--use`` values are appended to the configured ``use`` list; the merge then
    orders them relative to the defaults.
    """
    if root is not None:
        options[Opt.ROOT] = str(root.resolve())
    if use:
        options[Opt.USE] = [*as_identifiers(options.get(Opt.USE)), *use]
    if minify is not None:
        options[Opt.MINIFY] = minify
    if lint is not None:
        options[Opt.LINT] = lint
    return options


def _report(console: ConsoleLike, label: str, diagnostics: Iterable[Diagnostic]) -> None:
    for diag in diagnostics:
        console.warn(f"{label}: {diag.render(color=console.enable_color)}")


@click.command(
    name="build",
    help="Process a stylesheet (INPUT, or '-' for stdin).",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(dir_okay=False, allow_dash=True),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Write the result here (default: stdout).",
)
@config_options
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Base directory for @import resolution.",
)
@click.option(
    "--use",
    "use",
    multiple=True,
    metavar="NAME",
    help="Add a plugin to the configured list (repeatable).",
)
@click.option("--minify/--no-minify", default=None, help="Minify the output.")
@click.option("--lint/--no-lint", default=None, help="Run the linters.")
def build_command(
    *,
    input_path: str,
    output_path: str | None,
    config_path: Path | None,
    no_config: bool,
    root: Path | None,
    use: tuple[str, ...],
    minify: bool | None,
    lint: bool | None,
) -> None:
    """Process a stylesheet and write the result.

    Args:
        input_path (str): Source file, or ``-`` for stdin.
        output_path (str | None): Destination file, or ``-``/None for stdout.
        config_path (Path | None): Explicit config file.
        no_config (bool): Skip config discovery.
        root (Path | None): Import root override.
        use (tuple[str, ...]): Plugins appended to ``use``.
        minify (bool | None): Minify override.
        lint (bool | None): Lint override.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    filename: str | None = None
    if input_path == STDIO:
        css: str = sys.stdin.read()
        anchor: Path = Path.cwd()
    else:
        source: Path = Path(input_path)
        if not source.is_file():
            raise CssplusFileNotFoundError(f"No such file: {input_path}")
        try:
            css = source.read_text(encoding="utf-8")
        except OSError as e:
            raise CssplusIOError(f"Cannot read {input_path}: {e}") from e
        filename = str(source.resolve())
        anchor = source.resolve().parent
        writes_input: bool = (
            output_path is not None
            and output_path != STDIO
            and Path(output_path).resolve() == source.resolve()
        )
        if writes_input:
            raise CssplusUsageError(f"Refusing to overwrite the input file {input_path}")

    options: dict[str, Any] = resolve_user_options(
        config_path=config_path, anchor=anchor, no_config=no_config
    )
    apply_cli_overrides(options, root=root, use=use, minify=minify, lint=lint)

    label: str = input_path if input_path != STDIO else "<stdin>"
    processor: Processor = Processor(registry=PluginRegistry.with_entry_points())
    try:
        result: Result = asyncio.run(processor.process(css, options, filename))
    except LintError as e:
        _report(console, label, e.diagnostics)
        raise CssplusLintFailedError(str(e)) from e
    except (PluginNotFoundError, ConfigError) as e:
        raise CssplusConfigError(str(e)) from e
    except FileNotFoundError as e:
        raise CssplusFileNotFoundError(f"Import not found: {e.filename or e}") from e
    except OSError as e:
        raise CssplusIOError(str(e)) from e
    except Exception as e:
        logger.debug("Pipeline failure", exc_info=True)
        raise CssplusPipelineError(f"{type(e).__name__}: {e}") from e

    _report(console, label, result.diagnostics)
    for path in result.imported_files:
        logger.info("Imported %s", path)

    if output_path is None or output_path == STDIO:
        console.print(result.css, nl=not result.css.endswith("\n"))
        return
    try:
        Path(output_path).write_text(result.css, encoding="utf-8")
    except OSError as e:
        raise CssplusIOError(f"Cannot write {output_path}: {e}") from e
    logger.info("Wrote %s", output_path)
