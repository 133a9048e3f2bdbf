# topmark:header:start
#
#   project      : CSSPlus
#   file         : main.py
#   file_relpath : src/cssplus/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus CLI entry point.

Key ideas:
- Group-level options are initialized once and placed into ``ctx.obj``.
- Program output goes through the console stored in ``ctx.obj["console"]``;
  internal logging goes to stderr and is controlled by ``-v`` or the
  ``CSSPLUS_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from cssplus.cli.commands.build import build_command
from cssplus.cli.commands.config import config_command
from cssplus.cli.commands.plugins import plugins_command
from cssplus.cli.commands.version import version_command
from cssplus.cli.console import ClickConsole
from cssplus.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from cssplus.cli.console import ConsoleLike
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)


def resolve_log_level(verbose: int) -> int | None:
    """Return the log level for ``-v`` counts; the environment variable wins."""
    env_level: int | None = resolve_env_log_level()
    if env_level is not None:
        return env_level
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def init_common_state(ctx: click.Context, *, verbose: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging and console) on the click context.

    Args:
        ctx (click.Context): Current click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbosity"] = verbose

    level: int | None = resolve_log_level(verbose)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="CSSPlus: option merging, linting, imports and prefixing for stylesheets.",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (repeatable).")
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, no_color: bool) -> None:
    """Entry point for the CSSPlus CLI."""
    init_common_state(ctx, verbose=verbose, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'cssplus build INPUT' to process a stylesheet.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(build_command)

cli.add_command(config_command)

cli.add_command(plugins_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
