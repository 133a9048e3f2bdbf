# topmark:header:start
#
#   project      : CSSPlus
#   file         : config.py
#   file_relpath : src/cssplus/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus `config` command group.

- ``cssplus config dump``: the merged options (defaults + config file) as TOML.
- ``cssplus config defaults``: the built-in defaults as TOML.
- ``cssplus config path``: the config file discovery would use.

Hooks (``debug``, ``load``, ``on_import``) and unset values have no TOML form
and are omitted from the output.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from cssplus.cli.config_resolver import resolve_user_options
from cssplus.cli.console import get_console
from cssplus.cli.options import config_options
from cssplus.config.defaults import DEFAULTS
from cssplus.config.io import discover_config_file, options_to_toml
from cssplus.config.merge import merge_options

if TYPE_CHECKING:
    from cssplus.cli.console import ConsoleLike
    from cssplus.config.model import Options


@click.group(name="config", help="Inspect CSSPlus configuration.")
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(name="dump", help="Print the merged options as TOML.")
@config_options
def dump_command(*, config_path: Path | None, no_config: bool) -> None:
    console: ConsoleLike = get_console(click.get_current_context())
    user: dict[str, Any] = resolve_user_options(
        config_path=config_path, anchor=Path.cwd(), no_config=no_config
    )
    merged: Options = merge_options(user)
    console.print(options_to_toml(merged), nl=False)


@config_command.command(name="defaults", help="Print the built-in defaults as TOML.")
def defaults_command() -> None:
    console: ConsoleLike = get_console(click.get_current_context())
    console.print(options_to_toml(DEFAULTS), nl=False)


@config_command.command(name="path", help="Print the discovered config file.")
def path_command() -> None:
    console: ConsoleLike = get_console(click.get_current_context())
    found: Path | None = discover_config_file(Path.cwd())
    if found is None:
        console.warn("No config file found")
        return
    console.print(str(found))
