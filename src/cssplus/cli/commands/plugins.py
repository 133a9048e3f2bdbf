# topmark:header:start
#
#   project      : CSSPlus
#   file         : plugins.py
#   file_relpath : src/cssplus/cli/commands/plugins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus `plugins` command: list the plugin identifiers usable in ``use``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cssplus.cli.console import get_console
from cssplus.plugins.registry import PluginRegistry, builtin_factories

if TYPE_CHECKING:
    from cssplus.cli.console import ConsoleLike


@click.command(name="plugins", help="List the available plugins.")
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show where each plugin comes from (built-in or entry point).",
)
def plugins_command(*, show_details: bool = False) -> None:
    """List registered plugin identifiers, one per line.

    Args:
        show_details (bool): Append the origin of each plugin.
    """
    console: ConsoleLike = get_console(click.get_current_context())
    builtins: dict[str, object] = dict(builtin_factories())
    registry: PluginRegistry = PluginRegistry.with_entry_points()

    for name in registry.names():
        if not show_details:
            console.print(name)
            continue
        origin: str = "built-in" if registry.get(name) is builtins.get(name) else "entry point"
        console.print(f"{console.styled(name, bold=True)}  ({origin})")
