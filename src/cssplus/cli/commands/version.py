# topmark:header:start
#
#   project      : CSSPlus
#   file         : version.py
#   file_relpath : src/cssplus/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus `version` command.

Prints the current CSSPlus version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cssplus.cli.console import get_console
from cssplus.constants import CSSPLUS_VERSION

if TYPE_CHECKING:
    from cssplus.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of CSSPlus.",
)
def version_command() -> None:
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    if ctx.obj.get("verbosity", 0) > 0:
        console.print(console.styled("CSSPlus version:", bold=True, underline=True))
        console.print(f"    {console.styled(CSSPLUS_VERSION, bold=True)}")
    else:
        console.print(console.styled(CSSPLUS_VERSION, bold=True))
