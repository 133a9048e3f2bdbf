# topmark:header:start
#
#   project      : CSSPlus
#   file         : options.py
#   file_relpath : src/cssplus/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared click option decorators."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

F = TypeVar("F", bound=Callable[..., object])


def config_options(f: F) -> F:
    """Add ``--config FILE`` and ``--no-config`` to a command."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Read options from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        default=False,
        help="Do not discover cssplus.toml / pyproject.toml.",
    )(f)
    return f
