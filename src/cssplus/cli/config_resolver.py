# topmark:header:start
#
#   project      : CSSPlus
#   file         : config_resolver.py
#   file_relpath : src/cssplus/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the user options layer for CLI commands.

Resolution order (lowest → highest precedence):
  1. Built-in defaults (applied later by `merge_options`).
  2. The config file: ``--config FILE`` when given, otherwise the nearest
     ``cssplus.toml`` / ``[tool.cssplus]`` discovered upward from the anchor
     directory (skipped with ``--no-config``).
  3. CLI overrides, applied by the command.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from cssplus.cli.errors import CssplusConfigError
from cssplus.config.io import discover_config_file, load_config_file
from cssplus.config.logging import get_logger
from cssplus.core.errors import ConfigError

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)


def resolve_user_options(
    *,
    config_path: Path | None,
    anchor: Path | None,
    no_config: bool = False,
) -> dict[str, Any]:
    """Return the user options layer read from the config file (may be empty).

    Args:
        config_path (Path | None): Explicit config file (``--config``).
        anchor (Path | None): Directory where discovery starts (default: CWD).
        no_config (bool): Skip discovery when no explicit file is given.

    Returns:
        dict[str, Any]: Options loaded from the config file, or ``{}``.

    Raises:
        CssplusConfigError: If the config file cannot be loaded.
    """
    path: Path | None = config_path
    if path is None and not no_config:
        path = discover_config_file(anchor or Path.cwd())
    if path is None:
        logger.debug("No config file; using defaults")
        return {}

    logger.info("Using config file: %s", path)
    try:
        return load_config_file(path)
    except ConfigError as e:
        raise CssplusConfigError(str(e)) from e
