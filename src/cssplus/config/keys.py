# topmark:header:start
#
#   project      : CSSPlus
#   file         : keys.py
#   file_relpath : src/cssplus/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical option keys and plugin identifiers for CSSPlus configuration.

This module defines the authoritative string constants used when merging,
loading and rendering CSSPlus options, whether they come from the API (plain
mappings), from ``cssplus.toml`` / ``[tool.cssplus]`` or from the CLI.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Plugin sub-configurations are keyed by the plugin identifier, so several
      identifiers double as option keys.
"""

from __future__ import annotations

from typing import Final


class Opt:
    """Top-level option keys.

    Notes:
        - Values must match user-facing keys exactly.
        - Per-plugin sub-configuration tables are keyed by `Plugin` identifiers.
    """

    USE: Final[str] = "use"
    LINT: Final[str] = "lint"
    MINIFY: Final[str] = "minify"
    ROOT: Final[str] = "root"
    DEBUG: Final[str] = "debug"
    ALIASES: Final[str] = "aliases"

    # Raw pass-through options for the transform pipeline instance
    PROCESSOR: Final[str] = "processor"

    # Keys inside plugin sub-configurations
    KEY_LOAD: Final[str] = "load"
    KEY_ON_IMPORT: Final[str] = "on_import"
    KEY_THROW_ERROR: Final[str] = "throw_error"
    KEY_RULES: Final[str] = "rules"
    KEY_ADD: Final[str] = "add"
    KEY_REMOVE: Final[str] = "remove"
    KEY_PROPERTIES: Final[str] = "properties"
    KEY_FROM: Final[str] = "from"


class Plugin:
    """Stable plugin and collaborator identifiers."""

    CSSPLUS: Final[str] = "cssplus"
    SIMPLE_RESET: Final[str] = "simple-reset"
    EASY_IMPORT: Final[str] = "easy-import"
    AUTOPREFIXER: Final[str] = "autoprefixer"
    STYLELINT: Final[str] = "stylelint"
    BEM_LINTER: Final[str] = "bem-linter"
    REPORTER: Final[str] = "reporter"
