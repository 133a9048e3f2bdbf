# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for CSSPlus.

This package holds the immutable defaults table, the option merge policy (the
ordered merge of the ``use`` plugin list in particular), the read-only `Options`
snapshot and TOML config file I/O.
"""

from __future__ import annotations

from cssplus.config.defaults import DEFAULTS, make_defaults
from cssplus.config.io import discover_config_file, load_config_file, options_to_toml
from cssplus.config.merge import merge_options, merge_use
from cssplus.config.model import Options

__all__: list[str] = [
    "DEFAULTS",
    "Options",
    "discover_config_file",
    "load_config_file",
    "make_defaults",
    "merge_options",
    "merge_use",
    "options_to_toml",
]
