# topmark:header:start
#
#   project      : CSSPlus
#   file         : constants.py
#   file_relpath : src/cssplus/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

CSSPLUS_VERSION: str = get_version("cssplus")

# Config file names, in same-directory precedence order (first wins)
CSSPLUS_TOML_NAME: Final[str] = "cssplus.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "cssplus"

# Entry point group scanned for third-party plugins
PLUGIN_ENTRY_POINT_GROUP: Final[str] = "cssplus.plugins"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "CSSPLUS_LOG_LEVEL"

# Message fragment carried by every lint failure
LINT_FAILURE_MESSAGE: Final[str] = "reporter: warnings or errors were found"

VALUE_NOT_SET: Final[str] = "<not set>"
