# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus package.

CSSPlus is a thin preprocessing layer over CSS plugins. It merges user options
with a defaults table, resolves imports, lints, runs the configured plugins in
order and applies vendor prefixing, and exposes both a CLI and a small typed API.
"""

from __future__ import annotations
