# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus CLI subcommands."""
