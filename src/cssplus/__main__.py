# topmark:header:start
#
#   project      : CSSPlus
#   file         : __main__.py
#   file_relpath : src/cssplus/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CSSPlus via ``python -m cssplus``.

Delegates to `cssplus.cli.main.cli`, the single authoritative CLI entry point.

Examples:
    Build a stylesheet using the module interface::

        python -m cssplus build src/index.css -o dist/index.css
"""

from __future__ import annotations

from cssplus.cli.main import cli

if __name__ == "__main__":
    cli()
