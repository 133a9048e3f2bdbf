# topmark:header:start
#
#   project      : CSSPlus
#   file         : reset.py
#   file_relpath : src/cssplus/plugins/reset.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``simple-reset`` plugin: expands ``@simple-reset;`` into base rules.

Options:
    box_sizing (bool): Emit the ``border-box`` rule (default ``True``).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

from cssplus.config.keys import Plugin

if TYPE_CHECKING:
    from collections.abc import Mapping

_AT_RULE_RE: Final[re.Pattern[str]] = re.compile(r"@simple-reset\s*;?")

BOX_SIZING: Final[str] = """\
*,
*::before,
*::after {
  box-sizing: border-box;
}"""

BASE: Final[str] = """\
html {
  -webkit-text-size-adjust: 100%;
  line-height: 1.15;
}

body {
  margin: 0;
}

img {
  border-style: none;
  max-width: 100%;
}"""


class SimpleReset:
    name: str = Plugin.SIMPLE_RESET

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.box_sizing: bool = bool((options or {}).get("box_sizing", True))

    def __repr__(self) -> str:
        return f"SimpleReset(box_sizing={self.box_sizing!r})"

    def __call__(self, css: str, options: Mapping[str, Any]) -> str:
        rules: list[str] = [BOX_SIZING, BASE] if self.box_sizing else [BASE]
        reset: str = "\n\n".join(rules)
        return _AT_RULE_RE.sub(lambda _m: reset, css)
