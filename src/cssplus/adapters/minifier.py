# topmark:header:start
#
#   project      : CSSPlus
#   file         : minifier.py
#   file_relpath : src/cssplus/adapters/minifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace minifier.

Drops comments (except ``/*! ... */`` preserved comments), collapses runs of
whitespace and removes whitespace around punctuation and the last semicolon
of each block. String contents are left untouched.
"""

from __future__ import annotations

import re
from typing import Final

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    r"""("(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')"""  # strings
    r"|(/\*!.*?\*/)"  # preserved comments
    r"|(/\*.*?\*/)",  # comments
    re.DOTALL,
)
_SPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_PUNCT_RE: Final[re.Pattern[str]] = re.compile(r"\s*([{};:,>])\s*")


class WhitespaceMinifier:
    """`Minifier` working on the raw text."""

    def minify(self, css: str) -> str:
        out: list[str] = []
        buf: list[str] = []
        after_comment: bool = False
        pos: int = 0
        for m in _TOKEN_RE.finditer(css):
            buf.append(css[pos : m.start()])
            pos = m.end()
            if m.group(3):
                continue
            out.append(self._flush(buf, after_comment, before_comment=bool(m.group(2))))
            out.append(m.group(0))
            buf = []
            after_comment = bool(m.group(2))
        buf.append(css[pos:])
        out.append(self._flush(buf, after_comment, before_comment=False))
        return "".join(out).strip()

    def _flush(self, buf: list[str], after_comment: bool, *, before_comment: bool) -> str:
        chunk: str = self._squeeze("".join(buf))
        if after_comment:
            chunk = chunk.lstrip()
        if before_comment:
            chunk = chunk.rstrip()
        return chunk

    @staticmethod
    def _squeeze(chunk: str) -> str:
        chunk = _SPACE_RE.sub(" ", chunk)
        chunk = _PUNCT_RE.sub(r"\1", chunk)
        return chunk.replace(";}", "}")
