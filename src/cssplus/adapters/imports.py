# topmark:header:start
#
#   project      : CSSPlus
#   file         : imports.py
#   file_relpath : src/cssplus/adapters/imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File-based ``@import`` inliner.

Supports ``@import "path";``, ``@import 'path';`` and ``@import url("path");``
with an optional media query (the inlined content is then wrapped in an
``@media`` block). The trailing semicolon is optional. Remote URLs are left in
place.

Comments are ignored: an ``@import`` inside ``/* ... */`` is left as is.

Resolution:
    - Relative paths resolve against the importing file's directory; the
      top-level source resolves against the ``root`` given by the caller.
    - A path without suffix also tries ``<path>.css``.
    - Each file is inlined once; later imports of the same file and import
      cycles are dropped. When the caller passes the entry file as ``source``,
      imports leading back to it count as cycles too.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from cssplus.adapters.linters import blank_comments
from cssplus.config.logging import get_logger
from cssplus.pipeline.hooks import resolve

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.contracts import LoadHook

logger: CssplusLogger = get_logger(__name__)

_IMPORT_RE: Final[re.Pattern[str]] = re.compile(
    r"""@import\s+(?:url\(\s*)?(?P<q>["'])(?P<path>.+?)(?P=q)\s*\)?(?P<media>[^;\n]*);?"""
)
_REMOTE_PREFIXES: Final[tuple[str, ...]] = ("http://", "https://", "//")


def locate(base: Path, target: str) -> Path:
    """Return the absolute path an import of ``target`` from ``base`` refers to."""
    path: Path = Path(target)
    if not path.is_absolute():
        path = base / path
    if not path.suffix and not path.exists():
        with_suffix: Path = path.with_name(path.name + ".css")
        if with_suffix.exists():
            path = with_suffix
    return path.resolve()


class FileImportResolver:
    """`ImportResolver` reading imported files from disk (or through a ``load`` hook)."""

    async def resolve(
        self,
        css: str,
        *,
        root: Path,
        load: LoadHook | None = None,
        source: str | None = None,
    ) -> tuple[str, list[str]]:
        files: list[str] = []
        chain: tuple[str, ...] = (str(Path(source).resolve()),) if source else ()
        out: str = await self._inline(css, root, load, files, chain)
        return out, files

    async def _inline(
        self,
        css: str,
        base: Path,
        load: LoadHook | None,
        files: list[str],
        chain: tuple[str, ...],
    ) -> str:
        parts: list[str] = []
        pos: int = 0
        for m in _IMPORT_RE.finditer(blank_comments(css)):
            target: str = m.group("path")
            if target.startswith(_REMOTE_PREFIXES):
                continue

            parts.append(css[pos : m.start()])
            pos = m.end()

            path: Path = locate(base, target)
            key: str = str(path)
            if key in chain:
                logger.warning("Import cycle: %s imports itself via %s", key, " -> ".join(chain))
                continue
            if key in files:
                logger.debug("Skipping repeated import of %s", key)
                continue
            files.append(key)

            text: str
            if load is not None:
                text = await resolve(load(key))
            else:
                text = path.read_text(encoding="utf-8")
            text = await self._inline(text, path.parent, load, files, (*chain, key))

            media: str = m.group("media").strip()
            parts.append(f"@media {media} {{\n{text}\n}}" if media else text)

        parts.append(css[pos:])
        return "".join(parts)
