# topmark:header:start
#
#   project      : CSSPlus
#   file         : prefixer.py
#   file_relpath : src/cssplus/adapters/prefixer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Table-driven vendor prefixer.

This is not a browser-data driven prefixer: it knows a fixed table of
properties that still ship behind vendor prefixes and applies two passes on
every declaration block:

- ``add`` (default ``True``): insert the prefixed declarations in front of each
  listed property, unless the block already declares them;
- ``remove`` (default ``True``): drop prefixed declarations of properties that
  are not in the table anymore (e.g. ``-webkit-border-radius``).

Extra entries can be supplied through ``properties``:
``{"properties": {"mask-size": ["-webkit-"]}}``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Final

from cssplus.config.keys import Opt
from cssplus.config.logging import get_logger

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)

PREFIXED_PROPERTIES: Final[Mapping[str, tuple[str, ...]]] = {
    "appearance": ("-webkit-", "-moz-"),
    "backdrop-filter": ("-webkit-",),
    "clip-path": ("-webkit-",),
    "filter": ("-webkit-",),
    "hyphens": ("-webkit-", "-ms-"),
    "mask-image": ("-webkit-",),
    "text-size-adjust": ("-webkit-", "-moz-", "-ms-"),
    "user-select": ("-webkit-", "-moz-", "-ms-"),
}

_BLOCK_RE: Final[re.Pattern[str]] = re.compile(r"\{(?P<body>[^{}]*)\}")
_DECL_RE: Final[re.Pattern[str]] = re.compile(
    r"""(?:^|(?<=;))(?P<indent>\s*)(?P<prop>-?[A-Za-z][\w-]*)\s*:"""
    r"""(?P<value>(?:"[^"]*"|'[^']*'|\([^)]*\)|[^;"'()])*)(?P<end>;?)"""
)
_VENDOR_RE: Final[re.Pattern[str]] = re.compile(r"^-(?:webkit|moz|ms|o)-(?P<base>.+)$")


class TablePrefixer:
    """`Prefixer` backed by `PREFIXED_PROPERTIES`."""

    def prefix(self, css: str, options: Mapping[str, Any]) -> str:
        add: bool = bool(options.get(Opt.KEY_ADD, True))
        remove: bool = bool(options.get(Opt.KEY_REMOVE, True))
        if not add and not remove:
            return css

        table: dict[str, tuple[str, ...]] = dict(PREFIXED_PROPERTIES)
        extra: Any = options.get(Opt.KEY_PROPERTIES)
        if isinstance(extra, Mapping):
            for prop, prefixes in extra.items():
                if isinstance(prefixes, Sequence) and not isinstance(prefixes, str):
                    table[str(prop)] = tuple(str(p) for p in prefixes)

        def _block(m: re.Match[str]) -> str:
            body: str = m.group("body")
            if remove:
                body = self._remove_outdated(body, table)
            if add:
                body = self._add_prefixes(body, table)
            return "{" + body + "}"

        return _BLOCK_RE.sub(_block, css)

    @staticmethod
    def _add_prefixes(body: str, table: Mapping[str, tuple[str, ...]]) -> str:
        declared: set[str] = {m.group("prop").lower() for m in _DECL_RE.finditer(body)}

        def _decl(m: re.Match[str]) -> str:
            prop: str = m.group("prop").lower()
            prefixes: tuple[str, ...] = table.get(prop, ())
            missing: list[str] = [p for p in prefixes if f"{p}{prop}" not in declared]
            if not missing:
                return m.group(0)
            indent: str = m.group("indent")
            value: str = m.group("value").rstrip()
            added: str = "".join(f"{indent}{p}{prop}:{value};" for p in missing)
            logger.trace("Prefixed %s with %s", prop, missing)
            return added + m.group(0)

        return _DECL_RE.sub(_decl, body)

    @staticmethod
    def _remove_outdated(body: str, table: Mapping[str, tuple[str, ...]]) -> str:
        def _decl(m: re.Match[str]) -> str:
            vendor: re.Match[str] | None = _VENDOR_RE.match(m.group("prop").lower())
            if vendor is None or vendor.group("base") in table:
                return m.group(0)
            logger.trace("Removed outdated %s", m.group("prop"))
            return ""

        return _DECL_RE.sub(_decl, body)
