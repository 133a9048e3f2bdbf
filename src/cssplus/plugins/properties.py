# topmark:header:start
#
#   project      : CSSPlus
#   file         : properties.py
#   file_relpath : src/cssplus/plugins/properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``cssplus`` plugin: custom-property substitution.

Custom properties declared in ``:root`` rules are collected and every
``var(--name)`` / ``var(--name, fallback)`` reference is replaced with the
declared value. Unless ``preserve`` is set, the ``:root`` declarations are
removed afterwards (and a ``:root`` rule left empty is dropped).

Options:
    preserve (bool): Keep the ``:root`` declarations and emit computed values
        (default ``False``).
    variables (Mapping[str, str]): Extra definitions, e.g.
        ``{"--brand": "#c00"}``; the leading ``--`` may be omitted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from cssplus.config.keys import Plugin
from cssplus.config.logging import get_logger

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)

_ROOT_RULE_RE: Final[re.Pattern[str]] = re.compile(r"(?P<indent>[ \t]*):root\s*\{(?P<body>[^{}]*)\}\n?")
_CUSTOM_DECL_RE: Final[re.Pattern[str]] = re.compile(
    r"\s*(?P<prop>--[\w-]+)\s*:\s*(?P<value>[^;{}]*?)\s*(?:;|(?=\s*$))"
)
_VAR_RE: Final[re.Pattern[str]] = re.compile(
    r"var\(\s*(?P<prop>--[\w-]+)\s*(?:,\s*(?P<fallback>(?:[^()]|\([^()]*\))*?))?\s*\)"
)
# Bound on nested var() expansion
MAX_DEPTH: Final[int] = 10


class CustomProperties:
    """Substitute ``:root`` custom properties."""

    name: str = Plugin.CSSPLUS

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        opts: Mapping[str, Any] = options or {}
        self.preserve: bool = bool(opts.get("preserve", False))
        self.variables: dict[str, str] = {}
        extra: Any = opts.get("variables")
        if isinstance(extra, Mapping):
            for key, value in extra.items():
                prop: str = str(key) if str(key).startswith("--") else f"--{key}"
                self.variables[prop] = str(value)

    def __repr__(self) -> str:
        return f"CustomProperties(preserve={self.preserve!r})"

    def __call__(self, css: str, options: Mapping[str, Any]) -> str:
        defined: dict[str, str] = {}
        for rule in _ROOT_RULE_RE.finditer(css):
            for decl in _CUSTOM_DECL_RE.finditer(rule.group("body")):
                defined[decl.group("prop")] = decl.group("value")
        defined.update(self.variables)

        if not self.preserve:
            css = _ROOT_RULE_RE.sub(self._strip_root, css)

        undefined: set[str] = set()
        for _ in range(MAX_DEPTH):
            expanded: str = _VAR_RE.sub(lambda m: self._substitute(m, defined, undefined), css)
            if expanded == css:
                break
            css = expanded

        source: Any = options.get("from") or "<input>"
        for prop in sorted(undefined):
            logger.warning("%s: undefined custom property %s", source, prop)
        return css

    @staticmethod
    def _strip_root(m: re.Match[str]) -> str:
        body: str = _CUSTOM_DECL_RE.sub("", m.group("body"))
        if not body.strip():
            return ""
        return m.group(0).replace(m.group("body"), body)

    @staticmethod
    def _substitute(m: re.Match[str], defined: Mapping[str, str], undefined: set[str]) -> str:
        prop: str = m.group("prop")
        if prop in defined:
            return defined[prop]
        fallback: str | None = m.group("fallback")
        if fallback is not None:
            return fallback
        undefined.add(prop)
        return m.group(0)
