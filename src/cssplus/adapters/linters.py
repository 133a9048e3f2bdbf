# topmark:header:start
#
#   project      : CSSPlus
#   file         : linters.py
#   file_relpath : src/cssplus/adapters/linters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default text-level linters.

Two linters ship with CSSPlus:

- `DefineLinter` (``bem-linter``): component naming conventions. A
  ``/** @define Name */`` comment declares the component the following rules
  belong to; every selector up to the next ``@define`` must start with a class
  derived from ``Name`` (SUIT or BEM preset). ``/** @define utilities */``
  requires ``.u-`` utility classes instead.
- `StyleLinter` (``stylelint``): a handful of style rules configured through
  the ``rules`` table.

Both work on comment-stripped text in which comments are blanked out with
spaces, so offsets and line numbers still match the input.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Final

from cssplus.config.keys import Opt, Plugin
from cssplus.config.logging import get_logger
from cssplus.core.diagnostics import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.contracts import Linter

logger: CssplusLogger = get_logger(__name__)

_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"/\*.*?\*/", re.DOTALL)
_DEFINE_RE: Final[re.Pattern[str]] = re.compile(
    r"/\*\*\s*@define\s+(?P<name>[A-Za-z][\w-]*)\s*(?:;\s*(?P<weak>weak)\s*)?\*/"
)
_PRELUDE_RE: Final[re.Pattern[str]] = re.compile(r"(?P<prelude>[^{};]+)\{")
_BLOCK_RE: Final[re.Pattern[str]] = re.compile(r"\{(?P<body>[^{}]*)\}")
_HEX_RE: Final[re.Pattern[str]] = re.compile(r"#(?P<hex>[\w-]+)")
_VALID_HEX_RE: Final[re.Pattern[str]] = re.compile(
    r"[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8}"
)
_IMPORTANT_RE: Final[re.Pattern[str]] = re.compile(r"!\s*important", re.IGNORECASE)

UTILITIES: Final[str] = "utilities"

PRESETS: Final[Mapping[str, str]] = {
    # .Component, .Component-descendant, .Component--modifier
    "suit": r"\.{name}(?:-[A-Za-z0-9]+)*(?:--[A-Za-z0-9-]+)?",
    # .block, .block__element, .block--modifier
    "bem": r"\.{name}(?:__[a-z0-9-]+)?(?:--[a-z0-9-]+)?",
}
_UTILITY_PATTERN: Final[str] = r"\.u-[A-Za-z0-9][\w-]*"
_KEYFRAME_RE: Final[re.Pattern[str]] = re.compile(r"from|to|\d+(?:\.\d+)?%")
_SELECTOR_END: Final[str] = r"(?![\w-])"


def blank_comments(css: str) -> str:
    """Replace every comment with spaces, keeping newlines (and thus offsets)."""
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), css)


def line_of(css: str, offset: int) -> int:
    """Return the 1-based line number of ``offset`` in ``css``."""
    return css.count("\n", 0, offset) + 1


class DefineLinter:
    """Convention linter for ``/** @define Name */`` components.

    Options:
        preset (str): ``"suit"`` (default) or ``"bem"``.
    """

    name: str = Plugin.BEM_LINTER

    def lint(self, css: str, options: Mapping[str, Any]) -> list[Diagnostic]:
        preset: str = str(options.get("preset", "suit")).lower()
        template: str | None = PRESETS.get(preset)
        if template is None:
            logger.warning("Unknown %s preset %r, using 'suit'", self.name, preset)
            template = PRESETS["suit"]

        defines: list[re.Match[str]] = list(_DEFINE_RE.finditer(css))
        if not defines:
            return []

        text: str = blank_comments(css)
        diagnostics: list[Diagnostic] = []
        for i, define in enumerate(defines):
            end: int = defines[i + 1].start() if i + 1 < len(defines) else len(text)
            component: str = define.group("name")
            if component == UTILITIES:
                pattern: str = _UTILITY_PATTERN
            else:
                pattern = template.format(name=re.escape(component))
            initial: re.Pattern[str] = re.compile(pattern + _SELECTOR_END)

            for offset, selector in self._selectors(text, define.end(), end):
                if selector.startswith(":root") or _KEYFRAME_RE.fullmatch(selector):
                    continue
                if initial.match(selector):
                    continue
                kind: str = "utility" if component == UTILITIES else "component"
                diagnostics.append(
                    Diagnostic(
                        level=DiagnosticLevel.WARNING,
                        message=f'Invalid {kind} selector "{selector}"',
                        source=self.name,
                        rule=preset,
                        line=line_of(css, offset),
                    )
                )
        return diagnostics

    @staticmethod
    def _selectors(text: str, start: int, end: int) -> Iterator[tuple[int, str]]:
        """Yield ``(offset, selector)`` for the style rules in ``text[start:end]``."""
        for m in _PRELUDE_RE.finditer(text, start, end):
            prelude: str = m.group("prelude")
            if prelude.lstrip().startswith("@"):
                continue
            offset: int = m.start("prelude")
            for part in prelude.split(","):
                selector: str = " ".join(part.split())
                if selector:
                    yield offset + len(part) - len(part.lstrip()), selector
                offset += len(part) + 1


RuleCheck = Callable[[str, str, Any], "Iterator[tuple[int, str]]"]


def _check_indentation(css: str, text: str, size: Any) -> Iterator[tuple[int, str]]:
    """Each line inside a block must be indented by ``size`` spaces per nesting level.

    A line continuing an unterminated declaration or selector list (the previous
    line did not end with ``;``, ``{`` or ``}``) may be indented deeper.
    """
    width: int = int(size)
    depth: int = 0
    offset: int = 0
    pending: bool = False
    for line in text.split("\n"):
        stripped: str = line.strip()
        if stripped:
            closing: bool = stripped.startswith("}")
            level: int = depth - 1 if closing else depth
            indent: str = line[: len(line) - len(line.lstrip())]
            expected: int = max(level, 0) * width
            if "\t" in indent:
                yield offset, f"Expected indentation of {expected} spaces"
            elif pending and not closing:
                if len(indent) < expected:
                    yield offset, f"Expected indentation of at least {expected} spaces"
            elif len(indent) != expected:
                yield offset, f"Expected indentation of {expected} spaces"
            pending = stripped[-1] not in ";{}"
        depth += line.count("{") - line.count("}")
        offset += len(line) + 1


def _check_hex(css: str, text: str, enabled: Any) -> Iterator[tuple[int, str]]:
    """Hex colors in declaration values must have 3, 4, 6 or 8 hex digits."""
    for block in _BLOCK_RE.finditer(text):
        for m in _HEX_RE.finditer(text, block.start("body"), block.end("body")):
            if not _VALID_HEX_RE.fullmatch(m.group("hex")):
                yield m.start(), f'Unexpected invalid hex color "{m.group(0)}"'


def _check_important(css: str, text: str, enabled: Any) -> Iterator[tuple[int, str]]:
    for m in _IMPORTANT_RE.finditer(text):
        yield m.start(), "Unexpected !important"


STYLE_RULES: Final[Mapping[str, RuleCheck]] = {
    "indentation": _check_indentation,
    "color-no-invalid-hex": _check_hex,
    "declaration-no-important": _check_important,
}

# Rule set applied when the options table says ``extends = "cssplus"``
RECOMMENDED_RULES: Final[Mapping[str, Any]] = {
    "indentation": 2,
    "color-no-invalid-hex": True,
}
RECOMMENDED_NAMES: Final[tuple[str, ...]] = ("cssplus", "stylelint-config-cssplus")


class StyleLinter:
    """Rule-based style linter.

    Options:
        rules (Mapping[str, Any]): Rule name to setting. ``False`` or ``None``
            disables a rule; ``indentation`` takes the number of spaces.
        extends (str): ``"cssplus"`` layers ``rules`` over `RECOMMENDED_RULES`.
    """

    name: str = Plugin.STYLELINT

    def lint(self, css: str, options: Mapping[str, Any]) -> list[Diagnostic]:
        rules: dict[str, Any] = {}
        if options.get("extends") in RECOMMENDED_NAMES:
            rules.update(RECOMMENDED_RULES)
        configured: Any = options.get(Opt.KEY_RULES)
        if isinstance(configured, Mapping):
            rules.update(configured)

        text: str = blank_comments(css)
        diagnostics: list[Diagnostic] = []
        for rule, setting in rules.items():
            if setting is None or setting is False:
                continue
            check: RuleCheck | None = STYLE_RULES.get(rule)
            if check is None:
                logger.warning("Unknown %s rule: %s", self.name, rule)
                continue
            for offset, message in check(css, text, setting):
                diagnostics.append(
                    Diagnostic(
                        level=DiagnosticLevel.WARNING,
                        message=message,
                        source=self.name,
                        rule=rule,
                        line=line_of(css, offset),
                    )
                )
        return diagnostics


def default_linters() -> list[Linter]:
    return [DefineLinter(), StyleLinter()]
