# topmark:header:start
#
#   project      : CSSPlus
#   file         : defaults.py
#   file_relpath : src/cssplus/config/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime defaults table for CSSPlus options.

The defaults are an **immutable value**: the top level and every nested table
are `MappingProxyType` views and sequences are tuples. The merger receives the
table as an argument (see `cssplus.config.merge.merge_options`), so callers and
tests can supply an alternate table built with `make_defaults` instead of
patching module state.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from cssplus.config.keys import Opt, Plugin


def freeze_value(value: Any) -> Any:
    """Return an immutable view of ``value``.

    Mappings become `MappingProxyType` over a fresh dict, lists and tuples become
    tuples; nested containers are frozen recursively. Other values are returned
    unchanged (callables included).

    Args:
        value (Any): The value to freeze.

    Returns:
        Any: The frozen value.
    """
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): freeze_value(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(v) for v in value)
    return value


def make_defaults(table: Mapping[str, Any]) -> Mapping[str, Any]:
    """Build an immutable defaults table from a plain mapping.

    Args:
        table (Mapping[str, Any]): Plain mapping mirroring the options shape.

    Returns:
        Mapping[str, Any]: A read-only defaults table.
    """
    frozen: Mapping[str, Any] = freeze_value(table)
    return frozen


DEFAULTS: Mapping[str, Any] = make_defaults(
    {
        Opt.USE: [Plugin.CSSPLUS, Plugin.SIMPLE_RESET],
        Opt.LINT: True,
        Opt.MINIFY: False,
        Opt.ROOT: None,
        Opt.DEBUG: None,
        # Alternate identifiers accepted in `use`, mapped to their canonical plugin
        Opt.ALIASES: {
            Plugin.EASY_IMPORT: Plugin.CSSPLUS,
        },
        Plugin.EASY_IMPORT: {
            Opt.ROOT: None,
            Opt.KEY_LOAD: None,
            Opt.KEY_ON_IMPORT: None,
        },
        Plugin.AUTOPREFIXER: {
            Opt.KEY_ADD: True,
            Opt.KEY_REMOVE: True,
        },
        Plugin.STYLELINT: {
            Opt.KEY_RULES: {
                "indentation": 2,
                "color-no-invalid-hex": True,
            },
        },
        Plugin.BEM_LINTER: {
            "preset": "suit",
        },
        Plugin.REPORTER: {
            Opt.KEY_THROW_ERROR: True,
        },
        Opt.PROCESSOR: {},
    }
)
