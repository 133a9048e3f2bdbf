# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_builtins.py
#   file_relpath : tests/plugins/test_builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the bundled ``cssplus`` and ``simple-reset`` plugins."""

from __future__ import annotations

import logging

import pytest

from cssplus.plugins.properties import CustomProperties
from cssplus.plugins.reset import BASE, BOX_SIZING, SimpleReset

OPTS: dict[str, object] = {"from": "test.css"}


def test_custom_properties_are_substituted_and_root_removed() -> None:
    css: str = ":root {\n  --brand: #c00;\n}\n.a {\n  color: var(--brand);\n}\n"

    assert CustomProperties({})(css, OPTS) == ".a {\n  color: #c00;\n}\n"


def test_preserve_keeps_root_declarations() -> None:
    css: str = ":root { --w: 1px; }\n.a { width: var(--w); }"

    assert CustomProperties({"preserve": True})(css, OPTS) == ":root { --w: 1px; }\n.a { width: 1px; }"


def test_root_keeps_regular_declarations() -> None:
    css: str = ":root { --w: 1px; font-size: 16px; }\n.a { width: var(--w); }"

    out: str = CustomProperties({})(css, OPTS)

    assert out == ":root { font-size: 16px; }\n.a { width: 1px; }"


def test_fallbacks_nested_vars_and_undefined_properties() -> None:
    css: str = (
        ":root { --a: var(--b); --b: 2px; }\n"
        ".a { margin: var(--a); padding: var(--nope, calc(1px + 2px)); top: var(--undefined); }"
    )

    out: str = CustomProperties({})(css, OPTS)

    assert out == ".a { margin: 2px; padding: calc(1px + 2px); top: var(--undefined); }"


def test_undefined_property_is_reported_once(caplog: pytest.LogCaptureFixture) -> None:
    css: str = (
        ":root { --a: var(--b); --b: var(--c); --c: 1px; }\n"
        ".a { top: var(--a); left: var(--gone); }"
    )

    with caplog.at_level(logging.WARNING, logger="cssplus.plugins.properties"):
        out: str = CustomProperties({})(css, {"from": "a.css"})

    assert out == ".a { top: 1px; left: var(--gone); }"
    assert [r.getMessage() for r in caplog.records] == ["a.css: undefined custom property --gone"]


def test_extra_variables_option() -> None:
    plugin = CustomProperties({"variables": {"gap": "4px", "--edge": "0"}})

    assert plugin(".a { gap: var(--gap); left: var(--edge); }", OPTS) == ".a { gap: 4px; left: 0; }"


def test_simple_reset_expands_the_at_rule() -> None:
    out: str = SimpleReset({})("@simple-reset;\n.a {}", OPTS)

    assert out == f"{BOX_SIZING}\n\n{BASE}\n.a {{}}"


def test_simple_reset_without_box_sizing() -> None:
    assert SimpleReset({"box_sizing": False})("@simple-reset;", OPTS) == BASE


def test_plugins_are_named() -> None:
    assert CustomProperties().name == "cssplus"
    assert SimpleReset().name == "simple-reset"
