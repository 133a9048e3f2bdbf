# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_registry.py
#   file_relpath : tests/plugins/test_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `cssplus.plugins.registry.PluginRegistry`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from cssplus.core.errors import PluginNotFoundError
from cssplus.plugins.properties import CustomProperties
from cssplus.plugins.registry import PluginRegistry, builtin_factories
from cssplus.plugins.reset import SimpleReset

if TYPE_CHECKING:
    from collections.abc import Mapping


class At2x:
    name: str = "postcss-at2x"

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.options = dict(options)

    def __call__(self, css: str, options: Mapping[str, Any]) -> str:
        return css


def test_builtins() -> None:
    registry = PluginRegistry.with_builtins()

    assert registry.names() == ("cssplus", "simple-reset")
    assert isinstance(registry.create("cssplus", {}), CustomProperties)
    assert isinstance(registry.create("simple-reset", {}), SimpleReset)
    assert builtin_factories().keys() == {"cssplus", "simple-reset"}


def test_register_create_unregister() -> None:
    registry = PluginRegistry()
    registry.register("postcss-at2x", At2x)

    plugin: Any = registry.create("postcss-at2x", {"identifier": "@2x"})
    assert isinstance(plugin, At2x)
    assert plugin.options == {"identifier": "@2x"}
    assert "postcss-at2x" in registry

    registry.unregister("postcss-at2x")
    registry.unregister("postcss-at2x")  # unknown names are ignored
    assert registry.get("postcss-at2x") is None


def test_unknown_plugin() -> None:
    with pytest.raises(PluginNotFoundError, match="nope") as exc_info:
        PluginRegistry().create("nope", {})
    assert exc_info.value.name == "nope"


def test_registries_are_independent() -> None:
    a = PluginRegistry.with_builtins()
    b = PluginRegistry.with_builtins()
    a.register("postcss-at2x", At2x)

    assert "postcss-at2x" not in b


def test_entry_points_registry_keeps_builtins() -> None:
    registry = PluginRegistry.with_entry_points(group="cssplus.tests.no-such-group")
    assert registry.names() == ("cssplus", "simple-reset")
