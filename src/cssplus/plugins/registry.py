# topmark:header:start
#
#   project      : CSSPlus
#   file         : registry.py
#   file_relpath : src/cssplus/plugins/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin registry.

`PluginRegistry` maps plugin identifiers to factories. A factory is called
with the plugin's option table (the sub-configuration keyed by its identifier)
and returns a plugin instance.

Registries are plain instances handed to the pipeline at construction time;
there is no process-wide mutable registry. Use `PluginRegistry.with_builtins`
for the bundled plugins only, or `PluginRegistry.with_entry_points` to also
pick up factories published under the ``cssplus.plugins`` entry-point group.
"""

from __future__ import annotations

from importlib.metadata import EntryPoints, entry_points
from threading import RLock
from typing import TYPE_CHECKING, Any

from cssplus.config.keys import Plugin as PluginId
from cssplus.config.logging import get_logger
from cssplus.constants import PLUGIN_ENTRY_POINT_GROUP
from cssplus.core.errors import PluginNotFoundError
from cssplus.plugins.properties import CustomProperties
from cssplus.plugins.reset import SimpleReset

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from cssplus.config.logging import CssplusLogger
    from cssplus.pipeline.contracts import Plugin, PluginFactory

logger: CssplusLogger = get_logger(__name__)


def builtin_factories() -> dict[str, PluginFactory]:
    """Return the factories of the plugins bundled with CSSPlus."""
    return {
        PluginId.CSSPLUS: CustomProperties,
        PluginId.SIMPLE_RESET: SimpleReset,
    }


def iter_entry_point_factories(
    group: str = PLUGIN_ENTRY_POINT_GROUP,
) -> Iterable[tuple[str, PluginFactory]]:
    """Yield ``(identifier, factory)`` pairs published under ``group``.

    Entry points that fail to load are logged and skipped.
    """
    try:
        eps = entry_points()
    except Exception:
        logger.exception("Failed to read entry points")
        return

    candidates: EntryPoints = eps.select(group=group)
    for ep in candidates:
        try:
            factory: Any = ep.load()
        except Exception:
            logger.exception("Failed loading plugin from entry point %s", ep.name)
            continue
        if not callable(factory):
            logger.warning("Entry point %s is not a plugin factory: %r", ep.name, factory)
            continue
        yield ep.name, factory


class PluginRegistry:
    """Identifier to factory mapping used by the plugin step."""

    def __init__(self, factories: Mapping[str, PluginFactory] | None = None) -> None:
        self._lock = RLock()
        self._factories: dict[str, PluginFactory] = dict(factories or {})

    @classmethod
    def with_builtins(cls) -> PluginRegistry:
        """Return a registry holding the bundled plugins."""
        return cls(builtin_factories())

    @classmethod
    def with_entry_points(cls, group: str = PLUGIN_ENTRY_POINT_GROUP) -> PluginRegistry:
        """Return a registry holding the bundled plugins plus installed entry points.

        Entry points may override a bundled identifier; the override is logged.
        """
        registry: PluginRegistry = cls.with_builtins()
        for name, factory in iter_entry_point_factories(group):
            if name in registry:
                logger.info("Plugin %s from entry point overrides the bundled one", name)
            registry.register(name, factory)
        return registry

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._factories

    def register(self, name: str, factory: PluginFactory) -> None:
        """Register (or replace) the factory for ``name``."""
        with self._lock:
            self._factories[name] = factory
        logger.debug("Registered plugin %s", name)

    def unregister(self, name: str) -> None:
        """Remove ``name``; unknown names are ignored."""
        with self._lock:
            self._factories.pop(name, None)

    def get(self, name: str) -> PluginFactory | None:
        with self._lock:
            return self._factories.get(name)

    def names(self) -> tuple[str, ...]:
        """Return the registered identifiers (sorted)."""
        with self._lock:
            return tuple(sorted(self._factories))

    def create(self, name: str, options: Mapping[str, Any]) -> Plugin:
        """Instantiate the plugin registered as ``name``.

        Args:
            name (str): Plugin identifier from ``use``.
            options (Mapping[str, Any]): The plugin's option table.

        Returns:
            Plugin: A new plugin instance.

        Raises:
            PluginNotFoundError: If ``name`` is not registered.
        """
        factory: PluginFactory | None = self.get(name)
        if factory is None:
            raise PluginNotFoundError(name)
        return factory(options)
