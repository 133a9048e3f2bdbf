# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/plugins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plugin registry and built-in transform plugins.

A plugin is any object with a ``name`` attribute that is callable as
``plugin(css, options)`` and returns the transformed text (or an awaitable
resolving to it). Plugins are created by factories registered under their
identifier; see `cssplus.plugins.registry.PluginRegistry`.

Third-party packages contribute factories through the ``cssplus.plugins``
entry-point group:

```toml
[project.entry-points."cssplus.plugins"]
at2x = "cssplus_at2x:At2x"
```
"""

from __future__ import annotations

from cssplus.plugins.registry import PluginRegistry

__all__: list[str] = ["PluginRegistry"]
