# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public CSSPlus API (stable surface).

This module exposes a small, typed API for integrations that want to run CSSPlus
programmatically without going through the CLI.

Versioning policy
-----------------
- The signatures in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Notes:
-----
- `process` returns an awaitable; `process_sync` runs it to completion with
  `asyncio.run` and must not be called from a running event loop.
- Options are plain mappings mirroring the TOML shape; they are merged over the
  defaults (see `merge_options`) before the pipeline runs.

```python
import asyncio

from cssplus import api

result = asyncio.run(api.process("/** @define Foo */\\n.Foo { color: red; }\\n"))
print(result.css)
```
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cssplus.config.merge import merge_options
from cssplus.constants import CSSPLUS_VERSION
from cssplus.pipeline.processor import Processor
from cssplus.plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from collections.abc import Coroutine, Mapping

    from cssplus.pipeline.context import Result

__all__: list[str] = [
    "Processor",
    "merge_options",
    "plugin_names",
    "process",
    "process_file",
    "process_sync",
    "version",
]


def version() -> str:
    """Return the installed CSSPlus version string."""
    return CSSPLUS_VERSION


def plugin_names(*, entry_points: bool = True) -> tuple[str, ...]:
    """Return the identifiers of the available plugins.

    Args:
        entry_points (bool): Include plugins published by installed packages.

    Returns:
        tuple[str, ...]: Sorted plugin identifiers.
    """
    registry: PluginRegistry = (
        PluginRegistry.with_entry_points() if entry_points else PluginRegistry.with_builtins()
    )
    return registry.names()


def process(
    css: str,
    options: Mapping[str, Any] | None = None,
    filename: str | None = None,
    *,
    processor: Processor | None = None,
) -> Coroutine[Any, Any, Result]:
    """Process a stylesheet with a default (or the given) `Processor`.

    Raises:
        TypeError: Immediately, if ``css`` is not a string.
    """
    return (processor or Processor()).process(css, options, filename)


def process_sync(
    css: str,
    options: Mapping[str, Any] | None = None,
    filename: str | None = None,
    *,
    processor: Processor | None = None,
) -> Result:
    """Blocking variant of `process`."""
    return asyncio.run(process(css, options, filename, processor=processor))


def process_file(
    path: Path | str,
    options: Mapping[str, Any] | None = None,
    *,
    processor: Processor | None = None,
) -> Result:
    """Read ``path`` (UTF-8) and process it; relative imports resolve next to it."""
    source: Path = Path(path)
    css: str = source.read_text(encoding="utf-8")
    return process_sync(css, options, str(source), processor=processor)
