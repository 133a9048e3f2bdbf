# topmark:header:start
#
#   project      : CSSPlus
#   file         : model.py
#   file_relpath : src/cssplus/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Merged options model.

`Options` is the canonical, fully-defaulted configuration handed to the pipeline
runner. It is a read-only `Mapping` (so it can be passed anywhere a plain options
mapping is accepted, including back into `merge_options`) with typed accessors
for the well-known keys.

Immutability:
    - The top-level mapping is exposed through a `MappingProxyType`.
    - ``use`` is stored as a tuple.
    - Nested plugin tables are plain dicts owned by this snapshot; use `thaw`
      to obtain an editable copy rather than mutating them in place.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Callable

from cssplus.config.keys import Opt

EMPTY_TABLE: Mapping[str, Any] = MappingProxyType({})


class Options(Mapping[str, Any]):
    """Immutable runtime options produced by `cssplus.config.merge.merge_options`.

    Attributes:
        use (tuple[str, ...]): Ordered, duplicate-free plugin identifiers.
        lint (bool): Whether the linters run.
        minify (bool): Whether the output is minified.
        root (str | None): Import root, if set.
        debug (Callable[[list[Any]], Any] | None): Hook receiving the instantiated plugins.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]) -> None:
        data: dict[str, Any] = dict(values)
        data[Opt.USE] = tuple(data.get(Opt.USE) or ())
        self._values: Mapping[str, Any] = MappingProxyType(data)

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Options({dict(self._values)!r})"

    @property
    def use(self) -> tuple[str, ...]:
        return self._values[Opt.USE]

    @property
    def lint(self) -> bool:
        return bool(self._values.get(Opt.LINT, True))

    @property
    def minify(self) -> bool:
        return bool(self._values.get(Opt.MINIFY, False))

    @property
    def root(self) -> str | None:
        root: Any = self._values.get(Opt.ROOT)
        return None if root is None else str(root)

    @property
    def debug(self) -> Callable[[list[Any]], Any] | None:
        hook: Any = self._values.get(Opt.DEBUG)
        return hook if callable(hook) else None

    def plugin_options(self, name: str) -> Mapping[str, Any]:
        """Return the sub-configuration table for a plugin or collaborator.

        Args:
            name (str): Plugin identifier (also the option key of its table).

        Returns:
            Mapping[str, Any]: The table, or an empty mapping when the key is
                missing or not a table (e.g. ``autoprefixer = false``).
        """
        tbl: Any = self._values.get(name)
        if isinstance(tbl, Mapping):
            return tbl
        return EMPTY_TABLE

    def is_disabled(self, name: str) -> bool:
        """Return True when a collaborator table is explicitly set to ``False``."""
        return self._values.get(name) is False

    def thaw(self) -> dict[str, Any]:
        """Return an editable copy (tables copied one level deep, ``use`` as a list)."""
        out: dict[str, Any] = {
            k: dict(v) if isinstance(v, Mapping) else v for k, v in self._values.items()
        }
        out[Opt.USE] = list(self.use)
        return out
