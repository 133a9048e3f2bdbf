# topmark:header:start
#
#   project      : CSSPlus
#   file         : merge.py
#   file_relpath : src/cssplus/config/merge.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option merge policy.

This module combines caller-supplied options with a defaults table into one
canonical `Options` snapshot.

Merge rules:
    - Absent input is treated like an empty mapping; any mapping is accepted and
      nothing here raises.
    - Keys missing from the user layer copy the default value. Nested tables are
      copied one level deep so edits on the result never reach the defaults.
    - Keys present in the user layer override the default, with three exceptions:
        * ``use`` follows the ordered merge of `merge_use`;
        * ``aliases`` extends the default alias table;
        * the import resolver table (``easy-import``) is merged key by key with
          its defaults, and a top-level ``root`` is copied into it (unless the
          user disables the import step with ``easy-import = false``).
    - Unknown keys are passed through uninterpreted.

Ordered merge of ``use``:
    The result lists the identifiers that only appear in the defaults (default
    order), then the identifiers named by both layers (user order), then the
    identifiers only named by the user (user order). User identifiers are
    canonicalized through the alias table first; repeats are dropped.

    Examples:
        ``[a, b] + [c, a]  ->  [b, a, c]``
        ``[a, b] + [c, d]  ->  [a, b, c, d]``
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from cssplus.config.defaults import DEFAULTS
from cssplus.config.keys import Opt, Plugin
from cssplus.config.logging import get_logger
from cssplus.config.model import Options

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)


def as_identifiers(value: Any) -> tuple[str, ...]:
    """Coerce a ``use``-like value into a tuple of plugin identifiers.

    ``None`` yields an empty tuple, a single string yields a one-element tuple and
    any other iterable is converted element by element.

    Args:
        value (Any): Raw value from an options mapping.

    Returns:
        tuple[str, ...]: The identifiers, in input order (duplicates kept).
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(str(v) for v in value)
    return (str(value),)


def _unique(names: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            out.append(name)
    return out


def merge_use(
    default_use: Iterable[str],
    user_use: Iterable[str] | None,
    *,
    aliases: Mapping[str, str] | None = None,
) -> tuple[str, ...]:
    """Merge the default plugin list with the user's plugin list.

    Args:
        default_use (Iterable[str]): Plugin identifiers from the defaults table.
        user_use (Iterable[str] | None): Plugin identifiers named by the user.
        aliases (Mapping[str, str] | None): Alternate identifier -> canonical identifier.

    Returns:
        tuple[str, ...]: The merged, duplicate-free plugin list.
    """
    alias_map: Mapping[str, str] = aliases or {}
    defaults: list[str] = _unique(default_use)
    user: list[str] = _unique(alias_map.get(name, name) for name in (user_use or ()))

    default_set: set[str] = set(defaults)
    user_set: set[str] = set(user)

    default_only: list[str] = [name for name in defaults if name not in user_set]
    shared: list[str] = [name for name in user if name in default_set]
    user_only: list[str] = [name for name in user if name not in default_set]

    merged: tuple[str, ...] = (*default_only, *shared, *user_only)
    logger.trace("merge_use: defaults=%s user=%s -> %s", defaults, user, merged)
    return merged


def _copy_value(value: Any) -> Any:
    """Copy tables one level deep; leave scalars, callables and sequences alone."""
    if isinstance(value, Mapping):
        return dict(value)
    return value


def _merge_tables(base: Any, overlay: Any) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base) if isinstance(base, Mapping) else {}
    if isinstance(overlay, Mapping):
        merged.update(overlay)
    return merged


def merge_options(
    user_options: Mapping[str, Any] | None = None,
    *,
    defaults: Mapping[str, Any] = DEFAULTS,
) -> Options:
    """Merge user options with the defaults table.

    Args:
        user_options (Mapping[str, Any] | None): Caller-supplied options; ``None``
            behaves like an empty mapping.
        defaults (Mapping[str, Any]): The defaults table to merge onto. Defaults to
            the packaged `DEFAULTS`.

    Returns:
        Options: A new read-only snapshot holding the union of default and user keys.
    """
    user: Mapping[str, Any] = user_options or {}

    merged: dict[str, Any] = {key: _copy_value(value) for key, value in defaults.items()}
    for key, value in user.items():
        if key == Opt.USE:
            continue
        merged[key] = _copy_value(value)

    aliases: dict[str, str] = _merge_tables(defaults.get(Opt.ALIASES), user.get(Opt.ALIASES))
    if Opt.ALIASES in defaults or Opt.ALIASES in user:
        merged[Opt.ALIASES] = aliases

    merged[Opt.USE] = merge_use(
        as_identifiers(defaults.get(Opt.USE)),
        as_identifiers(user.get(Opt.USE)),
        aliases=aliases,
    )

    if user.get(Plugin.EASY_IMPORT) is False:
        merged[Plugin.EASY_IMPORT] = False
    elif Plugin.EASY_IMPORT in defaults or Plugin.EASY_IMPORT in user:
        import_tbl: dict[str, Any] = _merge_tables(
            defaults.get(Plugin.EASY_IMPORT), user.get(Plugin.EASY_IMPORT)
        )
        root: Any = user.get(Opt.ROOT)
        if root is not None:
            import_tbl[Opt.ROOT] = root
        merged[Plugin.EASY_IMPORT] = import_tbl

    logger.debug("Merged options: use=%s lint=%s", merged[Opt.USE], merged.get(Opt.LINT))
    return Options(merged)
