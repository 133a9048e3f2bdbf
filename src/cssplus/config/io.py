# topmark:header:start
#
#   project      : CSSPlus
#   file         : io.py
#   file_relpath : src/cssplus/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for CSSPlus configuration.

CSSPlus reads options from ``cssplus.toml`` (top-level keys) or from the
``[tool.cssplus]`` table of ``pyproject.toml``. Parsing and rendering use
`tomlkit`; loaded documents are unwrapped into plain dicts.

Discovery:
    Starting at an anchor directory we walk upward to the filesystem root and
    return the **nearest** config file. In a given directory ``cssplus.toml``
    wins over ``pyproject.toml``; a ``pyproject.toml`` without a
    ``[tool.cssplus]`` table is ignored.

Path semantics:
    A relative ``root`` (top-level or inside ``[easy-import]``) is resolved
    against the directory of the config file that declares it.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cssplus.config.keys import Opt, Plugin
from cssplus.config.logging import get_logger
from cssplus.constants import CSSPLUS_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from cssplus.core.errors import ConfigError

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain dicts/lists.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _options_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the CSSPlus options table of a parsed document, or None if absent."""
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    return cast("TomlTable", section) if isinstance(section, dict) else None


def _resolve_root(value: Any, base: Path) -> Any:
    if isinstance(value, str) and value and not Path(value).is_absolute():
        return str((base / value).resolve())
    return value


def load_config_file(path: Path) -> TomlTable:
    """Load CSSPlus options from ``cssplus.toml`` or ``pyproject.toml``.

    Args:
        path (Path): The config file.

    Returns:
        TomlTable: The user options layer, with relative roots made absolute.

    Raises:
        ConfigError: If the file is unreadable, malformed, or a ``pyproject.toml``
            without a ``[tool.cssplus]`` table.
    """
    logger.debug("Loading CSSPlus options from %s", path)
    data: TomlTable = load_toml_dict(path)
    options: TomlTable | None = _options_table(path, data)
    if options is None:
        raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] section missing or malformed in {path}")

    base: Path = path.parent.resolve()
    if Opt.ROOT in options:
        options[Opt.ROOT] = _resolve_root(options[Opt.ROOT], base)
    import_tbl: Any = options.get(Plugin.EASY_IMPORT)
    if isinstance(import_tbl, dict) and Opt.ROOT in import_tbl:
        import_tbl[Opt.ROOT] = _resolve_root(import_tbl[Opt.ROOT], base)

    logger.trace("Options loaded from %s: %s", path, options)
    return options


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest config file at or above ``start``.

    Args:
        start (Path): Anchor file or directory where discovery starts.

    Returns:
        Path | None: The config file, or None when nothing was found.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        for name in (CSSPLUS_TOML_NAME, PYPROJECT_TOML_NAME):
            candidate: Path = cur / name
            if not candidate.is_file():
                continue
            if name == PYPROJECT_TOML_NAME:
                try:
                    data: TomlTable = load_toml_dict(candidate)
                except ConfigError as e:
                    # Best-effort discovery; an unrelated broken pyproject is skipped.
                    logger.debug("Ignoring %s: %s", candidate, e)
                    continue
                if _options_table(candidate, data) is None:
                    continue
            logger.debug("Discovered config file: %s", candidate)
            return candidate

        parent: Path = cur.parent
        if parent == cur:
            return None
        cur = parent


def _strip_for_toml(value: object) -> object:
    """Remove values TOML cannot express (``None`` and callables)."""
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None or callable(v_any):
                logger.debug("Ignoring non-TOML entry for key %s", k_any)
                continue
            out[str(k_any)] = _strip_for_toml(v_any)
        return out
    if isinstance(value, (list, tuple)):
        seq: tuple[object, ...] = tuple(cast("tuple[object, ...]", value))
        return [_strip_for_toml(v) for v in seq if v is not None and not callable(v)]
    return value


def options_to_toml(options: Mapping[str, Any]) -> str:
    """Render an options mapping as a TOML document.

    TOML has no ``null`` and cannot hold functions, so ``None`` values and
    hooks (``debug``, ``load``, ``on_import``) are omitted.

    Args:
        options (Mapping[str, Any]): Options to render (typically merged `Options`).

    Returns:
        str: The TOML document text.
    """
    stripped: Any = _strip_for_toml(options)
    # Plain values first so none of them lands inside a preceding [table]
    cleaned: dict[str, Any] = {
        k: v for k, v in stripped.items() if not isinstance(v, Mapping)
    }
    cleaned.update({k: v for k, v in stripped.items() if isinstance(v, Mapping)})
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
