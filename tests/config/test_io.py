# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in `cssplus.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from cssplus.config import merge_options
from cssplus.config.io import (
    discover_config_file,
    load_config_file,
    load_toml_dict,
    options_to_toml,
)
from cssplus.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_load_cssplus_toml_resolves_relative_roots(tmp_path: Path) -> None:
    cfg: Path = tmp_path / "cssplus.toml"
    cfg.write_text(
        'root = "src"\nlint = false\n\n[easy-import]\nroot = "lib"\n',
        encoding="utf-8",
    )

    options: dict[str, Any] = load_config_file(cfg)

    assert options["lint"] is False
    assert options["root"] == str((tmp_path / "src").resolve())
    assert options["easy-import"]["root"] == str((tmp_path / "lib").resolve())


def test_load_pyproject_tool_section(tmp_path: Path) -> None:
    cfg: Path = tmp_path / "pyproject.toml"
    cfg.write_text(
        '[project]\nname = "x"\n\n[tool.cssplus]\nuse = ["postcss-at2x"]\nminify = true\n',
        encoding="utf-8",
    )

    options: dict[str, Any] = load_config_file(cfg)

    assert options == {"use": ["postcss-at2x"], "minify": True}


def test_pyproject_without_section_is_a_config_error(tmp_path: Path) -> None:
    cfg: Path = tmp_path / "pyproject.toml"
    cfg.write_text('[project]\nname = "x"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="tool.cssplus"):
        load_config_file(cfg)


def test_invalid_toml_is_a_config_error(tmp_path: Path) -> None:
    cfg: Path = tmp_path / "cssplus.toml"
    cfg.write_text("use = [\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_toml_dict(cfg)


def test_missing_file_is_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "nope.toml")


def test_discovery_prefers_the_nearest_file(tmp_path: Path) -> None:
    (tmp_path / "cssplus.toml").write_text("lint = false\n", encoding="utf-8")
    nested: Path = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / "a" / "cssplus.toml").write_text("minify = true\n", encoding="utf-8")

    assert discover_config_file(nested) == (tmp_path / "a" / "cssplus.toml").resolve()


def test_discovery_prefers_cssplus_toml_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "cssplus.toml").write_text("lint = false\n", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[tool.cssplus]\nlint = true\n", encoding="utf-8")

    assert discover_config_file(tmp_path) == (tmp_path / "cssplus.toml").resolve()


def test_discovery_skips_pyproject_without_section(tmp_path: Path) -> None:
    (tmp_path / "cssplus.toml").write_text("lint = false\n", encoding="utf-8")
    child: Path = tmp_path / "child"
    child.mkdir()
    (child / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert discover_config_file(child / "index.css") == (tmp_path / "cssplus.toml").resolve()


def test_options_to_toml_omits_hooks_and_unset_values() -> None:
    text: str = options_to_toml(merge_options({"debug": print, "minify": True}))
    parsed: Any = tomlkit.parse(text).unwrap()

    assert parsed["use"] == ["cssplus", "simple-reset"]
    assert parsed["minify"] is True
    assert "debug" not in parsed
    assert "root" not in parsed
    assert parsed["autoprefixer"] == {"add": True, "remove": True}
    assert parsed["easy-import"] == {}
    assert parsed["stylelint"]["rules"]["indentation"] == 2


def test_options_to_toml_round_trips_through_the_loader(tmp_path: Path) -> None:
    cfg: Path = tmp_path / "cssplus.toml"
    cfg.write_text(options_to_toml(merge_options({"lint": False})), encoding="utf-8")

    reloaded = merge_options(load_config_file(cfg))

    assert reloaded.lint is False
    assert reloaded.use == ("cssplus", "simple-reset")
