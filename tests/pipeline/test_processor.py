# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_processor.py
#   file_relpath : tests/pipeline/test_processor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processor wiring: step order, plugin materialization and injected collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from cssplus.config import merge_options
from cssplus.core.diagnostics import Diagnostic, DiagnosticLevel
from cssplus.core.errors import LintError, PluginNotFoundError
from cssplus.pipeline import runner
from cssplus.pipeline.context import ProcessingContext
from cssplus.pipeline.processor import Processor
from cssplus.plugins.registry import PluginRegistry
from tests.conftest import run

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from cssplus.pipeline.context import Result
    from cssplus.pipeline.contracts import Plugin

pytestmark = pytest.mark.pipeline


class Upper:
    """Async plugin used to check that awaitable plugin results are resolved."""

    name: str = "upper"

    def __init__(self, options: Mapping[str, Any]) -> None:
        self.options = dict(options)

    async def __call__(self, css: str, options: Mapping[str, Any]) -> str:
        return css.upper()


class CapturingPipeline:
    def __init__(self) -> None:
        self.options: dict[str, Any] | None = None
        self.plugins: list[str] = []

    async def run(self, css: str, plugins: Sequence[Plugin], options: Mapping[str, Any]) -> str:
        self.options = dict(options)
        self.plugins = [p.name for p in plugins]
        return css


class AlwaysFails:
    name: str = "always-fails"

    def lint(self, css: str, options: Mapping[str, Any]) -> list[Diagnostic]:
        return [Diagnostic(level=DiagnosticLevel.ERROR, message="nope", source=self.name)]


def test_step_order() -> None:
    names: list[str] = [step.name for step in Processor().steps()]

    assert names == ["imports", "lint", "plugins", "transform", "prefix", "report", "minify"]


def test_step_trail_reflects_gating() -> None:
    ctx = ProcessingContext(css="body {}", options=merge_options({"lint": False, "minify": True}))
    ctx = run(runner.run(ctx, Processor().steps()))

    assert ctx.steps == ["imports", "plugins", "transform", "prefix", "minify"]


def test_processor_options_reach_the_transform_pipeline() -> None:
    pipeline = CapturingPipeline()

    run(
        Processor(pipeline=pipeline).process(
            "body {}", {"lint": False, "processor": {"map": False}}, filename="app.css"
        )
    )

    assert pipeline.options == {"from": "app.css", "map": False}
    assert pipeline.plugins == ["cssplus", "simple-reset"]


def test_debug_hook_sees_the_plugins_once() -> None:
    calls: list[list[str]] = []

    def debug(plugins: list[Plugin]) -> None:
        calls.append([p.name for p in plugins])

    result: Result = run(
        Processor().process("@simple-reset;", {"lint": False, "autoprefixer": False, "debug": debug})
    )

    assert calls == [["cssplus", "simple-reset"]]
    assert "@simple-reset" not in result.css


def test_debug_hook_can_replace_the_plugin_list() -> None:
    result: Result = run(
        Processor().process("@simple-reset;", {"lint": False, "debug": lambda plugins: []})
    )

    assert result.css == "@simple-reset;"


def test_async_plugins_from_a_custom_registry() -> None:
    registry = PluginRegistry.with_builtins()
    registry.register("upper", Upper)

    result: Result = run(
        Processor(registry=registry).process(
            ".a { color: red; }", {"lint": False, "use": ["upper"], "upper": {"level": 1}}
        )
    )

    assert result.css == ".A { COLOR: RED; }"
    assert result.options.use == ("cssplus", "simple-reset", "upper")


def test_unknown_plugin_fails_the_run() -> None:
    with pytest.raises(PluginNotFoundError, match="postcss-at2x"):
        run(Processor().process("body {}", {"lint": False, "use": ["postcss-at2x"]}))


def test_injected_linters_replace_the_defaults() -> None:
    processor = Processor(linters=[AlwaysFails()])

    with pytest.raises(LintError) as exc_info:
        run(processor.process("/** @define Foo */\n.foo {}\n"))

    assert [d.source for d in exc_info.value.diagnostics] == ["always-fails"]


def test_linter_option_table_false_skips_it() -> None:
    processor = Processor(linters=[AlwaysFails()])
    result: Result = run(processor.process("body {}", {"always-fails": False}))

    assert result.diagnostics == ()


def test_defaults_table_is_injectable() -> None:
    defaults: dict[str, Any] = {"use": [], "lint": False}
    pipeline = CapturingPipeline()

    result: Result = run(Processor(pipeline=pipeline, defaults=defaults).process("body {}"))

    assert pipeline.plugins == []
    assert result.options.use == ()


def test_each_call_gets_independent_options() -> None:
    processor = Processor()
    first: Result = run(processor.process("body {}", {"lint": False, "minify": True}))
    second: Result = run(processor.process("body {}", {"lint": False}))

    assert first.options.minify is True
    assert second.options.minify is False
