# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/pipeline/steps/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete pipeline steps, in run order: imports, lint, plugins, transform,
prefix, report, minify."""

from __future__ import annotations

from cssplus.pipeline.steps.base import BaseStep
from cssplus.pipeline.steps.imports import ImportStep
from cssplus.pipeline.steps.lint import LintStep
from cssplus.pipeline.steps.minify import MinifyStep
from cssplus.pipeline.steps.plugins import PluginStep
from cssplus.pipeline.steps.prefix import PrefixStep
from cssplus.pipeline.steps.report import ReportStep
from cssplus.pipeline.steps.transform import TransformStep

__all__: list[str] = [
    "BaseStep",
    "ImportStep",
    "LintStep",
    "MinifyStep",
    "PluginStep",
    "PrefixStep",
    "ReportStep",
    "TransformStep",
]
