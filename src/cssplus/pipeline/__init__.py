# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSSPlus processing pipeline.

- `cssplus.pipeline.processor.Processor`: collaborator wiring and the
  ``process()`` entry point.
- `cssplus.pipeline.runner`: sequential async step execution.
- `cssplus.pipeline.steps`: the concrete steps.
- `cssplus.pipeline.context`: per-run state and the `Result` model.
- `cssplus.pipeline.contracts`: collaborator protocols.
"""
