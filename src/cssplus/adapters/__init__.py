# topmark:header:start
#
#   project      : CSSPlus
#   file         : __init__.py
#   file_relpath : src/cssplus/adapters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default collaborators for the CSSPlus pipeline.

These adapters satisfy the protocols in `cssplus.pipeline.contracts` with small,
text-level implementations so that the pipeline and CLI work without a CSS engine.
Integrations swap any of them by passing their own collaborator to
`cssplus.pipeline.processor.Processor`.
"""
