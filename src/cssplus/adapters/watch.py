# topmark:header:start
#
#   project      : CSSPlus
#   file         : watch.py
#   file_relpath : src/cssplus/adapters/watch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Watch-file list: remembers which files the last import pass pulled in."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cssplus.config.logging import get_logger

if TYPE_CHECKING:
    from cssplus.config.logging import CssplusLogger

logger: CssplusLogger = get_logger(__name__)


class WatchFileList:
    """`WatchNotifier` that stores the most recent import file list.

    A file watcher (or a CLI ``--watch`` loop) reads `files` to decide what to
    observe for the next rebuild.
    """

    def __init__(self) -> None:
        self.files: list[str] = []

    def update(self, paths: list[str]) -> None:
        self.files = list(paths)
        logger.trace("Watch list updated: %s", self.files)
