# topmark:header:start
#
#   project      : CSSPlus
#   file         : hooks.py
#   file_relpath : src/cssplus/pipeline/hooks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Uniform handling of user hooks that may return plain values or awaitables."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, TypeVar, cast

if TYPE_CHECKING:
    from cssplus.pipeline.contracts import MaybeAwaitable

T = TypeVar("T")


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await ``value`` if it is awaitable, otherwise return it unchanged.

    Args:
        value (MaybeAwaitable[T]): A plain value, coroutine, task or future.

    Returns:
        T: The resolved value.
    """
    if inspect.isawaitable(value):
        return await value
    return cast("T", value)
