"""Helpers that give synchronous and awaitable results one contract.

A pending computation is anything ``inspect.isawaitable`` accepts: coroutines,
``asyncio.Future`` and ``asyncio.Task`` objects, or custom ``__await__``
implementations. Continuations are attached by wrapping the awaitable in a new
coroutine, so nothing here needs a running event loop until the caller awaits.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeVar

T = TypeVar("T")

FaultHook = Callable[[Exception], NoReturn]


def is_pending(value: Any) -> bool:
    return inspect.isawaitable(value)


async def _guard_pending(awaitable: Awaitable[T], on_fault: FaultHook) -> T:
    try:
        return await awaitable
    except Exception as fault:
        on_fault(fault)
        raise


def guard(sub: Callable[[], T], on_fault: FaultHook) -> T:
    """Run ``sub`` and hand any ``Exception`` it raises to ``on_fault``.

    ``on_fault`` is expected to raise; if it returns, the original fault is
    re-raised unchanged. When ``sub`` returns an awaitable the same hook is
    attached to its eventual failure and a coroutine is returned instead; a
    successful value is passed through untouched either way.
    """

    try:
        result = sub()
    except Exception as fault:
        on_fault(fault)
        raise
    if is_pending(result):
        return _guard_pending(result, on_fault)  # type: ignore[return-value]
    return result


__all__ = ["FaultHook", "guard", "is_pending"]
