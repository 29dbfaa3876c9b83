"""
The runner: drive an operation and route its exits to channel handlers.

Example:
    >>> from gbye import run
    >>> def parse_age(ctl):
    ...     age = ctl.trap("malformed", lambda: int("ten"))
    ...     if age < 0:
    ...         ctl.exit("negative", age)
    ...     return age
    >>> run(parse_age, {
    ...     "malformed": lambda err: f"not a number: {err}",
    ...     "negative": lambda age: f"{age} is below zero",
    ... })
    "not a number: invalid literal for int() with base 10: 'ten'"
"""

from __future__ import annotations

from collections.abc import Awaitable, Hashable, Mapping
from typing import Any, TypeVar

from loguru import logger

from gbye._carrier import Carrier
from gbye._pending import is_pending
from gbye.channels import ChannelTable
from gbye.config import resolve_strict
from gbye.controls import make_controls
from gbye.types import Handler, Operation

T = TypeVar("T")


def _dispatch(table: ChannelTable, key: Hashable, args: tuple[Any, ...]) -> Any:
    handler = table[key]
    logger.debug("dispatching exit to channel {!r}", key)
    return handler(*args)


def _pass_through(carrier: Carrier) -> None:
    logger.debug("exit to channel {!r} is foreign to this run, re-raising", carrier.key)


async def _resolve(pending: Awaitable[Any], table: ChannelTable) -> Any:
    try:
        return await pending
    except Carrier as carrier:
        if carrier.key not in table:
            _pass_through(carrier)
            raise
        key, args = carrier.key, carrier.arguments
    # Handler runs outside the except block so its own faults carry no Carrier context.
    result = _dispatch(table, key, args)
    if is_pending(result):
        return await result
    return result


def run(
    operation: Operation[T],
    channels: Mapping[Hashable, Handler] | None = None,
    *,
    strict: bool | None = None,
) -> Any:
    """Run ``operation`` with controls for exiting through named channels.

    Args:
        operation: Called once with a :class:`~gbye.controls.Controls` pair.
            ``exit(name, *args)`` abandons the operation and makes ``run``
            return ``channels[name](*args)``. ``trap(name, *lead, sub)`` calls
            ``sub()`` and returns its value, or, if it raises an ``Exception``,
            exits through ``name`` with ``(*lead, fault)``.
        channels: Mapping of channel name to handler, or a prebuilt
            :class:`~gbye.channels.ChannelTable`. Omit for an empty table.
        strict: Check every exit/trap call against the handler's signature
            and raise :class:`~gbye.errors.ChannelSignatureError` on mismatch.
            Defaults to the ``GBYE_STRICT`` environment flag.

    Returns:
        The operation's return value, or the handler's return value when an
        exit was taken. If the operation returns an awaitable, a coroutine
        resolving to the same outcome is returned instead.

    Raises:
        Anything the operation raises that is not one of its exits is
        re-raised unchanged, as is anything a handler raises.

    Note:
        Exits are matched by channel name, not by the ``run`` call that issued
        them. When ``run`` calls are nested and their tables share a name, an
        outer ``exit`` called from inside the inner operation is handled by
        the inner ``run``. Likewise an inner exit whose name only the outer
        table declares escapes to the outer ``run``.
    """

    table = ChannelTable.of(channels)
    controls = make_controls(table, strict=resolve_strict(strict))
    try:
        result = operation(controls)
    except Carrier as carrier:
        if carrier.key not in table:
            _pass_through(carrier)
            raise
        key, args = carrier.key, carrier.arguments
    else:
        if is_pending(result):
            return _resolve(result, table)
        return result
    return _dispatch(table, key, args)


__all__ = ["run"]
