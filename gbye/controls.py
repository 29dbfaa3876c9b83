"""The ``exit`` and ``trap`` controls handed to an operation by ``run``."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, NamedTuple, NoReturn

from loguru import logger

from gbye._carrier import Carrier
from gbye._pending import guard
from gbye.channels import ChannelTable
from gbye.types import Exit, Trap


class Controls(NamedTuple):
    """Controls scoped to one ``run`` call.

    Operations may use attribute access (``ctl.exit``) or unpack the pair
    (``exit, trap = ctl``).
    """

    exit: Exit
    trap: Trap


def make_controls(table: ChannelTable, *, strict: bool = False) -> Controls:
    """Build fresh exit/trap controls bound to ``table``.

    With ``strict`` set, each call is checked against the handler signature
    captured by the table before anything is raised. Otherwise names and
    arguments are trusted as given.
    """

    def exit_(name: Hashable, /, *args: Any) -> NoReturn:
        if strict:
            table.check_exit(name, args)
        logger.debug("exit to channel {!r} with {} argument(s)", name, len(args))
        raise Carrier(name, args)

    def trap(name: Hashable, /, *args: Any) -> Any:
        if not args or not callable(args[-1]):
            raise TypeError(
                "trap() expects a channel name, optional leading arguments, "
                "and a callable sub-computation as its last argument"
            )
        lead, sub = args[:-1], args[-1]
        if strict:
            table.check_trap(name, lead)

        def on_fault(fault: Exception) -> NoReturn:
            logger.debug(
                "trap converted {} into exit to channel {!r}", type(fault).__name__, name
            )
            raise Carrier(name, (*lead, fault)) from fault

        return guard(sub, on_fault)

    return Controls(exit=exit_, trap=trap)


__all__ = ["Controls", "make_controls"]
