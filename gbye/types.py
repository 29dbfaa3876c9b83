"""Type vocabulary for operations, controls and handlers.

Python typing cannot bind a channel name to its handler's parameter list at
the call site, so these describe the calling convention only. The table-level
checks live in :class:`gbye.channels.ChannelTable`.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Callable, NoReturn, Protocol, TypeVar

if TYPE_CHECKING:
    from gbye.controls import Controls

T = TypeVar("T")

Handler = Callable[..., Any]
"""A channel handler; its return value becomes the result of ``run``."""

Operation = Callable[["Controls"], T]
"""The function ``run`` drives. May return a plain value or an awaitable."""


class Exit(Protocol):
    def __call__(self, name: Hashable, /, *args: Any) -> NoReturn: ...


class Trap(Protocol):
    """``trap(name, *lead, sub)``: the last positional argument is the sub-computation."""

    def __call__(self, name: Hashable, /, *args: Any) -> Any: ...


class Gbye(Protocol):
    """The single control handed to operations of :func:`gbye.single.run_single`."""

    def __call__(self, val: Any, err: Any = None, /) -> NoReturn: ...


__all__ = ["Exit", "Gbye", "Handler", "Operation", "T", "Trap"]
