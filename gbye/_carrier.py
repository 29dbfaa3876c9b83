"""Internal sentinel raised by ``exit`` and ``trap``."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any


class Carrier(BaseException):
    """One intentional exit in flight: a channel name plus handler arguments.

    Derives from ``BaseException`` so that ``except Exception`` blocks in user
    code do not swallow it on the way up to ``run``.
    """

    __slots__ = ("key", "arguments")

    def __init__(self, key: Hashable, args: tuple[Any, ...]) -> None:
        super().__init__(key)
        self.key = key
        self.arguments = args

    def __repr__(self) -> str:
        return f"Carrier(key={self.key!r}, args={self.arguments!r})"

    def __str__(self) -> str:
        return (
            f"exit to channel {self.key!r} was not handled\n"
            "Hint: call exit/trap only inside the operation passed to the run "
            "whose channel table declares this name"
        )


__all__ = ["Carrier"]
