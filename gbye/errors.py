from __future__ import annotations

from collections.abc import Hashable
from typing import Any


class GbyeError(Exception):
    """Base class for errors raised by gbye itself rather than by user code."""


class ChannelTableError(GbyeError, TypeError):
    """Raised when a channel table entry cannot serve as a handler."""

    def __init__(self, key: Hashable, handler: Any) -> None:
        self.key = key
        self.handler = handler
        super().__init__(
            f"Channel {key!r} is not callable: got {type(handler).__name__}\n"
            f"Hint: map each channel name to a function, e.g. `{{{key!r}: lambda reason: ...}}`"
        )


class ChannelSignatureError(GbyeError, TypeError):
    """Raised in strict mode when exit/trap arguments do not fit a channel."""

    def __init__(self, key: Hashable, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Channel {key!r} rejected the call: {reason}")


__all__ = ["ChannelSignatureError", "ChannelTableError", "GbyeError"]
