"""Channel tables: the read-only name -> handler mapping bound to one ``run``."""

from __future__ import annotations

import inspect
from collections.abc import Hashable, Iterator, Mapping
from typing import Any

from frozendict import frozendict

from gbye.errors import ChannelSignatureError, ChannelTableError
from gbye.types import Handler

_FAULT_SLOT = object()


def _safe_signature(target: Any) -> inspect.Signature | None:
    try:
        return inspect.signature(target)
    except (TypeError, ValueError):
        return None


class ChannelTable(Mapping[Hashable, Handler]):
    """Immutable snapshot of the channels an operation may exit through.

    Handlers are checked once, when the table is built: each must be callable.
    Their signatures are captured at the same time so strict mode can compare
    exit/trap arguments against them without re-inspecting on every call.
    Handlers whose signature cannot be inspected (some builtins) are accepted
    and treated as taking anything.
    """

    __slots__ = ("_handlers", "_signatures")

    def __init__(self, handlers: Mapping[Hashable, Handler] | None = None) -> None:
        snapshot: frozendict[Hashable, Handler] = frozendict(handlers or {})
        for key, handler in snapshot.items():
            if not callable(handler):
                raise ChannelTableError(key, handler)
        self._handlers = snapshot
        self._signatures: frozendict[Hashable, inspect.Signature | None] = frozendict(
            (key, _safe_signature(handler)) for key, handler in snapshot.items()
        )

    @classmethod
    def of(cls, channels: Mapping[Hashable, Handler] | None) -> ChannelTable:
        if isinstance(channels, cls):
            return channels
        return cls(channels)

    def __getitem__(self, key: Hashable) -> Handler:
        return self._handlers[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"ChannelTable({dict(self._handlers)!r})"

    def signature(self, key: Hashable) -> inspect.Signature | None:
        return self._signatures[key]

    def accepts(self, key: Hashable, args: tuple[Any, ...]) -> bool:
        """Whether ``key`` names a channel whose handler can be called with ``args``."""
        if key not in self._handlers:
            return False
        signature = self._signatures[key]
        if signature is None:
            return True
        try:
            signature.bind(*args)
        except TypeError:
            return False
        return True

    def accepts_fault(self, key: Hashable, n_lead: int = 0) -> bool:
        """Whether ``key`` can be a trap target after ``n_lead`` leading arguments."""
        return self.accepts(key, (_FAULT_SLOT,) * (n_lead + 1))

    def check_exit(self, key: Hashable, args: tuple[Any, ...]) -> None:
        if key not in self._handlers:
            raise ChannelSignatureError(key, f"no such channel; declared: {sorted(map(repr, self))}")
        if not self.accepts(key, args):
            raise ChannelSignatureError(
                key, f"arguments {args!r} do not match handler signature {self._signatures[key]}"
            )

    def check_trap(self, key: Hashable, lead: tuple[Any, ...]) -> None:
        if key not in self._handlers:
            raise ChannelSignatureError(key, f"no such channel; declared: {sorted(map(repr, self))}")
        if not self.accepts(key, (*lead, _FAULT_SLOT)):
            raise ChannelSignatureError(
                key,
                f"handler signature {self._signatures[key]} cannot take leading arguments "
                f"{lead!r} followed by the trapped fault",
            )


__all__ = ["ChannelTable"]
