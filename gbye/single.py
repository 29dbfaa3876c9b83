"""Single-handler form: one ``gbye`` control and one handler per run.

This is the narrower shape of :func:`gbye.run` for operations with exactly one
way to give up. The operation receives ``gbye(val, err=None)``; calling it
abandons the operation and ``run_single`` returns ``handler(val, err)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from gbye._pending import guard
from gbye.controls import Controls
from gbye.run import run
from gbye.types import Gbye

T = TypeVar("T")

SINGLE_CHANNEL = "gbye"


def run_single(
    operation: Callable[[Gbye], T],
    handler: Callable[[Any, Any], Any],
) -> Any:
    """Execute ``operation``, routing ``gbye`` calls to ``handler``.

    ``handler`` is only called for exits taken through ``gbye``; any other
    fault propagates. If ``operation`` is asynchronous the result is a
    coroutine.
    """

    def operation_with_gbye(ctl: Controls) -> T:
        def gbye(val: Any, err: Any = None, /) -> NoReturn:
            ctl.exit(SINGLE_CHANNEL, val, err)

        return operation(gbye)

    return run(operation_with_gbye, {SINGLE_CHANNEL: handler})


def trap_single(gbye: Gbye, try_fn: Callable[[], T], val: Any) -> T:
    """Call ``try_fn``; if it raises, terminate through ``gbye(val, fault)``.

    Works the same when ``try_fn`` returns an awaitable: the returned coroutine
    forwards its value or exits on its failure.
    """

    def on_fault(fault: Exception) -> NoReturn:
        gbye(val, fault)

    return guard(try_fn, on_fault)


__all__ = ["SINGLE_CHANNEL", "run_single", "trap_single"]
