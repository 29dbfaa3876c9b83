"""
gbye - named, typed exits for Python operations.

An operation declares every way it can give up as a *channel*: a name mapped
to a handler. Inside the operation ``exit`` leaves through a channel and
``trap`` turns faults from code you don't control into a channel exit.
Everything else raised is treated as a bug and propagates untouched.

Example:
    >>> from gbye import run
    >>> run(
    ...     lambda ctl: ctl.exit("fail", "bad"),
    ...     {"fail": lambda reason: "handled:" + reason},
    ... )
    'handled:bad'

Async operations work the same way; ``run`` then returns a coroutine.
"""

from gbye.channels import ChannelTable
from gbye.config import configure_logging
from gbye.controls import Controls
from gbye.errors import ChannelSignatureError, ChannelTableError, GbyeError
from gbye.run import run
from gbye.single import run_single, trap_single
from gbye.types import Exit, Gbye, Handler, Operation, Trap

configure_logging()

__all__ = [
    # Runner
    "run",
    "Controls",
    "ChannelTable",
    # Single-handler form
    "run_single",
    "trap_single",
    # Types
    "Exit",
    "Trap",
    "Gbye",
    "Handler",
    "Operation",
    # Errors
    "GbyeError",
    "ChannelTableError",
    "ChannelSignatureError",
]
