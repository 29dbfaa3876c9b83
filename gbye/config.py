"""Environment-driven settings.

``GBYE_DEBUG``   turn on loguru output for the ``gbye`` package.
``GBYE_STRICT``  check exit/trap arguments against handler signatures by default.
"""

from __future__ import annotations

import os

from loguru import logger

DEBUG_ENV = "GBYE_DEBUG"
STRICT_ENV = "GBYE_STRICT"

_TRUTHY = ("1", "true", "yes")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in _TRUTHY


def debug_enabled() -> bool:
    return _env_flag(DEBUG_ENV)


def strict_enabled() -> bool:
    return _env_flag(STRICT_ENV)


def resolve_strict(strict: bool | None) -> bool:
    """Explicit argument wins; otherwise fall back to ``GBYE_STRICT``."""
    if strict is None:
        return strict_enabled()
    return strict


def configure_logging() -> None:
    """Silence the package's loguru records unless ``GBYE_DEBUG`` is set."""
    if debug_enabled():
        logger.enable("gbye")
    else:
        logger.disable("gbye")


__all__ = [
    "DEBUG_ENV",
    "STRICT_ENV",
    "configure_logging",
    "debug_enabled",
    "resolve_strict",
    "strict_enabled",
]
