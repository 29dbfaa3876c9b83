"""Shared fixtures for gbye tests."""

from __future__ import annotations

import pytest
from loguru import logger

from gbye.config import DEBUG_ENV, STRICT_ENV, configure_logging


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep GBYE_* flags from the surrounding shell out of the tests."""
    monkeypatch.delenv(DEBUG_ENV, raising=False)
    monkeypatch.delenv(STRICT_ENV, raising=False)
    yield
    configure_logging()


@pytest.fixture
def gbye_log():
    """Collect the messages gbye logs while the fixture is active."""
    messages: list[str] = []
    logger.enable("gbye")
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
    logger.disable("gbye")
