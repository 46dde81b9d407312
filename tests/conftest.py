"""Global test fixtures."""

import logging
import os
from typing import Iterator

import pytest

from eventsub.domain.subscription.service.registry import SubscriptionRegistry


@pytest.fixture(autouse=True)
def _clean_eventsub_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep EVENTSUB_* variables from the host environment out of tests."""
    for name in list(os.environ):
        if name.startswith("EVENTSUB_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Restore root logger handlers and level after configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def registry() -> SubscriptionRegistry:
    """Fresh, empty registry."""
    return SubscriptionRegistry()
