from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest


@pytest.fixture(autouse=True)
def app_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Clears the log-level override so every test starts from the default.
    Automatically applied to all tests.
    """
    monkeypatch.delenv("PUNCHCLOCK_LOG_LEVEL", raising=False)


@pytest.fixture
def freeze_now(monkeypatch: pytest.MonkeyPatch) -> Callable[[datetime], None]:
    """
    Pin the local clock read by punchclock.utils.time to a fixed instant.

    Usage: freeze_now(datetime(2024, 3, 15, 9, 30, 30))
    """

    def _freeze(value: datetime) -> None:
        monkeypatch.setattr("punchclock.utils.time.local_now", lambda: value)

    return _freeze
