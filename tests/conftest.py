"""Shared fixtures. Puts the project root on sys.path for the flat module layout."""
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from utils import retry  # noqa: E402


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeps(monkeypatch):
    """Replaces asyncio.sleep inside the retry loop and records each delay."""
    calls = []

    async def fake_sleep(delay):
        calls.append(delay)

    monkeypatch.setattr(retry.asyncio, "sleep", fake_sleep)
    return calls
