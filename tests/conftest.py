"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


BASE_URL = "http://gitlab.example.com/api/v4/projects/42/"
TRIGGER_URL = "http://gitlab.example.com/api/v4/projects/42/trigger/pipeline"


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def mock_env(monkeypatch):
    """Start every test from a known environment."""
    for name in (
        "TRIGGER_TOKEN",
        "TRIGGER_URL",
        "GITLAB_PRIVATE_TOKEN",
        "POLL_INTERVAL",
        "DISCOVERY_ATTEMPTS",
        "DISCOVERY_DELAY",
        "MAX_WAIT",
        "REQUEST_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# Timing Fixtures
# ============================================================================

class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep(clock):
    """Sleep replacement that advances the fake clock instead of waiting."""
    async def _sleep(seconds):
        clock.advance(seconds)

    return AsyncMock(side_effect=_sleep)


# ============================================================================
# Client Fixtures
# ============================================================================

@pytest.fixture
def gitlab_client():
    """Create a GitLabClient bound to the test project."""
    from buildtrigger.services.gitlab.client import GitLabClient
    return GitLabClient("glpat-test", BASE_URL, timeout=5.0)


@pytest.fixture
def mock_client():
    """Create a mock GitLabClient."""
    client = MagicMock()
    client.trigger = AsyncMock(return_value="201 Created")
    client.list_builds = AsyncMock(return_value=[])
    client.get_build = AsyncMock()
    return client


@pytest.fixture
def policy():
    """Default policy: five discovery attempts, 2s apart, 10s poll interval."""
    from buildtrigger.models.policy import PollPolicy
    return PollPolicy()
