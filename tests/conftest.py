"""Pytest configuration and shared fixtures for mux-data tests."""

import pytest

from mux_data import Data
from mux_data.testing import StubRouter


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Mux environment variables before each test.

    This prevents a developer's real credentials leaking into credential
    resolution tests.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("MUX_"):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def router():
    """Empty stub route table."""
    return StubRouter()


@pytest.fixture
async def data(router):
    """Data client wired to the stub router."""
    client = Data("fancy-new-id", "fancy-new-secret", transport=router.transport)
    yield client
    await client.aclose()
