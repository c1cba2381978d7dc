"""
Pytest configuration and fixtures for recordui backend tests.
"""

from __future__ import annotations

import os

# Set test environment variables before importing config
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from backend.main import app  # noqa: E402
from backend.services.host_bridge import host_bridge  # noqa: E402

ACCOUNT_TEXT = "Acme Corporation\n\n* Id: 001\n* Name: Acme Corporation\n* Industry: Manufacturing"
GLOBEX_TEXT = "Globex\n\n* Id: 002\n* Name: Globex\n* Phone: (555) 123-4567"


@pytest.fixture
def account_text():
    return ACCOUNT_TEXT


@pytest.fixture
def globex_text():
    return GLOBEX_TEXT


@pytest.fixture(autouse=True)
def reset_host_bridge():
    """Artifact state is per process; start every test clean."""
    host_bridge.reset()
    yield
    host_bridge.reset()


@pytest_asyncio.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
