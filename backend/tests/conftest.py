"""Root conftest — shared test configuration and HTTP client.

Invariants:
    - Zone and logging settings pinned before the app is imported
    - dependency_overrides cleared after every client test
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("ENABLE_TEST_ZONES", "true")
os.environ.setdefault("LOG_FORMAT", "text")

from landing_zone.main import app  # noqa: E402


@pytest.fixture
async def client():
    """FastAPI test client over ASGI, no network."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
