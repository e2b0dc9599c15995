"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client():
    """Create test client.

    ASGITransport does not run the lifespan, so Postgres/Redis stay
    uninitialized and the cache helpers fall through to in-memory data.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
