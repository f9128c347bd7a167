"""Shared fixtures: an in-memory Redis injected into the store module."""

import pytest
from fakeredis import FakeAsyncRedis, FakeServer
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.stores import redis as redis_store


@pytest.fixture
async def fake_redis(monkeypatch: pytest.MonkeyPatch):
    """Fresh FakeAsyncRedis per test, used by every service via get_redis()."""
    client = FakeAsyncRedis(server=FakeServer(), decode_responses=True)
    monkeypatch.setattr(redis_store, "_redis", client)
    yield client
    await client.aclose()


@pytest.fixture
async def client(fake_redis: FakeAsyncRedis):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
