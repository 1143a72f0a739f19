from __future__ import annotations

import os
import time
from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

# Optional local overrides (e.g. BOOKCASE_LOG_LEVEL) live in test/.env
load_dotenv(Path(__file__).resolve().parent / ".env", override=False)

# Every test runs against SQLite; set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

# Hosts served in-process: ASGITransport, TestClient and MockTransport
LOCAL_TEST_HOSTS = ("mock", "testserver", "localhost", "127.0.0.1")


@pytest.fixture
def tick():
    """Return a function that waits until the catalog clock has moved on.

    Updates stamp `updated` from the same clock, so after a tick an update is
    guaranteed to produce a strictly later timestamp.
    """
    from bookcase.core.database.base import utc_now

    def _tick() -> None:
        start = utc_now()
        while utc_now() <= start:
            time.sleep(0.001)

    return _tick


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Fail any test that would reach a real network host."""
    real_sync = httpx._client.Client.request
    real_async = httpx._client.AsyncClient.request

    def _target(client, url) -> httpx.URL:
        target = client._merge_url(url)
        if target.host not in LOCAL_TEST_HOSTS:
            raise RuntimeError(f"External HTTP blocked by global offline guard: {target}")
        return target

    def guarded_sync(self, method, url, *args, **kwargs):
        _target(self, url)
        return real_sync(self, method, url, *args, **kwargs)

    async def guarded_async(self, method, url, *args, **kwargs):
        _target(self, url)
        return await real_async(self, method, url, *args, **kwargs)

    monkeypatch.setattr(httpx._client.Client, "request", guarded_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", guarded_async, raising=True)
