"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.job_requests.dependencies import get_job_request_repository
from app.job_requests.service import JobRequestRepository
from app.kv_store.dependencies import get_kv_store
from app.kv_store.store import InMemoryKVStore
from app.main import app


class FakeClock:
    """Deterministic clock. Advances by ``step`` after every reading."""

    def __init__(self, start=None, step=timedelta(0)):
        self.current = start or datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current = self.current + self.step
        return value

    def advance(self, **kwargs):
        self.current = self.current + timedelta(**kwargs)


@pytest.fixture
def store():
    return InMemoryKVStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repo(store, clock):
    return JobRequestRepository(store, clock=clock, default_shift="gündüz")


@pytest.fixture
def make_client():
    """Build a TestClient wired to the given store (no MongoDB, no lifespan)."""

    def _make(store, clock=None, raise_server_exceptions=True):
        repository = JobRequestRepository(
            store,
            clock=clock or FakeClock(step=timedelta(seconds=1)),
            default_shift="gündüz",
        )
        app.dependency_overrides[get_kv_store] = lambda: store
        app.dependency_overrides[get_job_request_repository] = lambda: repository
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client, store):
    return make_client(store)


@pytest.fixture
def admin_headers():
    return {"Admin-Token": "admin_1705312800000"}
