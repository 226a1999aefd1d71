"""
Tests for the job request repository.
"""

from datetime import datetime, timezone

import pytest

from app.core.exceptions import NotFoundException, StoreException, ValidationException
from app.job_requests.models import VALID_STATUSES
from app.job_requests.service import JobRequestRepository, parse_timestamp
from app.kv_store.store import InMemoryKVStore


class CountingStore(InMemoryKVStore):
    """In-memory store that counts writes."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.writes = 0

    async def set(self, key, value):
        self.writes += 1
        await super().set(key, value)


class TestCreate:
    """Test job request creation."""

    @pytest.mark.asyncio
    async def test_create_fills_defaults(self, repo):
        job = await repo.create({"company_id": "c1", "title": "Cleaner"})

        assert job["status"] == "pending"
        assert job["salary"] == 0
        assert job["shift"] == "gündüz"
        assert job["description"] == ""
        assert job["location"] == ""
        assert job["date"] == "2024-01-15"
        assert job["created_at"] == "2024-01-15T10:00:00.000Z"
        assert job["updated_at"] == job["created_at"]
        assert job["id"].startswith("job-")

    @pytest.mark.asyncio
    async def test_create_keeps_supplied_fields(self, repo):
        job = await repo.create({
            "company_id": "c1",
            "title": "Waiter",
            "date": "2024-02-01",
            "shift": "gece",
            "description": "Evening service",
            "salary": 750,
            "location": "Istanbul",
        })

        assert job["date"] == "2024-02-01"
        assert job["shift"] == "gece"
        assert job["description"] == "Evening service"
        assert job["salary"] == 750
        assert job["location"] == "Istanbul"

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, repo):
        ids = {(await repo.create({"company_id": "c1", "title": f"Job {i}"}))["id"] for i in range(25)}
        assert len(ids) == 25

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"title": "Cleaner"},
        {"company_id": "c1"},
        {"company_id": "", "title": "Cleaner"},
        {"company_id": "c1", "title": "   "},
        {"company_id": "c1", "title": None},
        {},
    ])
    async def test_missing_required_fields_rejected(self, repo, store, payload):
        with pytest.raises(ValidationException) as exc_info:
            await repo.create(payload)

        assert exc_info.value.status_code == 400
        assert exc_info.value.received == payload
        assert len(store) == 0
        assert await repo.list_all() == []

    @pytest.mark.asyncio
    async def test_create_then_get_roundtrip(self, repo):
        job = await repo.create({"company_id": "c1", "title": "Cleaner"})
        assert await repo.get(job["id"]) == job

    @pytest.mark.asyncio
    async def test_id_collision_draws_new_id(self, clock):
        store = InMemoryKVStore()
        ids = iter(["job-1", "job-1", "job-2"])
        repo = JobRequestRepository(store, id_factory=lambda: next(ids), clock=clock)

        first = await repo.create({"company_id": "c1", "title": "A"})
        second = await repo.create({"company_id": "c1", "title": "B"})

        assert first["id"] == "job-1"
        assert second["id"] == "job-2"
        assert (await repo.get("job-1"))["title"] == "A"

    @pytest.mark.asyncio
    async def test_id_allocation_gives_up(self, clock):
        store = InMemoryKVStore({"job_requests:job-1": {"id": "job-1"}})
        repo = JobRequestRepository(store, id_factory=lambda: "job-1", clock=clock)

        with pytest.raises(StoreException):
            await repo.create({"company_id": "c1", "title": "A"})


class TestListing:
    """Test company-scoped and global listing."""

    @pytest.mark.asyncio
    async def test_list_by_company_returns_exact_subset(self, repo):
        created = []
        for company in ["c1", "c2", "c1", "c3", "c1"]:
            created.append(await repo.create({"company_id": company, "title": "Job"}))

        for company in ["c1", "c2", "c3"]:
            expected = {j["id"] for j in created if j["company_id"] == company}
            got = await repo.list_by_company(company)
            assert {j["id"] for j in got} == expected

    @pytest.mark.asyncio
    async def test_list_by_unknown_company_is_empty(self, repo):
        await repo.create({"company_id": "c1", "title": "Cleaner"})
        assert await repo.list_by_company("nonexistent") == []

    @pytest.mark.asyncio
    async def test_list_all_newest_first(self, repo, clock):
        created = []
        for i in range(5):
            created.append(await repo.create({"company_id": "c1", "title": f"Job {i}"}))
            clock.advance(minutes=1)

        jobs = await repo.list_all()

        assert [j["id"] for j in jobs] == [j["id"] for j in reversed(created)]
        stamps = [parse_timestamp(j["created_at"]) for j in jobs]
        assert stamps == sorted(stamps, reverse=True)

    @pytest.mark.asyncio
    async def test_list_all_ignores_other_namespaces(self, store, repo):
        await store.set("companies:c1", {"id": "c1", "created_at": "2030-01-01T00:00:00.000Z"})
        await repo.create({"company_id": "c1", "title": "Cleaner"})

        jobs = await repo.list_all()

        assert len(jobs) == 1
        assert jobs[0]["title"] == "Cleaner"

    @pytest.mark.asyncio
    async def test_unparseable_created_at_sorts_last(self, store, repo):
        await store.set("job_requests:broken", {"id": "broken", "created_at": "not a date"})
        await repo.create({"company_id": "c1", "title": "Cleaner"})

        jobs = await repo.list_all()

        assert jobs[-1]["id"] == "broken"


class TestUpdateStatus:
    """Test the status state machine."""

    @pytest.mark.asyncio
    async def test_scenario_pending_to_active(self, repo, clock):
        job = await repo.create({"company_id": "c1", "title": "Cleaner"})
        clock.advance(seconds=5)

        updated = await repo.update_status(job["id"], "active")

        assert updated["status"] == "active"
        assert parse_timestamp(updated["updated_at"]) > parse_timestamp(job["updated_at"])
        assert updated["created_at"] == job["created_at"]
        assert await repo.get(job["id"]) == updated

    @pytest.mark.asyncio
    async def test_updated_at_moves_forward_on_frozen_clock(self, repo):
        job = await repo.create({"company_id": "c1", "title": "Cleaner"})

        first = await repo.update_status(job["id"], "active")
        second = await repo.update_status(job["id"], "completed")

        assert first["updated_at"] == "2024-01-15T10:00:00.001Z"
        assert second["updated_at"] == "2024-01-15T10:00:00.002Z"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("source", VALID_STATUSES)
    @pytest.mark.parametrize("target", VALID_STATUSES)
    async def test_any_status_may_follow_any_other(self, repo, source, target):
        job = await repo.create({"company_id": "c1", "title": "Cleaner"})
        await repo.update_status(job["id"], source)

        updated = await repo.update_status(job["id"], target)

        assert updated["status"] == target

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["approved", "", None, "PENDING", 1])
    async def test_invalid_status_leaves_record_unchanged(self, repo, status):
        job = await repo.create({"company_id": "c1", "title": "Cleaner"})

        with pytest.raises(ValidationException) as exc_info:
            await repo.update_status(job["id"], status)

        assert "pending, active, rejected, completed" in exc_info.value.detail
        assert await repo.get(job["id"]) == job

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found_without_write(self, clock):
        store = CountingStore()
        repo = JobRequestRepository(store, clock=clock)

        with pytest.raises(NotFoundException):
            await repo.update_status("job-missing", "active")

        assert store.writes == 0
        assert len(store) == 0


class TestTimestamps:

    def test_parse_timestamp_handles_z_suffix(self):
        assert parse_timestamp("2024-01-15T10:00:00.000Z") == datetime(2024, 1, 15, 10, tzinfo=timezone.utc)

    def test_parse_timestamp_rejects_garbage(self):
        assert parse_timestamp("yesterday") is None
        assert parse_timestamp(None) is None
