"""Job request repository.

Job requests live in the key-value store under ``job_requests:<id>``. The
repository owns identity, defaults, status validation, ownership filtering
and recency ordering; the store only sees opaque records.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from app.core.config import get_settings
from app.core.exceptions import NotFoundException, StoreException, ValidationException
from app.job_requests.models import VALID_STATUSES
from app.kv_store.store import KVStore

logger = logging.getLogger(__name__)

NAMESPACE = "job_requests:"
MAX_ID_ATTEMPTS = 5

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_job_id() -> str:
    return f"job-{uuid.uuid4().hex}"


def format_timestamp(value: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision, e.g. 2024-01-15T10:00:00.000Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _key(job_id: str) -> str:
    return f"{NAMESPACE}{job_id}"


class JobRequestRepository:
    """Create, list and transition job requests on top of a ``KVStore``."""

    def __init__(
        self,
        store: KVStore,
        *,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        default_shift: Optional[str] = None,
    ):
        self.store = store
        self._id_factory = id_factory or _new_job_id
        self._clock = clock or _now
        self.default_shift = default_shift if default_shift is not None else get_settings().DEFAULT_SHIFT

    async def _allocate_id(self) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            job_id = self._id_factory()
            if await self.store.get(_key(job_id)) is None:
                return job_id
            logger.warning(f"Job id collision on {job_id}, drawing a new one")
        raise StoreException("Could not allocate a unique job request id")

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Persist a new job request in ``pending`` state.

        Raises ValidationException (echoing ``payload``) when ``company_id``
        or ``title`` is missing or blank; nothing is written in that case.
        """
        company_id = payload.get("company_id")
        title = payload.get("title")
        if _is_blank(company_id) or _is_blank(title):
            logger.info(f"Rejected job request with missing fields: company_id={company_id!r} title={title!r}")
            raise ValidationException(
                "Missing required fields: company_id and title are required",
                received=payload,
            )

        job_id = await self._allocate_id()
        now = self._clock()
        stamp = format_timestamp(now)

        record = {
            "id": job_id,
            "company_id": company_id,
            "title": title,
            "date": payload.get("date") or now.date().isoformat(),
            "shift": payload.get("shift") or self.default_shift,
            "description": payload.get("description") or "",
            "salary": payload.get("salary") or 0,
            "location": payload.get("location") or "",
            "status": "pending",
            "created_at": stamp,
            "updated_at": stamp,
        }

        await self.store.set(_key(job_id), record)
        logger.info(f"Job request {job_id} created for company {company_id}")
        return record

    async def get(self, job_id: str) -> Optional[Dict[str, Any]]:
        return await self.store.get(_key(job_id))

    async def list_by_company(self, company_id: str) -> List[Dict[str, Any]]:
        records = await self.store.get_by_prefix(NAMESPACE)
        jobs = [r for r in records if r.get("company_id") == company_id]
        logger.info(f"Found {len(jobs)} job requests for company {company_id}")
        return jobs

    async def list_all(self) -> List[Dict[str, Any]]:
        """Every job request, most recently created first."""
        records = await self.store.get_by_prefix(NAMESPACE)
        records.sort(key=lambda r: parse_timestamp(r.get("created_at")) or _EPOCH, reverse=True)
        logger.info(f"Found {len(records)} total job requests")
        return records

    def _next_update_stamp(self, previous: Any) -> str:
        now = self._clock()
        last = parse_timestamp(previous)
        # Millisecond resolution can repeat; updated_at must still move forward.
        if last is not None and now <= last:
            now = last + timedelta(milliseconds=1)
        return format_timestamp(now)

    async def update_status(self, job_id: str, status: Any) -> Dict[str, Any]:
        """
        Move a job request to ``status``.

        Any status may follow any other. Raises ValidationException for a
        status outside VALID_STATUSES and NotFoundException for an unknown
        id; neither case writes to the store.
        """
        if status not in VALID_STATUSES:
            raise ValidationException(f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}")

        key = _key(job_id)
        existing = await self.store.get(key)
        if existing is None:
            raise NotFoundException("Job request not found")

        updated = {
            **existing,
            "status": status,
            "updated_at": self._next_update_stamp(existing.get("updated_at")),
        }
        await self.store.set(key, updated)
        logger.info(f"Job request {job_id} status {existing.get('status')} -> {status}")
        return updated
