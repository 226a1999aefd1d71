from fastapi import Depends

from app.job_requests.service import JobRequestRepository
from app.kv_store.dependencies import get_kv_store
from app.kv_store.store import KVStore


def get_job_request_repository(store: KVStore = Depends(get_kv_store)) -> JobRequestRepository:
    return JobRequestRepository(store)
