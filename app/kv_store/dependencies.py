"""Store construction and the FastAPI dependency that hands it to routes."""

from fastapi import Request

from app.core.config import get_settings
from app.core.database import Database
from app.core.exceptions import StoreException
from app.kv_store.store import InMemoryKVStore, KVStore, MongoKVStore


async def open_kv_store() -> KVStore:
    """Build the store selected by KV_BACKEND. Connects to MongoDB when needed."""
    settings = get_settings()
    backend = (settings.KV_BACKEND or "").strip().lower()

    if backend == "memory":
        return InMemoryKVStore()
    if backend == "mongo":
        await Database.connect()
        return MongoKVStore(Database.get_collection(settings.KV_COLLECTION))
    raise ValueError(f"Unsupported KV_BACKEND: {settings.KV_BACKEND!r}")


async def close_kv_store(store: KVStore) -> None:
    if isinstance(store, MongoKVStore):
        await Database.disconnect()


def get_kv_store(request: Request) -> KVStore:
    """Store opened by the application lifespan."""
    store = getattr(request.app.state, "kv_store", None)
    if store is None:
        raise StoreException("Key-value store is not initialised")
    return store
