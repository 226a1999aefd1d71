"""
Key-value store adapters.

Records are addressed by string keys. By convention keys look like
``<namespace>:<id>``, but the store only ever looks at them for strict
prefix matching; namespacing belongs to the callers.
"""

from __future__ import annotations

import copy
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pymongo.errors import PyMongoError

from app.core.exceptions import StoreException

logger = logging.getLogger(__name__)


class KVStore(ABC):
    """Async get/set/prefix-scan contract over an external durable store.

    ``get`` returns ``None`` for an unset key. Backend failures raise
    ``StoreException`` so callers can tell "not found" from "unavailable".
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    async def get_by_prefix(self, prefix: str) -> List[Any]:
        """Every value whose key starts with ``prefix``, in store order."""

    @abstractmethod
    async def count_by_prefix(self, prefix: str) -> int:
        """Number of keys starting with ``prefix``; an empty prefix counts everything."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Remove ``key``. Returns whether it existed."""

    @abstractmethod
    async def ping(self) -> None:
        """Raise ``StoreException`` if the backend is unreachable."""


class MongoKVStore(KVStore):
    """KV store over a MongoDB collection of ``{key, value}`` documents."""

    def __init__(self, collection):
        self._collection = collection

    @staticmethod
    def _fail(op: str, key: str, exc: Exception) -> StoreException:
        logger.error(f"KV {op} failed for {key!r}: {exc}")
        return StoreException(f"Key-value store {op} failed: {exc}")

    async def get(self, key: str) -> Optional[Any]:
        try:
            doc = await self._collection.find_one({"key": key}, {"_id": 0, "value": 1})
        except PyMongoError as e:
            raise self._fail("get", key, e) from e
        if not doc:
            return None
        return doc.get("value")

    async def set(self, key: str, value: Any) -> None:
        try:
            # Single-document upsert; atomic per key in MongoDB.
            await self._collection.update_one(
                {"key": key},
                {"$set": {"key": key, "value": value}},
                upsert=True,
            )
        except PyMongoError as e:
            raise self._fail("set", key, e) from e

    async def get_by_prefix(self, prefix: str) -> List[Any]:
        query = {"key": {"$regex": f"^{re.escape(prefix)}"}}
        try:
            cursor = self._collection.find(query, {"_id": 0, "value": 1})
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise self._fail("prefix scan", prefix, e) from e
        return [doc.get("value") for doc in docs]

    async def count_by_prefix(self, prefix: str) -> int:
        query = {"key": {"$regex": f"^{re.escape(prefix)}"}} if prefix else {}
        try:
            return await self._collection.count_documents(query)
        except PyMongoError as e:
            raise self._fail("count", prefix, e) from e

    async def delete(self, key: str) -> bool:
        try:
            result = await self._collection.delete_one({"key": key})
        except PyMongoError as e:
            raise self._fail("delete", key, e) from e
        return result.deleted_count > 0

    async def ping(self) -> None:
        try:
            await self._collection.database.command("ping")
        except PyMongoError as e:
            raise self._fail("ping", "", e) from e


class InMemoryKVStore(KVStore):
    """Process-local store. Values are deep-copied on the way in and out."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = {}
        for key, value in (initial or {}).items():
            self._data[key] = copy.deepcopy(value)

    async def get(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def get_by_prefix(self, prefix: str) -> List[Any]:
        return [copy.deepcopy(v) for k, v in self._data.items() if k.startswith(prefix)]

    async def count_by_prefix(self, prefix: str) -> int:
        return sum(1 for k in self._data if k.startswith(prefix))

    async def delete(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        return True

    async def ping(self) -> None:
        return None

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> List[str]:
        return list(self._data)
