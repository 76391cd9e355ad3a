"""Per-user document storage for clubs, shots and scorecards."""

from __future__ import annotations

import json
import logging
import os
import re
import threading
from functools import lru_cache
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any, Dict, List, Literal, Protocol

from greenside.config import get_settings
from greenside.errors import ExternalServiceFailure, InvalidInput, NotAuthenticated

logger = logging.getLogger(__name__)

Collection = Literal["clubs", "shots", "scorecards"]
COLLECTIONS: tuple[str, ...] = ("clubs", "shots", "scorecards")

SAFE_USER_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class StoreError(ExternalServiceFailure):
    """Reading or writing the document store failed."""


class PersistenceStore(Protocol):
    def list(self, user_id: str, collection: Collection) -> List[Dict[str, Any]]: ...

    def upsert(
        self,
        user_id: str,
        collection: Collection,
        item_id: str,
        payload: Dict[str, Any],
    ) -> None: ...

    def delete(self, user_id: str, collection: Collection, item_id: str) -> bool: ...


def require_user(user_id: str | None) -> str:
    """Return a filesystem-safe user id or refuse the operation."""

    if not user_id or not user_id.strip():
        raise NotAuthenticated("You need to be signed in to save data.")
    user_id = user_id.strip()
    if not SAFE_USER_ID_RE.match(user_id):
        raise InvalidInput(f"Invalid user id: {user_id!r}")
    return user_id


class JsonFileStore:
    """One JSON document per user and collection, keyed by item id."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        base = Path(base_dir or get_settings().data_dir).expanduser()
        self._base_dir = base.resolve()
        self._lock = threading.Lock()

    def _path(self, user_id: str, collection: str) -> Path:
        if collection not in COLLECTIONS:
            raise InvalidInput(f"Unknown collection: {collection!r}")
        return self._base_dir / require_user(user_id) / f"{collection}.json"

    def _read(self, path: Path) -> Dict[str, Dict[str, Any]]:
        if not path.exists():
            return {}
        try:
            payload = json.loads(path.read_text())
        except (json.JSONDecodeError, OSError) as exc:
            raise StoreError(f"Failed to read {path.name}: {exc}") from exc
        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, dict):
            raise StoreError(f"Malformed document store file: {path.name}")
        return items

    def _write(self, path: Path, items: Dict[str, Dict[str, Any]]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with NamedTemporaryFile("w", dir=path.parent, delete=False) as tmp:
                json.dump({"items": items}, tmp, indent=2, sort_keys=True, default=str)
                tmp.flush()
                os.fsync(tmp.fileno())
                temp_name = tmp.name
            os.replace(temp_name, path)
        except OSError as exc:
            raise StoreError(f"Failed to write {path.name}: {exc}") from exc

    def list(self, user_id: str, collection: Collection) -> List[Dict[str, Any]]:
        path = self._path(user_id, collection)
        with self._lock:
            items = self._read(path)
        return [dict(item, id=item_id) for item_id, item in items.items()]

    def upsert(
        self,
        user_id: str,
        collection: Collection,
        item_id: str,
        payload: Dict[str, Any],
    ) -> None:
        path = self._path(user_id, collection)
        with self._lock:
            items = self._read(path)
            items[item_id] = {k: v for k, v in payload.items() if k != "id"}
            self._write(path, items)
        logger.debug(
            "store_upsert",
            extra={"collection": collection, "item_id": item_id},
        )

    def delete(self, user_id: str, collection: Collection, item_id: str) -> bool:
        path = self._path(user_id, collection)
        with self._lock:
            items = self._read(path)
            if item_id not in items:
                return False
            del items[item_id]
            self._write(path, items)
        return True


@lru_cache(maxsize=1)
def get_store() -> JsonFileStore:
    return JsonFileStore()


__all__ = [
    "COLLECTIONS",
    "Collection",
    "JsonFileStore",
    "PersistenceStore",
    "StoreError",
    "get_store",
    "require_user",
]
