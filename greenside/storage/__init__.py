from .store import (
    JsonFileStore,
    PersistenceStore,
    StoreError,
    get_store,
    require_user,
)

__all__ = [
    "JsonFileStore",
    "PersistenceStore",
    "StoreError",
    "get_store",
    "require_user",
]
