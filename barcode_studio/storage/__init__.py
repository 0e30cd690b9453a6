"""
Key-value persistence.
"""

from barcode_studio.storage.keys import StorageKeys
from barcode_studio.storage.kv import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    StorageError,
    get_store,
)

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "StorageError",
    "get_store",
    "StorageKeys",
]
