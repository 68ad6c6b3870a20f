"""Repository layer for data access."""

from .errors import BoardIndexError, ItemLoadError, StorageError
from .filesystem import FilesystemItemStore
from .protocol import ItemStoreProtocol

__all__ = [
    "BoardIndexError",
    "FilesystemItemStore",
    "ItemLoadError",
    "ItemStoreProtocol",
    "StorageError",
]
