"""Storage errors raised by item stores."""

from __future__ import annotations

from pathlib import Path


class StorageError(Exception):
    """Base exception for storage failures."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class BoardIndexError(StorageError):
    """The board index could not be read or parsed."""

    pass


class ItemLoadError(StorageError):
    """A single item record is missing or malformed."""

    def __init__(self, item_id: str, message: str, path: Path | None = None) -> None:
        super().__init__(message, path)
        self.item_id = item_id
