"""Board index model and column projection."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, field_validator

from .enums import Status
from .item import Item


class BoardIndex(BaseModel):
    """Contents of board.yaml: which items exist, in load order."""

    name: str | None = None
    tasks: dict[str, str] = Field(default_factory=dict)

    @field_validator("tasks", mode="before")
    @classmethod
    def normalize_tasks(cls, v: object) -> object:
        """Treat a bare `tasks:` as empty and scalar keys/ids as strings."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v  # let pydantic reject it
        return {_scalar_to_str(k): _scalar_to_str(val) for k, val in v.items()}

    @property
    def item_ids(self) -> list[str]:
        """Referenced item identifiers, in index order."""
        return list(self.tasks.values())


def _scalar_to_str(value: object) -> object:
    """Numbers become their string form; anything else is left for validation."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def project_column(snapshot: Iterable[Item], status: Status) -> list[Item]:
    """Items with the given status, in snapshot order.

    Pure: no sorting, no deduplication, no caching.
    """
    return [item for item in snapshot if item.status == status]
