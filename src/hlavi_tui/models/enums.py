"""Enums for item status."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Status of an item, in column order."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    DONE = "done"

    @property
    def label(self) -> str:
        """Column heading, e.g. "IN PROGRESS"."""
        return self.value.replace("_", " ").upper()

    @property
    def position(self) -> int:
        """Zero-based column position."""
        return STATUS_ORDER.index(self)

    def next(self) -> Status:
        """Next column to the right; Done stays Done."""
        idx = min(self.position + 1, len(STATUS_ORDER) - 1)
        return STATUS_ORDER[idx]

    def prev(self) -> Status:
        """Previous column to the left; Open stays Open."""
        idx = max(self.position - 1, 0)
        return STATUS_ORDER[idx]

    @classmethod
    def parse(cls, value: str | Status) -> Status:
        """Parse a status ignoring case and separators.

        Accepts "open", "In Progress", "in-progress", "InProgress", etc.

        Raises:
            ValueError: If the value is not one of the four statuses.
        """
        if isinstance(value, Status):
            return value
        key = "".join(ch for ch in str(value).lower() if ch.isalnum())
        for status in cls:
            if status.value.replace("_", "") == key:
                return status
        raise ValueError(f"Unknown status: {value!r}")


STATUS_ORDER: tuple[Status, ...] = (
    Status.OPEN,
    Status.IN_PROGRESS,
    Status.REVIEW,
    Status.DONE,
)
