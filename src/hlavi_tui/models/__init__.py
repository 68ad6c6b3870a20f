"""Data models."""

from .board import BoardIndex, project_column
from .enums import STATUS_ORDER, Status
from .item import AcceptanceCriterion, Item
from .selection import Selection

__all__ = [
    "STATUS_ORDER",
    "AcceptanceCriterion",
    "BoardIndex",
    "Item",
    "Selection",
    "Status",
    "project_column",
]
