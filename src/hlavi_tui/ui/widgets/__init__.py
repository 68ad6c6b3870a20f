"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .item_card import ItemCard

__all__ = [
    "EmptyColumnMessage",
    "ItemCard",
    "KanbanColumn",
]
