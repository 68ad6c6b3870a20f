"""UI components."""

from .layout import BoardLayout, CardView, ColumnPanel, render_board
from .screens.board import BoardScreen
from .widgets.column import KanbanColumn
from .widgets.item_card import ItemCard

__all__ = [
    "BoardLayout",
    "BoardScreen",
    "CardView",
    "ColumnPanel",
    "ItemCard",
    "KanbanColumn",
    "render_board",
]
