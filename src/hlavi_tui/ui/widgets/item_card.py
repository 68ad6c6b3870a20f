"""Item card widget."""

from __future__ import annotations

from rich.markup import escape
from textual.widgets import Static

from ..layout import CardView


class ItemCard(Static):
    """A single item drawn inside a column."""

    DEFAULT_CSS = """
    ItemCard {
        width: 100%;
        height: auto;
        padding: 0 1;
    }

    ItemCard.selected {
        background: yellow;
        color: black;
        text-style: bold;
    }
    """

    def __init__(self, card: CardView, *args, **kwargs) -> None:
        super().__init__(self.format_card(card), *args, **kwargs)
        self.card = card
        self.set_class(card.selected, "selected")

    @staticmethod
    def format_card(card: CardView) -> str:
        """Markup for a card: "<id> <title>" then the criteria ratio."""
        return (
            f"[cyan]{escape(card.item_id)}[/] {escape(card.title)}\n"
            f"[green]  ✓ {card.progress}[/]"
        )
