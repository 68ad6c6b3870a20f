"""Kanban column widget."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widget import Widget
from textual.widgets import Static

from ...models import Status
from ..layout import ColumnPanel
from .item_card import ItemCard


class EmptyColumnMessage(Static):
    """Displayed when a column has no items."""

    pass


class KanbanColumn(Widget):
    """A single status column on the board."""

    DEFAULT_CSS = """
    KanbanColumn {
        width: 1fr;
        height: 100%;
        border: round white;
        border-title-align: left;
    }

    KanbanColumn.focused {
        border: round yellow;
    }

    KanbanColumn EmptyColumnMessage {
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, status: Status, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.status = status
        self._panel: ColumnPanel | None = None
        self.border_title = f" {status.label} (0) "

    def compose(self) -> ComposeResult:
        """Create column layout."""
        yield VerticalScroll(classes="column-content", id=f"content-{self.css_status}")

    @property
    def css_status(self) -> str:
        """CSS-safe version of the status for IDs."""
        return self.status.value.replace("_", "-")

    @property
    def panel(self) -> ColumnPanel | None:
        """The panel currently drawn."""
        return self._panel

    def set_panel(self, panel: ColumnPanel) -> None:
        """Draw a new panel for this column."""
        self._panel = panel
        self.border_title = f" {panel.title} "
        self.set_class(panel.focused, "focused")
        self.call_after_refresh(self._refresh_cards)

    async def _refresh_cards(self) -> None:
        """Rebuild the cards from the current panel."""
        if self._panel is None:
            return
        try:
            content = self.query_one(f"#content-{self.css_status}", VerticalScroll)
        except Exception as e:
            self.log.error(f"Cannot find content for {self.status.value}: {e}")
            return

        await content.remove_children()

        if not self._panel.cards:
            await content.mount(EmptyColumnMessage(f"No {self.status.label.lower()} items"))
            return

        cards = [ItemCard(card) for card in self._panel.cards]
        await content.mount_all(cards)
        for card in cards:
            if card.card.selected:
                card.scroll_visible()
