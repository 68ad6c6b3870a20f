"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Static

from ...models import STATUS_ORDER
from ..layout import BoardLayout, render_board
from ..widgets.column import KanbanColumn


class BoardScreen(Screen):
    """Board screen: header, four columns and the key legend."""

    DEFAULT_CSS = """
    BoardScreen #board-header {
        height: 3;
        border: round white;
        color: cyan;
        text-style: bold;
        padding: 0 1;
    }

    BoardScreen #columns {
        height: 1fr;
    }

    BoardScreen #help-bar {
        height: 1;
        color: $text-muted;
    }
    """

    def compose(self) -> ComposeResult:
        """Create the board layout, one column per status."""
        yield Static("", id="board-header")
        with Horizontal(id="columns"):
            for status in STATUS_ORDER:
                yield KanbanColumn(status, id=f"column-{status.value.replace('_', '-')}")
        yield Static("", id="help-bar")

    def on_mount(self) -> None:
        """Draw the board when the screen mounts."""
        self.refresh_board()

    def refresh_board(self) -> BoardLayout:
        """Render the current board state and push it to the widgets."""
        layout = render_board(self.app.board_service)  # pyrefly: ignore[missing-attribute]

        self.query_one("#board-header", Static).update(layout.header)
        self.query_one("#help-bar", Static).update(layout.help_text)

        columns = list(self.query(KanbanColumn))
        for column, panel in zip(columns, layout.panels, strict=True):
            column.set_panel(panel)
        return layout
