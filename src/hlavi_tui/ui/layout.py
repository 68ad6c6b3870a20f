"""Pure projection of board state into a drawable layout.

render_board() never touches storage and never changes the state it is
given; the Textual widgets only draw what it returns.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Protocol

from pydantic import BaseModel

from ..models import STATUS_ORDER, Item, Status

HEADER_TEXT = "Hlavi TUI - Kanban Board"
HELP_TEXT = "h/l: ← →  j/k: ↑ ↓  r: reload  q/ESC/Ctrl+C: quit"


class BoardViewState(Protocol):
    """What the renderer reads from the board."""

    @property
    def focused_column(self) -> Status: ...

    @property
    def selected_index(self) -> int: ...

    def items_in_column(self, status: Status) -> list[Item]: ...


class CardView(BaseModel):
    """One item as drawn in a column."""

    item_id: str
    title: str
    progress: str  # "done/total"
    selected: bool = False

    model_config = {"frozen": True}


class ColumnPanel(BaseModel):
    """One status column."""

    status: Status
    title: str  # e.g. "OPEN (2)"
    focused: bool
    share: Fraction  # fraction of the board width
    cards: tuple[CardView, ...] = ()

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class BoardLayout(BaseModel):
    """Everything needed to draw one frame."""

    header: str = HEADER_TEXT
    help_text: str = HELP_TEXT
    panels: tuple[ColumnPanel, ...]

    model_config = {"frozen": True}


def render_board(state: BoardViewState) -> BoardLayout:
    """Build the layout for the current state."""
    share = Fraction(1, len(STATUS_ORDER))
    panels = tuple(
        _render_column(state, status, share) for status in STATUS_ORDER
    )
    return BoardLayout(panels=panels)


def _render_column(state: BoardViewState, status: Status, share: Fraction) -> ColumnPanel:
    items = state.items_in_column(status)
    focused = status == state.focused_column
    # An index past the end (e.g. after items disappeared) selects nothing.
    selected = state.selected_index if focused else -1

    cards = tuple(
        CardView(
            item_id=item.id,
            title=item.title,
            progress=item.progress,
            selected=(i == selected),
        )
        for i, item in enumerate(items)
    )
    return ColumnPanel(
        status=status,
        title=f"{status.label} ({len(items)})",
        focused=focused,
        share=share,
        cards=cards,
    )
