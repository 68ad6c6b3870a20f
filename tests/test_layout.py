"""Tests for the pure board renderer."""

from dataclasses import dataclass, field
from fractions import Fraction
from unittest.mock import MagicMock

from hlavi_tui.models import STATUS_ORDER, AcceptanceCriterion, BoardIndex, Item, Status
from hlavi_tui.services import BoardService
from hlavi_tui.ui.layout import HEADER_TEXT, HELP_TEXT, render_board


def make_item(item_id: str, status: Status = Status.OPEN, done: int = 0, total: int = 0) -> Item:
    """Helper to build an item with `done` of `total` criteria completed."""
    criteria = tuple(
        AcceptanceCriterion(description=f"ac{i}", completed=i < done) for i in range(total)
    )
    return Item(id=item_id, title=f"Title {item_id}", status=status, acceptance_criteria=criteria)


@dataclass
class FakeState:
    """Minimal state with a freely settable cursor."""

    items: list[Item] = field(default_factory=list)
    focused_column: Status = Status.OPEN
    selected_index: int = 0

    def items_in_column(self, status: Status) -> list[Item]:
        return [i for i in self.items if i.status == status]


def board_with(*items: Item) -> BoardService:
    """BoardService over an in-memory store."""
    store = MagicMock()
    store.load_board_index.return_value = BoardIndex(tasks={i.id: i.id for i in items})
    store.load_item.side_effect = {i.id: i for i in items}.__getitem__
    return BoardService(store)


class TestRenderBoardStructure:
    """Tests for the overall layout."""

    def test_four_panels_in_order(self):
        """Always four panels, Open to Done, each a quarter wide."""
        layout = render_board(FakeState())

        assert [p.status for p in layout.panels] == list(STATUS_ORDER)
        assert all(p.share == Fraction(1, 4) for p in layout.panels)

    def test_static_chrome(self):
        """Header and help legend don't depend on state."""
        empty = render_board(FakeState())
        busy = render_board(
            FakeState(items=[make_item("A")], focused_column=Status.DONE)
        )

        assert empty.header == busy.header == HEADER_TEXT
        assert empty.help_text == busy.help_text == HELP_TEXT

    def test_panel_titles_include_counts(self):
        """Titles carry the status name and item count."""
        layout = render_board(
            FakeState(
                items=[
                    make_item("A"),
                    make_item("B"),
                    make_item("C", Status.DONE),
                ]
            )
        )

        assert [p.title for p in layout.panels] == [
            "OPEN (2)",
            "IN PROGRESS (0)",
            "REVIEW (0)",
            "DONE (1)",
        ]

    def test_only_focused_panel_marked(self):
        """Exactly one panel is focused."""
        layout = render_board(FakeState(focused_column=Status.REVIEW))

        assert [p.focused for p in layout.panels] == [False, False, True, False]


class TestRenderBoardCards:
    """Tests for item cards."""

    def test_card_contents(self):
        """Cards show id, title and criteria ratio."""
        layout = render_board(FakeState(items=[make_item("HLA1", done=2, total=3)]))

        card = layout.panels[0].cards[0]
        assert card.item_id == "HLA1"
        assert card.title == "Title HLA1"
        assert card.progress == "2/3"

    def test_zero_criteria_ratio(self):
        """No criteria renders as 0/0."""
        layout = render_board(FakeState(items=[make_item("HLA1")]))

        assert layout.panels[0].cards[0].progress == "0/0"

    def test_selected_card_in_focused_column(self):
        """The card at the cursor is selected."""
        layout = render_board(
            FakeState(items=[make_item("A"), make_item("B")], selected_index=1)
        )

        assert [c.selected for c in layout.panels[0].cards] == [False, True]

    def test_no_selection_outside_focused_column(self):
        """Unfocused columns never show a selected card."""
        layout = render_board(
            FakeState(
                items=[make_item("A"), make_item("C", Status.DONE)],
                focused_column=Status.OPEN,
            )
        )

        assert not any(c.selected for c in layout.panels[3].cards)

    def test_out_of_range_cursor_selects_nothing(self):
        """A stale cursor past the end doesn't crash or select anything."""
        layout = render_board(FakeState(items=[make_item("A")], selected_index=5))

        assert len(layout.panels[0].cards) == 1
        assert not layout.panels[0].cards[0].selected

    def test_empty_focused_column(self):
        """An empty focused column just has no cards."""
        layout = render_board(FakeState(focused_column=Status.IN_PROGRESS))

        assert layout.panels[1].focused
        assert layout.panels[1].cards == ()


class TestRenderBoardService:
    """Rendering a real BoardService."""

    def test_render_does_not_change_state(self):
        """Rendering leaves focus, cursor and snapshot untouched."""
        board = board_with(make_item("A"), make_item("B"), make_item("C", Status.DONE))
        board.move_down()
        before = (board.focused_column, board.selected_index, board.snapshot)

        render_board(board)
        render_board(board)

        assert (board.focused_column, board.selected_index, board.snapshot) == before

    def test_reload_removing_selected_item(self):
        """After a reload drops the selected item, rendering still works."""
        a, b, c = make_item("A"), make_item("B"), make_item("C")
        store = MagicMock()
        store.load_board_index.return_value = BoardIndex(tasks={"A": "A", "B": "B", "C": "C"})
        store.load_item.side_effect = {"A": a, "B": b, "C": c}.__getitem__
        board = BoardService(store)
        board.move_down()
        board.move_down()

        store.load_board_index.return_value = BoardIndex(tasks={"A": "A"})
        board.reload()
        layout = render_board(board)

        cards = layout.panels[0].cards
        assert [c.item_id for c in cards] == ["A"]
        assert cards[0].selected
