"""Tests for key bindings and command handling."""

from unittest.mock import MagicMock

import pytest

from hlavi_tui.models import BoardIndex, Item, Status
from hlavi_tui.repositories import BoardIndexError
from hlavi_tui.services import BoardService
from hlavi_tui.ui.commands import KEYMAP, Command, apply_command


@pytest.fixture
def store() -> MagicMock:
    """Store double with two open items and one done item."""
    items = {
        "A": Item(id="A", title="a"),
        "B": Item(id="B", title="b"),
        "C": Item(id="C", title="c", status=Status.DONE),
    }
    store = MagicMock()
    store.load_board_index.return_value = BoardIndex(tasks={k: k for k in items})
    store.load_item.side_effect = items.__getitem__
    return store


@pytest.fixture
def board(store: MagicMock) -> BoardService:
    """Board loaded from the store double."""
    return BoardService(store)


class TestKeymap:
    """Tests for the key map."""

    @pytest.mark.parametrize("key", ["q", "Q", "escape", "ctrl+c"])
    def test_quit_keys(self, key: str):
        assert KEYMAP[key] is Command.QUIT

    @pytest.mark.parametrize(
        "key,command",
        [
            ("h", Command.MOVE_LEFT),
            ("left", Command.MOVE_LEFT),
            ("l", Command.MOVE_RIGHT),
            ("right", Command.MOVE_RIGHT),
            ("j", Command.MOVE_DOWN),
            ("down", Command.MOVE_DOWN),
            ("k", Command.MOVE_UP),
            ("up", Command.MOVE_UP),
            ("r", Command.RELOAD),
            ("R", Command.RELOAD),
        ],
    )
    def test_navigation_keys(self, key: str, command: Command):
        assert KEYMAP[key] is command

    def test_unbound_keys(self):
        """Other keys have no command."""
        assert "x" not in KEYMAP
        assert Command.IGNORE not in KEYMAP.values()


class TestApplyCommand:
    """Tests for apply_command."""

    def test_quit_stops(self, board: BoardService):
        assert apply_command(board, Command.QUIT) is False

    def test_ignore_changes_nothing(self, board: BoardService):
        assert apply_command(board, Command.IGNORE) is True
        assert board.focused_column == Status.OPEN
        assert board.selected_index == 0

    def test_navigation(self, board: BoardService):
        """Commands drive the board's moves."""
        apply_command(board, Command.MOVE_DOWN)
        assert board.selected_index == 1
        apply_command(board, Command.MOVE_UP)
        assert board.selected_index == 0
        apply_command(board, Command.MOVE_RIGHT)
        assert board.focused_column == Status.IN_PROGRESS
        apply_command(board, Command.MOVE_LEFT)
        assert board.focused_column == Status.OPEN

    def test_reload(self, board: BoardService, store: MagicMock):
        """Reload goes back to the store."""
        store.load_board_index.reset_mock()

        assert apply_command(board, Command.RELOAD) is True
        store.load_board_index.assert_called_once()

    def test_reload_failure_propagates(self, board: BoardService, store: MagicMock):
        """A fatal reload error reaches the caller."""
        store.load_board_index.side_effect = BoardIndexError("gone")

        with pytest.raises(BoardIndexError):
            apply_command(board, Command.RELOAD)
