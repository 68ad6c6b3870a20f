"""hlavi-tui Textual application."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from .cli import output
from .config import Settings
from .repositories import FilesystemItemStore, StorageError
from .services import BoardService
from .ui.commands import KEYMAP, Command, apply_command
from .ui.screens.board import BoardScreen

logger = logging.getLogger(__name__)


class HlaviApp(App):
    """hlavi-tui - Terminal Kanban viewer."""

    TITLE = "hlavi-tui"

    # Priority so the board sees keys before Textual's own defaults (e.g. ctrl+c)
    BINDINGS = [
        Binding(key, f"command('{command.value}')", command.value, show=False, priority=True)
        for key, command in KEYMAP.items()
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, board_service: BoardService) -> None:
        super().__init__()
        self.board_service = board_service

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")

    def action_command(self, name: str) -> None:
        """Apply one command, then redraw."""
        command = Command(name)
        try:
            keep_running = apply_command(self.board_service, command)
        except StorageError as e:
            logger.error("Reload failed: %s", e)
            self.exit(return_code=1, message=f"Error: {e}")
            return

        if not keep_running:
            self.exit()
            return

        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()


def run(settings: Settings | None = None) -> int:
    """Load the board and run the application.

    Returns:
        Process exit code.
    """
    settings = settings or Settings()
    store = FilesystemItemStore(settings.board_root)

    try:
        board_service = BoardService(store)
    except StorageError as e:
        logger.error("Cannot load board: %s", e)
        output.error(f"Error: {e}")
        return 1

    app = HlaviApp(board_service)
    app.run()
    return app.return_code or 0
