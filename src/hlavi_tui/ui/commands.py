"""Key bindings and the commands they trigger."""

from __future__ import annotations

import logging
from enum import Enum

from ..services import BoardService

logger = logging.getLogger(__name__)


class Command(str, Enum):
    """Abstract commands produced from key presses."""

    QUIT = "quit"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    RELOAD = "reload"
    IGNORE = "ignore"


# Textual key names -> command; unbound keys are ignored
KEYMAP: dict[str, Command] = {
    # Quit
    "q": Command.QUIT,
    "Q": Command.QUIT,
    "escape": Command.QUIT,
    "ctrl+c": Command.QUIT,
    # Navigation - vim style
    "h": Command.MOVE_LEFT,
    "l": Command.MOVE_RIGHT,
    "j": Command.MOVE_DOWN,
    "k": Command.MOVE_UP,
    # Navigation - arrow keys
    "left": Command.MOVE_LEFT,
    "right": Command.MOVE_RIGHT,
    "down": Command.MOVE_DOWN,
    "up": Command.MOVE_UP,
    # Actions
    "r": Command.RELOAD,
    "R": Command.RELOAD,
}


def apply_command(board: BoardService, command: Command) -> bool:
    """
    Apply a command to the board.

    Returns:
        False if the command asks to quit, True otherwise.

    Raises:
        StorageError: If a reload cannot load the board index.
    """
    if command is Command.QUIT:
        return False
    if command is Command.MOVE_LEFT:
        board.move_left()
    elif command is Command.MOVE_RIGHT:
        board.move_right()
    elif command is Command.MOVE_DOWN:
        board.move_down()
    elif command is Command.MOVE_UP:
        board.move_up()
    elif command is Command.RELOAD:
        board.reload()
    selected = board.selected_item
    logger.debug(
        "%s -> %s[%d] %s",
        command.value,
        board.focused_column.value,
        board.selected_index,
        selected.id if selected else "-",
    )
    return True
