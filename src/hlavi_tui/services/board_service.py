"""Service holding the board view state."""

from __future__ import annotations

import logging

from ..models import Item, Selection, Status, project_column
from ..repositories import ItemLoadError, ItemStoreProtocol

logger = logging.getLogger(__name__)


class BoardService:
    """Board view state: loaded items plus focus and selection.

    Items are loaded on construction and on reload(). Focus and selection
    only change through the move_* methods, which keep the selected index
    inside the focused column.
    """

    def __init__(self, store: ItemStoreProtocol) -> None:
        """
        Load the board.

        Raises:
            StorageError: If the board index cannot be loaded.
        """
        self._store = store
        self._snapshot: tuple[Item, ...] = ()
        self._selection = Selection()
        self._load()

    @property
    def snapshot(self) -> tuple[Item, ...]:
        """All loaded items, in board index order."""
        return self._snapshot

    @property
    def focused_column(self) -> Status:
        """Status of the column under focus."""
        return self._selection.column

    @property
    def selected_index(self) -> int:
        """Cursor position within the focused column."""
        return self._selection.index

    @property
    def selected_item(self) -> Item | None:
        """Item under the cursor, or None if the focused column is empty."""
        items = self.items_in_column(self.focused_column)
        if 0 <= self.selected_index < len(items):
            return items[self.selected_index]
        return None

    def items_in_column(self, status: Status) -> list[Item]:
        """Get the items shown in a column."""
        return project_column(self._snapshot, status)

    def reload(self) -> None:
        """
        Reload all items from storage.

        The snapshot is only replaced once the index has loaded, so a
        failed reload leaves the current board in place. Focus is kept and
        the cursor is clamped to the reloaded column.

        Raises:
            StorageError: If the board index cannot be loaded.
        """
        logger.info("Reloading board")
        self._load()
        self._selection = self._selection.clamp(self._focused_count())

    def move_left(self) -> None:
        """Focus the previous column."""
        self._selection = self._selection.left()

    def move_right(self) -> None:
        """Focus the next column."""
        self._selection = self._selection.right()

    def move_down(self) -> None:
        """Select the next item in the focused column."""
        self._selection = self._selection.down(self._focused_count())

    def move_up(self) -> None:
        """Select the previous item in the focused column."""
        self._selection = self._selection.up()

    def _focused_count(self) -> int:
        return len(self.items_in_column(self.focused_column))

    def _load(self) -> None:
        """Load the index, then every item it references."""
        index = self._store.load_board_index()

        items: list[Item] = []
        skipped = 0
        for item_id in index.item_ids:
            try:
                items.append(self._store.load_item(item_id))
            except ItemLoadError as e:
                # Unreadable records are dropped; the rest of the board still shows.
                skipped += 1
                logger.debug("Skipping item %s: %s", item_id, e)

        self._snapshot = tuple(items)
        logger.info(
            "Board %s loaded: %d items, %d skipped",
            index.name or "(unnamed)", len(items), skipped,
        )
