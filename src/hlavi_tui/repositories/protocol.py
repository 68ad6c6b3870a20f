"""Repository protocol for item storage backends."""

from typing import Protocol

from ..models import BoardIndex, Item


class ItemStoreProtocol(Protocol):
    """Interface the board view consumes to load items.

    The store is read-only from the viewer's point of view: it resolves
    the board index and individual item records, nothing more.
    """

    def load_board_index(self) -> BoardIndex:
        """Load the board index.

        Returns:
            The index of item identifiers, in load order.

        Raises:
            BoardIndexError: If the index cannot be read or parsed.
        """
        ...

    def load_item(self, item_id: str) -> Item:
        """Load a single item record.

        Args:
            item_id: Identifier referenced from the board index (e.g. "HLA1")

        Returns:
            The parsed item.

        Raises:
            ItemLoadError: If the record is missing or malformed.
        """
        ...
