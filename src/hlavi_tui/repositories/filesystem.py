"""Filesystem-based item store."""

from __future__ import annotations

import logging
from pathlib import Path

import frontmatter
import yaml
from pydantic import ValidationError

from ..models import BoardIndex, Item
from .errors import BoardIndexError, ItemLoadError

logger = logging.getLogger(__name__)


class FilesystemItemStore:
    """
    Item store backed by a board directory.

    The board index is kept in board.yaml; each item is a markdown file
    with YAML front matter under tasks/.
    """

    BOARD_YAML = "board.yaml"
    TASKS_DIR = "tasks"

    def __init__(self, board_root: Path) -> None:
        """
        Initialize the store.

        Args:
            board_root: Path to the board directory (e.g., .hlavi/)
        """
        self.board_root = board_root

    @property
    def index_path(self) -> Path:
        """Path to the board index file."""
        return self.board_root / self.BOARD_YAML

    def get_filepath(self, item_id: str) -> Path:
        """Get the filesystem path for an item record."""
        return self.board_root / self.TASKS_DIR / f"{item_id}.md"

    def load_board_index(self) -> BoardIndex:
        """Read and validate board.yaml."""
        path = self.index_path
        try:
            with path.open() as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise BoardIndexError(f"No board found at {path}", path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise BoardIndexError(f"Cannot read {path}: {e}", path) from e
        except yaml.YAMLError as e:
            raise BoardIndexError(f"Invalid YAML in {path}: {e}", path) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise BoardIndexError(f"{path} must contain a mapping", path)

        try:
            index = BoardIndex(**data)
        except (ValidationError, TypeError) as e:
            raise BoardIndexError(f"Invalid board index in {path}: {e}", path) from e

        logger.debug("Loaded board index %s with %d entries", path, len(index.tasks))
        return index

    def load_item(self, item_id: str) -> Item:
        """Read and validate a single item file."""
        if not _is_plain_name(item_id):
            raise ItemLoadError(item_id, f"Invalid item identifier: {item_id!r}")

        path = self.get_filepath(item_id)
        try:
            post = frontmatter.load(path)
        except FileNotFoundError as e:
            raise ItemLoadError(item_id, f"Item file not found: {path}", path) from e
        except OSError as e:
            # e.g. ENAMETOOLONG for an oversized id
            raise ItemLoadError(item_id, f"Cannot read {path}: {e}", path) from e
        except (ValueError, TypeError, yaml.YAMLError) as e:
            raise ItemLoadError(item_id, f"Cannot parse {path}: {e}", path) from e

        if "title" not in post.metadata:
            raise ItemLoadError(item_id, f"Missing title in {path}", path)

        try:
            return Item.from_frontmatter(item_id, post.metadata)
        except ValidationError as e:
            raise ItemLoadError(item_id, f"Invalid item {path}: {e}", path) from e


def _is_plain_name(item_id: str) -> bool:
    """True if the identifier can't escape the tasks directory."""
    if not item_id or item_id in (".", ".."):
        return False
    return "/" not in item_id and "\\" not in item_id and "\x00" not in item_id
