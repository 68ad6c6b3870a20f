"""Focus and selection state for board navigation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .enums import Status


class Selection(BaseModel):
    """Focused column plus cursor within that column.

    Immutable; every transition returns a new Selection so the column and
    index always change together.
    """

    column: Status = Status.OPEN
    index: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    def left(self) -> Selection:
        """Focus the previous column and reset the cursor."""
        return Selection(column=self.column.prev(), index=0)

    def right(self) -> Selection:
        """Focus the next column and reset the cursor."""
        return Selection(column=self.column.next(), index=0)

    def down(self, count: int) -> Selection:
        """Move the cursor down within a column of `count` items."""
        if count <= 0:
            return self.model_copy(update={"index": 0})
        return self.model_copy(update={"index": min(self.index + 1, count - 1)})

    def up(self) -> Selection:
        """Move the cursor up, stopping at the first item."""
        return self.model_copy(update={"index": max(self.index - 1, 0)})

    def clamp(self, count: int) -> Selection:
        """Pull the cursor back inside a column of `count` items."""
        if count <= 0:
            index = 0
        else:
            index = min(self.index, count - 1)
        if index == self.index:
            return self
        return self.model_copy(update={"index": index})
