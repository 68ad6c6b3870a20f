"""Work item domain model."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .enums import Status


class AcceptanceCriterion(BaseModel):
    """A single acceptance criterion on an item."""

    description: str = ""
    completed: bool = False

    model_config = {"frozen": True}


class Item(BaseModel):
    """Represents a single work item loaded from storage.

    Items are read-only snapshots; the viewer never mutates them.
    """

    id: str = Field(..., min_length=1)  # e.g. "HLA1"
    title: str
    status: Status = Status.OPEN
    acceptance_criteria: tuple[AcceptanceCriterion, ...] = ()

    model_config = {"frozen": True}

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: object) -> Status:
        """Accept any spelling understood by Status.parse."""
        if not isinstance(v, str):
            raise ValueError(f"Status must be a string, got {type(v).__name__}")
        return Status.parse(v)

    @property
    def completed_count(self) -> int:
        """Number of acceptance criteria marked completed."""
        return sum(1 for ac in self.acceptance_criteria if ac.completed)

    @property
    def total_count(self) -> int:
        """Total number of acceptance criteria."""
        return len(self.acceptance_criteria)

    @property
    def progress(self) -> str:
        """Completion ratio as "done/total", "0/0" when there are no criteria."""
        return f"{self.completed_count}/{self.total_count}"

    @classmethod
    def from_frontmatter(cls, item_id: str, metadata: dict) -> Item:
        """Create Item from parsed front matter."""
        return cls(
            id=item_id,
            title=metadata["title"],
            status=metadata.get("status", Status.OPEN.value),
            acceptance_criteria=metadata.get("acceptance_criteria") or (),
        )
