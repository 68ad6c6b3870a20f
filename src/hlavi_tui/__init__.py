"""Terminal kanban viewer for hlavi boards."""

__version__ = "0.1.0"
