"""Domain models."""

from todo_nexus.models.task import (
    EditSession,
    FilterMode,
    SortMode,
    Task,
    TaskPriority,
)

__all__ = ["Task", "TaskPriority", "FilterMode", "SortMode", "EditSession"]
