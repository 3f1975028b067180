"""Task model for todo management."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class TaskPriority(str, Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}


class FilterMode(str, Enum):
    """Which tasks the list view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
    STARRED = "starred"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SortMode(str, Enum):
    """Ordering applied to the visible tasks."""

    NEWEST = "newest"
    OLDEST = "oldest"
    PRIORITY = "priority"
    ALPHABETICAL = "alphabetical"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS = {
    SortMode.NEWEST: "Newest",
    SortMode.OLDEST: "Oldest",
    SortMode.PRIORITY: "Priority",
    SortMode.ALPHABETICAL: "A-Z",
}

DEFAULT_CATEGORY = "general"


@dataclass(frozen=True)
class Task:
    """A single task/todo item.

    Tasks are immutable values: the store swaps in an updated copy
    (``dataclasses.replace``) whenever one changes.
    """

    id: int
    text: str
    priority: TaskPriority
    created_at: datetime
    completed: bool = False
    completed_at: datetime | None = None
    is_starred: bool = False
    category: str = DEFAULT_CATEGORY

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, text='{self.text}', priority={self.priority.value})>"


@dataclass(frozen=True)
class EditSession:
    """The one task currently being text-edited, with its unsaved draft."""

    task_id: int
    draft: str
