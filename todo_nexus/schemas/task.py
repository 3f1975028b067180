"""Pydantic schemas for the task store's read surface and action payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from todo_nexus.models.task import (
    DEFAULT_CATEGORY,
    FilterMode,
    SortMode,
    Task,
    TaskPriority,
)
from todo_nexus.views.formatting import format_timestamp


class TaskCreate(BaseModel):
    """Schema for creating a new task.

    Blank text is accepted here; the store turns it into a no-op.
    """

    text: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM


class TaskRef(BaseModel):
    """Payload for actions addressing a single task."""

    task_id: int


class TaskResponse(BaseModel):
    """Schema for task responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str
    completed: bool = False
    priority: TaskPriority
    created_at: datetime
    completed_at: datetime | None = None
    is_starred: bool = False
    category: str = DEFAULT_CATEGORY

    # Display labels, e.g. "Oct 19, 02:30 PM"
    created_label: str | None = None
    completed_label: str | None = None

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        response = cls.model_validate(task)
        response.created_label = format_timestamp(task.created_at)
        if task.completed_at is not None:
            response.completed_label = format_timestamp(task.completed_at)
        return response

    def to_task(self) -> Task:
        return Task(
            id=self.id,
            text=self.text,
            priority=self.priority,
            created_at=self.created_at,
            completed=self.completed,
            completed_at=self.completed_at,
            is_starred=self.is_starred,
            category=self.category,
        )


class TaskStats(BaseModel):
    """Aggregate counts over the whole collection."""

    total: int = 0
    active: int = 0
    completed: int = 0
    starred: int = 0


class EditSessionResponse(BaseModel):
    task_id: int
    draft: str


class EmptyState(BaseModel):
    """Message shown in place of an empty list."""

    title: str
    hint: str


class ProjectionResponse(BaseModel):
    """Schema for the projected list view."""

    tasks: list[TaskResponse] = Field(default_factory=list)
    stats: TaskStats
    filter: FilterMode
    search: str = ""
    sort: SortMode
    empty_state: EmptyState | None = None


class StoreSnapshot(BaseModel):
    """Complete store state: raw task order, selections and drafts."""

    tasks: list[TaskResponse] = Field(default_factory=list)
    filter: FilterMode = FilterMode.ALL
    search: str = ""
    sort: SortMode = SortMode.NEWEST
    edit_session: EditSessionResponse | None = None
    new_task_text: str = ""
    new_task_priority: TaskPriority = TaskPriority.MEDIUM
    revision: int = 0
