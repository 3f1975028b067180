"""In-memory task store: the task collection, the edit session and UI selections.

All mutations are synchronous. Invalid input (blank text, unknown ids)
degrades to a no-op instead of raising.
"""

import itertools
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from todo_nexus.models.task import (
    DEFAULT_CATEGORY,
    EditSession,
    FilterMode,
    SortMode,
    Task,
    TaskPriority,
)
from todo_nexus.schemas.task import (
    EditSessionResponse,
    ProjectionResponse,
    StoreSnapshot,
    TaskResponse,
    TaskStats,
)
from todo_nexus.views.projector import build_view, compute_stats, project

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """Owns the task list and every piece of transient list-screen state."""

    def __init__(
        self,
        *,
        clock: Clock = utc_now,
        default_priority: TaskPriority | str = TaskPriority.MEDIUM,
        default_category: str = DEFAULT_CATEGORY,
        filter_mode: FilterMode | str = FilterMode.ALL,
        sort_mode: SortMode | str = SortMode.NEWEST,
    ):
        self._clock = clock
        self._ids = itertools.count(1)
        self._tasks: list[Task] = []
        self._edit: EditSession | None = None
        self._revision = 0

        self.default_category = default_category
        self._filter = FilterMode(filter_mode)
        self._search = ""
        self._sort = SortMode(sort_mode)
        self._new_task_text = ""
        self._new_task_priority = TaskPriority(default_priority)

    # Read access

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Raw collection order (newest first). Never shown as-is."""
        return tuple(self._tasks)

    @property
    def revision(self) -> int:
        """Bumped on every state change."""
        return self._revision

    @property
    def filter_mode(self) -> FilterMode:
        return self._filter

    @property
    def search_term(self) -> str:
        return self._search

    @property
    def sort_mode(self) -> SortMode:
        return self._sort

    @property
    def edit_session(self) -> EditSession | None:
        return self._edit

    @property
    def new_task_text(self) -> str:
        return self._new_task_text

    @property
    def new_task_priority(self) -> TaskPriority:
        return self._new_task_priority

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: int) -> Task | None:
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def stats(self) -> TaskStats:
        return compute_stats(self._tasks)

    def visible_tasks(self) -> list[Task]:
        return project(self._tasks, self._filter, self._search, self._sort)

    def view(self) -> ProjectionResponse:
        return build_view(self._tasks, self._filter, self._search, self._sort)

    def snapshot(self) -> StoreSnapshot:
        edit = None
        if self._edit is not None:
            edit = EditSessionResponse(task_id=self._edit.task_id, draft=self._edit.draft)
        return StoreSnapshot(
            tasks=[TaskResponse.from_task(t) for t in self._tasks],
            filter=self._filter,
            search=self._search,
            sort=self._sort,
            edit_session=edit,
            new_task_text=self._new_task_text,
            new_task_priority=self._new_task_priority,
            revision=self._revision,
        )

    # Task mutations

    def add(self, text: str, priority: TaskPriority | str = TaskPriority.MEDIUM) -> Task | None:
        """Prepend a new task. Returns None (and changes nothing) for blank text."""
        priority = TaskPriority(priority)
        text = text.strip()
        if not text:
            logger.debug("Ignoring add with blank text")
            return None

        task = Task(
            id=next(self._ids),
            text=text,
            priority=priority,
            created_at=self._clock(),
            category=self.default_category,
        )
        self._tasks.insert(0, task)
        self._touch()
        logger.debug(f"Added task {task.id} ({priority.value})")
        return task

    def toggle_complete(self, task_id: int) -> Task | None:
        index = self._index_of(task_id)
        if index is None:
            return None

        task = self._tasks[index]
        if task.completed:
            updated = replace(task, completed=False, completed_at=None)
        else:
            updated = replace(task, completed=True, completed_at=self._clock())
        self._tasks[index] = updated
        self._touch()
        logger.debug(f"Task {task_id} completed={updated.completed}")
        return updated

    def toggle_star(self, task_id: int) -> Task | None:
        index = self._index_of(task_id)
        if index is None:
            return None

        updated = replace(self._tasks[index], is_starred=not self._tasks[index].is_starred)
        self._tasks[index] = updated
        self._touch()
        logger.debug(f"Task {task_id} starred={updated.is_starred}")
        return updated

    def remove(self, task_id: int) -> bool:
        index = self._index_of(task_id)
        if index is None:
            return False

        del self._tasks[index]
        self._drop_orphaned_edit()
        self._touch()
        logger.debug(f"Removed task {task_id}")
        return True

    def archive_completed(self) -> int:
        """Drop every completed task. Returns how many were removed."""
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)
        if removed:
            self._tasks = remaining
            self._drop_orphaned_edit()
            self._touch()
            logger.info(f"Archived {removed} completed task(s)")
        return removed

    # Edit session

    def begin_edit(self, task_id: int, current_text: str) -> bool:
        """Open an edit session, discarding any other unsaved draft."""
        if self._index_of(task_id) is None:
            return False
        if self._edit is not None and self._edit.task_id != task_id:
            logger.debug(f"Discarding unsaved draft for task {self._edit.task_id}")
        self._edit = EditSession(task_id=task_id, draft=current_text)
        self._touch()
        return True

    def update_edit_draft(self, text: str) -> bool:
        if self._edit is None:
            return False
        self._edit = replace(self._edit, draft=text)
        self._touch()
        return True

    def commit_edit(self, task_id: int) -> Task | None:
        """
        Save the draft as the task's text. The session closes either way;
        a blank draft or unknown id leaves every task unchanged.
        """
        draft = (self._edit.draft if self._edit is not None else "").strip()
        updated = None

        index = self._index_of(task_id)
        if draft and index is not None:
            updated = replace(self._tasks[index], text=draft)
            self._tasks[index] = updated
            logger.debug(f"Task {task_id} text updated")

        self._close_edit()
        return updated

    def cancel_edit(self) -> None:
        self._close_edit()

    # UI selections

    def set_filter(self, filter_mode: FilterMode | str) -> None:
        self._filter = FilterMode(filter_mode)
        self._touch()

    def set_search(self, search_term: str) -> None:
        self._search = search_term
        self._touch()

    def set_sort(self, sort_mode: SortMode | str) -> None:
        self._sort = SortMode(sort_mode)
        self._touch()

    def set_new_task_text(self, text: str) -> None:
        self._new_task_text = text
        self._touch()

    def set_new_task_priority(self, priority: TaskPriority | str) -> None:
        self._new_task_priority = TaskPriority(priority)
        self._touch()

    def submit_new_task(self) -> Task | None:
        """Add a task from the pending draft and clear the draft on success."""
        task = self.add(self._new_task_text, self._new_task_priority)
        if task is not None:
            self._new_task_text = ""
        return task

    # Internals

    def _index_of(self, task_id: int) -> int | None:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _drop_orphaned_edit(self) -> None:
        if self._edit is not None and self._index_of(self._edit.task_id) is None:
            logger.debug(f"Closing edit for removed task {self._edit.task_id}")
            self._edit = None

    def _close_edit(self) -> None:
        self._edit = None
        self._touch()

    def _touch(self) -> None:
        self._revision += 1
