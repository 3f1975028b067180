"""Derived list view: filtering, searching, sorting and aggregate counts.

Everything here is a pure function of its arguments. Nothing is cached, so the
view can never drift from the task collection it was computed from.
"""

from collections.abc import Iterable, Sequence

from todo_nexus.models.task import FilterMode, SortMode, Task
from todo_nexus.schemas.task import (
    EmptyState,
    ProjectionResponse,
    TaskResponse,
    TaskStats,
)
from todo_nexus.views.formatting import collation_key, empty_state_message


def matches_filter(task: Task, filter_mode: FilterMode) -> bool:
    """Return True if the task belongs in the given filter tab."""
    if filter_mode is FilterMode.ACTIVE:
        return not task.completed
    if filter_mode is FilterMode.COMPLETED:
        return task.completed
    if filter_mode is FilterMode.STARRED:
        return task.is_starred
    return True


def matches_search(task: Task, search_term: str) -> bool:
    """Case-insensitive substring match; an empty term matches everything."""
    return search_term.lower() in task.text.lower()


def sort_tasks(tasks: Iterable[Task], sort_mode: SortMode) -> list[Task]:
    """
    Return a new sorted list, leaving the input untouched.

    Python's sort is stable (also with reverse=True), so tasks that compare
    equal keep the order they had in the input.
    """
    if sort_mode is SortMode.NEWEST:
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)
    if sort_mode is SortMode.OLDEST:
        return sorted(tasks, key=lambda t: t.created_at)
    if sort_mode is SortMode.PRIORITY:
        return sorted(tasks, key=lambda t: t.priority.rank, reverse=True)
    if sort_mode is SortMode.ALPHABETICAL:
        return sorted(tasks, key=lambda t: collation_key(t.text))
    return list(tasks)


def project(
    tasks: Sequence[Task],
    filter_mode: FilterMode = FilterMode.ALL,
    search_term: str = "",
    sort_mode: SortMode = SortMode.NEWEST,
) -> list[Task]:
    """Filter, then search, then sort."""
    filter_mode = FilterMode(filter_mode)
    sort_mode = SortMode(sort_mode)

    visible = [
        t for t in tasks
        if matches_filter(t, filter_mode) and matches_search(t, search_term)
    ]
    return sort_tasks(visible, sort_mode)


def compute_stats(tasks: Sequence[Task]) -> TaskStats:
    """Aggregate counts over the whole collection, regardless of the view."""
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    starred = sum(1 for t in tasks if t.is_starred)
    return TaskStats(
        total=total,
        active=total - completed,
        completed=completed,
        starred=starred,
    )


def build_view(
    tasks: Sequence[Task],
    filter_mode: FilterMode = FilterMode.ALL,
    search_term: str = "",
    sort_mode: SortMode = SortMode.NEWEST,
) -> ProjectionResponse:
    """Everything the list screen needs in one payload."""
    filter_mode = FilterMode(filter_mode)
    sort_mode = SortMode(sort_mode)

    visible = project(tasks, filter_mode, search_term, sort_mode)

    empty_state = None
    if not visible:
        title, hint = empty_state_message(filter_mode)
        empty_state = EmptyState(title=title, hint=hint)

    return ProjectionResponse(
        tasks=[TaskResponse.from_task(t) for t in visible],
        stats=compute_stats(tasks),
        filter=filter_mode,
        search=search_term,
        sort=sort_mode,
        empty_state=empty_state,
    )
