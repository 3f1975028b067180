"""In-memory task store."""

from todo_nexus.store.task_store import TaskStore

__all__ = ["TaskStore"]
