"""Seed a task store with demo tasks."""

import logging

from todo_nexus.models.task import TaskPriority
from todo_nexus.store.task_store import TaskStore

logger = logging.getLogger(__name__)

# (text, priority, completed, starred)
MOCK_TASKS = [
    ("Morning standup meeting", TaskPriority.HIGH, True, False),
    ("Review pull requests", TaskPriority.MEDIUM, False, True),
    ("Lunch with client", TaskPriority.HIGH, False, False),
    ("Update documentation", TaskPriority.LOW, False, False),
    ("Design review session", TaskPriority.MEDIUM, False, True),
    ("Deploy to staging", TaskPriority.HIGH, False, False),
    ("Team building activity", TaskPriority.LOW, False, False),
    ("Buy milk", TaskPriority.MEDIUM, True, True),
]


def seed_tasks(store: TaskStore) -> int:
    """Add the mock tasks to the store. Returns how many were added."""
    # Added oldest first so the list reads top-down under the default "newest" sort
    for text, priority, completed, starred in reversed(MOCK_TASKS):
        task = store.add(text, priority)
        if completed:
            store.toggle_complete(task.id)
        if starred:
            store.toggle_star(task.id)

    count = len(MOCK_TASKS)
    logger.info(f"Seeded {count} mock tasks")
    return count


if __name__ == "__main__":
    seeded = TaskStore()
    seed_tasks(seeded)
    for row in seeded.view().tasks:
        print(f"  {'x' if row.completed else ' '} {row.text} ({row.priority.value})")
