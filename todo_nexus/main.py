"""Application entry point: wires settings and logging into a task store."""

import logging

from todo_nexus.core.logging import configure_logging
from todo_nexus.core.settings import Settings, get_settings
from todo_nexus.store.seed_data import seed_tasks
from todo_nexus.store.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_application(settings: Settings | None = None) -> TaskStore:
    """Instantiate and configure the task store a renderer will drive."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = TaskStore(
        default_priority=settings.default_priority,
        default_category=settings.default_category,
        filter_mode=settings.default_filter,
        sort_mode=settings.default_sort,
    )

    if settings.seed_demo_data:
        seed_tasks(store)

    logger.info(
        f"{settings.project_name} {settings.version} ready "
        f"({settings.environment}, {len(store)} tasks)"
    )
    return store


def main() -> None:
    store = create_application()
    view = store.view()
    stats = view.stats
    print(
        f"{stats.total} total, {stats.active} active, "
        f"{stats.completed} completed, {stats.starred} starred"
    )
    if view.empty_state is not None:
        print(view.empty_state.title)
    for row in view.tasks:
        mark = "x" if row.completed else " "
        star = "*" if row.is_starred else " "
        print(f"[{mark}]{star} {row.text}  ({row.priority.value}, {row.created_label})")


if __name__ == "__main__":
    main()
