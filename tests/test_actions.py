# tests/test_actions.py

from __future__ import annotations

from todo_nexus.actions.tools import ACTIONS, execute_action
from todo_nexus.store.task_store import TaskStore


def test_every_catalogued_action_is_dispatched(store: TaskStore) -> None:
    for action in ACTIONS:
        result = execute_action(store, action["name"], {})
        assert "Unknown action" not in result.get("error", "")


def test_unknown_action(store: TaskStore) -> None:
    assert execute_action(store, "fly_to_moon") == {"error": "Unknown action: fly_to_moon"}


def test_add_task_action(store: TaskStore) -> None:
    result = execute_action(store, "add_task", {"text": " Buy milk ", "priority": "high"})

    assert result["success"] is True
    assert result["task"]["text"] == "Buy milk"
    assert result["task"]["priority"] == "high"
    assert result["message"] == "Task 'Buy milk' created successfully"
    assert len(store) == 1


def test_add_task_blank_and_invalid(store: TaskStore) -> None:
    assert execute_action(store, "add_task", {"text": "  "})["success"] is False

    bad = execute_action(store, "add_task", {"text": "x", "priority": "urgent"})
    assert bad["success"] is False
    assert "Invalid input for add_task" in bad["error"]
    assert len(store) == 0


def test_toggle_and_remove_actions(store: TaskStore) -> None:
    task = store.add("Call mom")

    done = execute_action(store, "toggle_complete", {"task_id": task.id})
    assert done["task"]["completed"] is True
    assert done["task"]["completed_at"] is not None

    starred = execute_action(store, "toggle_star", {"task_id": task.id})
    assert starred["task"]["is_starred"] is True

    missing = execute_action(store, "toggle_star", {"task_id": 404})
    assert missing == {"success": False, "error": "Task with ID 404 not found"}

    removed = execute_action(store, "remove_task", {"task_id": task.id})
    assert removed["message"] == "Task 'Call mom' deleted successfully"
    assert execute_action(store, "remove_task", {"task_id": task.id})["success"] is False


def test_non_integer_task_id(store: TaskStore) -> None:
    result = execute_action(store, "toggle_complete", {"task_id": "abc"})

    assert result["success"] is False


def test_edit_flow_actions(store: TaskStore) -> None:
    task = store.add("Buy milk")

    begun = execute_action(store, "begin_edit", {"task_id": task.id})
    assert begun["draft"] == "Buy milk"

    execute_action(store, "update_edit_draft", {"text": "Buy bread"})
    committed = execute_action(store, "commit_edit", {"task_id": task.id})

    assert committed["task"]["text"] == "Buy bread"
    assert store.edit_session is None
    assert execute_action(store, "update_edit_draft", {"text": "late"})["success"] is False


def test_archive_and_view_actions(store: TaskStore) -> None:
    a = store.add("Buy milk", "medium")
    b = store.add("Call mom", "high")
    store.toggle_complete(a.id)

    execute_action(store, "set_sort", {"sort": "priority"})
    view = execute_action(store, "get_view")["view"]
    assert [t["id"] for t in view["tasks"]] == [b.id, a.id]
    assert view["sort"] == "priority"

    archived = execute_action(store, "archive_completed")
    assert archived["removed"] == 1

    stats = execute_action(store, "get_task_stats")["stats"]
    assert stats == {"total": 1, "active": 1, "completed": 0, "starred": 0}


def test_selection_actions(store: TaskStore) -> None:
    assert execute_action(store, "set_filter", {"filter": "active"})["filter"] == "active"
    assert execute_action(store, "set_search", {"search": "mil"})["search"] == "mil"
    assert execute_action(store, "set_filter", {"filter": "archived"})["success"] is False


def test_new_task_draft_actions(store: TaskStore) -> None:
    execute_action(store, "set_new_task_text", {"text": "Plan trip"})
    execute_action(store, "set_new_task_priority", {"priority": "low"})

    result = execute_action(store, "submit_new_task")

    assert result["task"]["priority"] == "low"
    assert store.new_task_text == ""
