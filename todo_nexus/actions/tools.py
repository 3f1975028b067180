"""Named UI actions and the dispatcher that applies them to a task store.

A renderer that only speaks in event names and JSON payloads (button clicks,
key presses, select changes) drives the store through ``execute_action``.
Results are plain dicts; failures come back as ``{"success": False, "error": ...}``
rather than exceptions.
"""

import logging
from typing import Any

from pydantic import ValidationError

from todo_nexus.models.task import FilterMode, SortMode, Task, TaskPriority
from todo_nexus.schemas.task import TaskCreate, TaskRef, TaskResponse
from todo_nexus.store.task_store import TaskStore

logger = logging.getLogger(__name__)

_TASK_ID = {"type": "integer", "description": "ID of the task (required)"}

# Action schemas for the renderer
ACTIONS = [
    {
        "name": "add_task",
        "description": "Create a new task at the top of the list. Blank text is ignored.",
        "input_schema": {
            "type": "object",
            "properties": {
                "text": {"type": "string", "description": "Task text (trimmed)"},
                "priority": {
                    "type": "string",
                    "enum": [p.value for p in TaskPriority],
                    "description": "Priority level (default: medium)",
                    "default": "medium",
                },
            },
            "required": ["text"],
        },
    },
    {
        "name": "submit_new_task",
        "description": "Create a task from the pending draft text and priority, then clear the draft.",
        "input_schema": {"type": "object", "properties": {}},
    },
    {
        "name": "set_new_task_text",
        "description": "Update the pending new-task draft text.",
        "input_schema": {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        },
    },
    {
        "name": "set_new_task_priority",
        "description": "Select the priority used by submit_new_task.",
        "input_schema": {
            "type": "object",
            "properties": {
                "priority": {"type": "string", "enum": [p.value for p in TaskPriority]},
            },
            "required": ["priority"],
        },
    },
    {
        "name": "toggle_complete",
        "description": "Mark a task done, or back to active if it is already done.",
        "input_schema": {
            "type": "object",
            "properties": {"task_id": _TASK_ID},
            "required": ["task_id"],
        },
    },
    {
        "name": "toggle_star",
        "description": "Star or unstar a task.",
        "input_schema": {
            "type": "object",
            "properties": {"task_id": _TASK_ID},
            "required": ["task_id"],
        },
    },
    {
        "name": "remove_task",
        "description": "Delete a task.",
        "input_schema": {
            "type": "object",
            "properties": {"task_id": _TASK_ID},
            "required": ["task_id"],
        },
    },
    {
        "name": "archive_completed",
        "description": "Remove every completed task.",
        "input_schema": {"type": "object", "properties": {}},
    },
    {
        "name": "begin_edit",
        "description": "Start editing a task's text. Any other unsaved edit is discarded.",
        "input_schema": {
            "type": "object",
            "properties": {
                "task_id": _TASK_ID,
                "current_text": {
                    "type": "string",
                    "description": "Initial draft (defaults to the task's stored text)",
                },
            },
            "required": ["task_id"],
        },
    },
    {
        "name": "update_edit_draft",
        "description": "Replace the draft text of the open edit.",
        "input_schema": {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        },
    },
    {
        "name": "commit_edit",
        "description": "Save the draft as the task's text and close the edit. Blank drafts are not saved.",
        "input_schema": {
            "type": "object",
            "properties": {"task_id": _TASK_ID},
            "required": ["task_id"],
        },
    },
    {
        "name": "cancel_edit",
        "description": "Close the open edit without saving.",
        "input_schema": {"type": "object", "properties": {}},
    },
    {
        "name": "set_filter",
        "description": "Choose which tasks are listed.",
        "input_schema": {
            "type": "object",
            "properties": {
                "filter": {"type": "string", "enum": [f.value for f in FilterMode]},
            },
            "required": ["filter"],
        },
    },
    {
        "name": "set_search",
        "description": "Only list tasks whose text contains this term (case-insensitive).",
        "input_schema": {
            "type": "object",
            "properties": {"search": {"type": "string"}},
            "required": ["search"],
        },
    },
    {
        "name": "set_sort",
        "description": "Choose the list ordering.",
        "input_schema": {
            "type": "object",
            "properties": {
                "sort": {"type": "string", "enum": [s.value for s in SortMode]},
            },
            "required": ["sort"],
        },
    },
    {
        "name": "get_view",
        "description": "Return the visible tasks, counts and current selections.",
        "input_schema": {"type": "object", "properties": {}},
    },
    {
        "name": "get_task_stats",
        "description": "Return total, active, completed and starred counts.",
        "input_schema": {"type": "object", "properties": {}},
    },
]


def execute_action(
    store: TaskStore, action_name: str, action_input: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Execute an action and return the result."""
    action_input = action_input or {}

    try:
        if action_name == "add_task":
            return _add_task(store, TaskCreate(**action_input))
        elif action_name == "submit_new_task":
            return _task_result(store.submit_new_task(), "Task text is empty")
        elif action_name == "set_new_task_text":
            store.set_new_task_text(str(action_input.get("text", "")))
            return {"success": True}
        elif action_name == "set_new_task_priority":
            store.set_new_task_priority(action_input["priority"])
            return {"success": True}
        elif action_name == "toggle_complete":
            ref = TaskRef(**action_input)
            return _task_result(store.toggle_complete(ref.task_id), _not_found(ref.task_id))
        elif action_name == "toggle_star":
            ref = TaskRef(**action_input)
            return _task_result(store.toggle_star(ref.task_id), _not_found(ref.task_id))
        elif action_name == "remove_task":
            return _remove_task(store, TaskRef(**action_input))
        elif action_name == "archive_completed":
            removed = store.archive_completed()
            return {
                "success": True,
                "removed": removed,
                "message": f"Archived {removed} completed task(s)",
            }
        elif action_name == "begin_edit":
            return _begin_edit(store, TaskRef(**action_input), action_input.get("current_text"))
        elif action_name == "update_edit_draft":
            if not store.update_edit_draft(str(action_input.get("text", ""))):
                return {"success": False, "error": "No task is being edited"}
            return {"success": True}
        elif action_name == "commit_edit":
            ref = TaskRef(**action_input)
            return _task_result(store.commit_edit(ref.task_id), "Edit closed without changes")
        elif action_name == "cancel_edit":
            store.cancel_edit()
            return {"success": True}
        elif action_name == "set_filter":
            store.set_filter(action_input["filter"])
            return {"success": True, "filter": store.filter_mode.value}
        elif action_name == "set_search":
            store.set_search(str(action_input.get("search", "")))
            return {"success": True, "search": store.search_term}
        elif action_name == "set_sort":
            store.set_sort(action_input["sort"])
            return {"success": True, "sort": store.sort_mode.value}
        elif action_name == "get_view":
            return {"success": True, "view": store.view().model_dump(mode="json")}
        elif action_name == "get_task_stats":
            return {"success": True, "stats": store.stats().model_dump()}
        else:
            return {"error": f"Unknown action: {action_name}"}
    except (ValidationError, ValueError, KeyError) as e:
        logger.warning(f"Action {action_name} rejected: {e}")
        return {"success": False, "error": f"Invalid input for {action_name}: {e}"}


def _not_found(task_id: int) -> str:
    return f"Task with ID {task_id} not found"


def _task_result(task: Task | None, error: str) -> dict[str, Any]:
    if task is None:
        return {"success": False, "error": error}
    return {
        "success": True,
        "task": TaskResponse.from_task(task).model_dump(mode="json"),
    }


def _add_task(store: TaskStore, task_in: TaskCreate) -> dict[str, Any]:
    """Create a new task."""
    task = store.add(task_in.text, task_in.priority)
    if task is None:
        return {"success": False, "error": "Task text is empty"}

    result = _task_result(task, "")
    result["message"] = f"Task '{task.text}' created successfully"
    return result


def _remove_task(store: TaskStore, ref: TaskRef) -> dict[str, Any]:
    """Delete a task."""
    task = store.get(ref.task_id)
    if task is None or not store.remove(ref.task_id):
        return {"success": False, "error": _not_found(ref.task_id)}

    return {
        "success": True,
        "message": f"Task '{task.text}' deleted successfully",
    }


def _begin_edit(store: TaskStore, ref: TaskRef, current_text: str | None) -> dict[str, Any]:
    task = store.get(ref.task_id)
    if task is None:
        return {"success": False, "error": _not_found(ref.task_id)}

    draft = task.text if current_text is None else str(current_text)
    store.begin_edit(ref.task_id, draft)
    return {"success": True, "task_id": ref.task_id, "draft": draft}
