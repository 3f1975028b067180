"""UI action catalogue and dispatcher."""

from todo_nexus.actions.tools import ACTIONS, execute_action

__all__ = ["ACTIONS", "execute_action"]
