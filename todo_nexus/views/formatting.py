"""Display helpers for the list view."""

import unicodedata
from datetime import datetime, tzinfo

from todo_nexus.models.task import FilterMode


def format_timestamp(value: datetime, tz: tzinfo | None = None) -> str:
    """Render a timestamp the way the task list shows it, e.g. ``Oct 19, 02:30 PM``.

    Converted to the local timezone unless ``tz`` is given.
    """
    local = value.astimezone(tz)
    return f"{local.strftime('%b')} {local.day}, {local.strftime('%I:%M %p')}"


def empty_state_message(filter_mode: FilterMode) -> tuple[str, str]:
    """Title and hint shown when the visible list is empty."""
    if filter_mode is FilterMode.ALL:
        return "No tasks yet", "Create your first task to get started!"
    return f"No {filter_mode.value} tasks", "Try a different filter or create new tasks"


def _char_class(ch: str) -> int:
    # Root collation groups: spaces, punctuation, symbols, digits, then letters
    category = unicodedata.category(ch)
    if category.startswith(("Z", "C")):
        return 0
    if category.startswith("P"):
        return 1
    if category.startswith("S"):
        return 2
    if category.startswith("N"):
        return 3
    return 4


def collation_key(text: str) -> tuple:
    """
    Sort key approximating locale-aware (ICU root) string comparison:
    1. Base characters by class (whitespace, punctuation, symbols, digits,
       letters), ignoring case and accents
    2. Accents
    3. Case, lowercase before uppercase
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        tuple((_char_class(ch), ch) for ch in base.casefold()),
        decomposed.casefold(),
        tuple(ch.isupper() for ch in base),
    )
