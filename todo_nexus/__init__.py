"""In-memory task list core: task store, view projection and UI actions."""

__version__ = "0.1.0"
