# tests/conftest.py

from __future__ import annotations

import pytest

from todo_nexus.store.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    """Empty store driven by the fake clock."""
    return TaskStore(clock=clock)


@pytest.fixture()
def assert_invariants():
    """
    Check the task invariants that must hold after every mutation:
    completed_at present iff completed, non-blank trimmed text, unique ids.
    """

    def check(store: TaskStore) -> None:
        ids = [t.id for t in store.tasks]
        assert len(ids) == len(set(ids))
        for t in store.tasks:
            assert (t.completed_at is not None) == t.completed
            assert t.text and t.text == t.text.strip()

    return check
