"""Pydantic schemas for the renderer-facing read surface."""

from todo_nexus.schemas.task import (
    EditSessionResponse,
    EmptyState,
    ProjectionResponse,
    StoreSnapshot,
    TaskCreate,
    TaskRef,
    TaskResponse,
    TaskStats,
)

__all__ = [
    "TaskCreate",
    "TaskRef",
    "TaskResponse",
    "TaskStats",
    "EditSessionResponse",
    "EmptyState",
    "ProjectionResponse",
    "StoreSnapshot",
]
