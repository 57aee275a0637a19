"""
TODO STORE - Task Schema Definition
===================================
Data model for the task list: a flat, insertion-ordered collection of
short text tasks with a completion flag.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter


class SortCriterion(str, Enum):
    """Orderings applied to the searched task view"""
    DEFAULT = "default"                  # Insertion order
    COMPLETED_FIRST = "completedFirst"   # Completed tasks before pending ones
    PENDING_FIRST = "pendingFirst"       # Pending tasks before completed ones


class TaskFilter(str, Enum):
    """Filter tabs offered by the presentation layer"""
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


class Task(BaseModel):
    """Individual task"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: int                         # Assigned by the store, never reused while present
    description: str                # Trimmed, non-empty text (checked by the caller)
    completed: bool = False


# Shape of the persisted storage slot: a JSON array of task objects
TaskCollection = TypeAdapter(List[Task])
