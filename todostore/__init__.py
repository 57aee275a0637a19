"""
TODO STORE - Local Task List Manager
====================================

Add, edit, delete, complete, search, sort and filter short text tasks,
persisted to a local key-value storage slot so they survive a restart.

Usage:
    from todostore import TaskStore, TaskStorage, FileStorage

    store = TaskStore(TaskStorage(FileStorage(".todostore/storage.json")))
    store.add_task("buy milk")
    store.set_search_term("milk")
    store.set_sort_criterion("completedFirst")
    print(store.all_tasks)
"""

from .schema import (
    Task,
    TaskCollection,
    TaskFilter,
    SortCriterion
)

from .storage import (
    KeyValueStorage,
    MemoryStorage,
    FileStorage,
    TaskStorage,
    STORAGE_KEY,
    DEFAULT_STORAGE_FILE
)

from .store import TaskStore

__version__ = "1.0.0"
__all__ = [
    "TaskStore",
    "TaskStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "FileStorage",
    "Task",
    "TaskCollection",
    "TaskFilter",
    "SortCriterion",
    "STORAGE_KEY",
    "DEFAULT_STORAGE_FILE"
]
