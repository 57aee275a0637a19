"""
TODO STORE - Task Store
=======================
Owns the task collection plus the search/sort view controls.

Mutations update the in-memory list and then write the whole collection
back through the TaskStorage. Views are recomputed on each access:
search first, then sort, then the completed/pending split.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from .schema import SortCriterion, Task, TaskFilter
from .storage import TaskStorage

logger = logging.getLogger("todostore")


class TaskStore:
    """
    Single authoritative task collection.

    The store does not validate descriptions; callers reject empty text
    before calling add_task / update_task_description.
    """

    def __init__(self, storage: TaskStorage):
        self.storage = storage
        self._tasks: List[Task] = storage.load()
        self._search_term: str = ""
        self._sort_criterion: str = SortCriterion.DEFAULT.value

    # ========================================
    # VIEW CONTROLS
    # ========================================

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def sort_criterion(self) -> str:
        return self._sort_criterion

    def set_search_term(self, term: str) -> None:
        self._search_term = term
        logger.debug(f"🔎 Search term: {term!r}")

    def set_sort_criterion(self, criterion: str) -> None:
        """Unrecognized values are kept and simply leave the view unordered"""
        if isinstance(criterion, SortCriterion):
            criterion = criterion.value
        self._sort_criterion = criterion
        logger.debug(f"↕️ Sort criterion: {criterion!r}")

    # ========================================
    # DERIVED VIEWS
    # ========================================

    @property
    def tasks(self) -> List[Task]:
        """Raw collection in insertion order"""
        return list(self._tasks)

    @property
    def all_tasks(self) -> List[Task]:
        filtered = self._tasks
        if self._search_term:
            needle = self._search_term.lower()
            filtered = [t for t in filtered if needle in t.description.lower()]

        # sorted() is stable, so ties keep their relative order
        if self._sort_criterion == SortCriterion.COMPLETED_FIRST.value:
            return sorted(filtered, key=lambda t: not t.completed)
        if self._sort_criterion == SortCriterion.PENDING_FIRST.value:
            return sorted(filtered, key=lambda t: t.completed)
        return list(filtered)

    @property
    def completed_tasks(self) -> List[Task]:
        return [t for t in self.all_tasks if t.completed]

    @property
    def pending_tasks(self) -> List[Task]:
        return [t for t in self.all_tasks if not t.completed]

    def filtered(self, task_filter: TaskFilter = TaskFilter.ALL) -> List[Task]:
        """View for a presentation filter tab"""
        if task_filter == TaskFilter.COMPLETED:
            return self.completed_tasks
        if task_filter == TaskFilter.PENDING:
            return self.pending_tasks
        return self.all_tasks

    @property
    def remaining_count(self) -> int:
        """Pending tasks in the whole collection, ignoring search"""
        return sum(1 for t in self._tasks if not t.completed)

    @property
    def all_completed(self) -> bool:
        return bool(self._tasks) and all(t.completed for t in self._tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        index = self._index_of(task_id)
        return self._tasks[index] if index is not None else None

    # ========================================
    # MUTATIONS
    # ========================================

    def add_task(self, description: str) -> Task:
        new_id = max((t.id for t in self._tasks), default=0) + 1
        task = Task(id=new_id, description=description, completed=False)
        self._tasks.append(task)
        self._commit()
        logger.info(f"➕ Added task {task.id}: {task.description}")
        return task

    def remove_task(self, task_id: int) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            logger.warning(f"Task not found: {task_id}")
        else:
            logger.info(f"🗑️ Removed task {task_id}")
        self._commit()

    def toggle_task_completion(self, task_id: int) -> Optional[Task]:
        task = self._replace(task_id, lambda t: {"completed": not t.completed})
        self._commit()
        if task:
            logger.info(f"{'✅' if task.completed else '⬜'} Task {task_id} completed={task.completed}")
        return task

    def update_task_description(self, task_id: int, new_description: str) -> Optional[Task]:
        task = self._replace(task_id, lambda t: {"description": new_description.strip()})
        self._commit()
        if task:
            logger.info(f"✏️ Updated task {task_id}: {task.description}")
        return task

    def toggle_all_tasks_completion(self, completed: bool) -> None:
        self._tasks = [t.model_copy(update={"completed": completed}) for t in self._tasks]
        self._commit()
        logger.info(f"Marked {len(self._tasks)} task(s) completed={completed}")

    def clear_completed_tasks(self) -> int:
        """Drop every completed task, returning how many were removed"""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        self._commit()
        logger.info(f"🧹 Cleared {removed} completed task(s)")
        return removed

    # ========================================
    # REPORTING
    # ========================================

    def get_status_report(self, task_filter: TaskFilter = TaskFilter.ALL) -> str:
        """Human-readable listing of the current view"""
        view = self.filtered(task_filter)

        lines = []
        if self._search_term:
            lines.append(f"Search: {self._search_term!r}")
        if not view:
            lines.append("  (no tasks)")
        for task in view:
            mark = "[x]" if task.completed else "[ ]"
            lines.append(f"  {mark} {task.id:>3}  {task.description}")

        remaining = self.remaining_count
        lines.extend([
            "",
            f"{remaining} item{'' if remaining == 1 else 's'} left",
        ])
        return "\n".join(lines)

    # ========================================
    # HELPER METHODS
    # ========================================

    def _index_of(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None

    def _replace(self, task_id: int, changes: Callable[[Task], Dict[str, Any]]) -> Optional[Task]:
        """Swap the matching task for an updated copy at the same position"""
        index = self._index_of(task_id)
        if index is None:
            logger.warning(f"Task not found: {task_id}")
            return None
        task = self._tasks[index]
        updated = task.model_copy(update=changes(task))
        self._tasks[index] = updated
        return updated

    def _commit(self) -> None:
        self.storage.save(self._tasks)
