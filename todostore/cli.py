#!/usr/bin/env python3
"""
TODO STORE - CLI Interface
==========================
Command-line front end for the task list.

Usage:
    todostore add "buy milk"
    todostore list --filter pending --search milk --sort completedFirst
    todostore toggle 1
    todostore edit 1 "buy oat milk"
    todostore toggle-all --done
    todostore clear-completed
    todostore status
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .schema import SortCriterion, TaskFilter
from .storage import DEFAULT_STORAGE_FILE, FileStorage, TaskStorage
from .store import TaskStore


class InvalidDescriptionError(ValueError):
    """Raised when a task description is empty after trimming"""


def validate_description(text: str) -> str:
    """Return the trimmed description, rejecting empty or whitespace-only text"""
    trimmed = text.strip()
    if not trimmed:
        raise InvalidDescriptionError("Task description cannot be empty")
    return trimmed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todostore",
        description="Todo Store - local task list manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todostore add "buy milk"                  Add a task
  todostore list --filter pending           Show pending tasks
  todostore list --search buy --sort completedFirst
  todostore toggle 3                        Flip completion of task 3
  todostore edit 3 "call mom tonight"       Change a description
  todostore remove 3                        Delete task 3
  todostore toggle-all --done               Mark everything completed
  todostore clear-completed                 Delete completed tasks
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a task")
    add_parser.add_argument("description", help="Task text")

    # LIST command
    list_parser = subparsers.add_parser("list", help="List tasks")
    list_parser.add_argument(
        "--filter", dest="task_filter", default=TaskFilter.ALL.value,
        choices=[f.value for f in TaskFilter], help="Filter tab"
    )
    list_parser.add_argument("--search", default="", help="Case-insensitive text search")
    list_parser.add_argument(
        "--sort", default=SortCriterion.DEFAULT.value,
        choices=[c.value for c in SortCriterion], help="Sort criterion"
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # EDIT command
    edit_parser = subparsers.add_parser("edit", help="Change a task description")
    edit_parser.add_argument("task_id", type=int, help="Task ID")
    edit_parser.add_argument("description", help="New task text")

    # TOGGLE command
    toggle_parser = subparsers.add_parser("toggle", help="Flip completion of a task")
    toggle_parser.add_argument("task_id", type=int, help="Task ID")

    # REMOVE command
    remove_parser = subparsers.add_parser("remove", help="Delete a task")
    remove_parser.add_argument("task_id", type=int, help="Task ID")

    # TOGGLE-ALL command
    toggle_all_parser = subparsers.add_parser("toggle-all", help="Set completion of every task")
    group = toggle_all_parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--done", dest="completed", action="store_true", help="Mark all completed")
    group.add_argument("--undone", dest="completed", action="store_false", help="Mark all pending")

    # CLEAR-COMPLETED command
    subparsers.add_parser("clear-completed", help="Delete completed tasks")

    # STATUS command
    subparsers.add_parser("status", help="Show all tasks and items left")

    for sub in subparsers.choices.values():
        sub.add_argument("--file", default=DEFAULT_STORAGE_FILE, help="Storage file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    store = TaskStore(TaskStorage(FileStorage(args.file)))

    # Execute command
    if args.command == "add":
        try:
            description = validate_description(args.description)
        except InvalidDescriptionError as e:
            print(f"❌ {e}")
            return 1
        task = store.add_task(description)
        print(f"✅ Added [{task.id}] {task.description}")

    elif args.command == "list":
        store.set_search_term(args.search)
        store.set_sort_criterion(args.sort)
        tasks = store.filtered(TaskFilter(args.task_filter))

        if args.json:
            print(json.dumps([t.model_dump(mode="json") for t in tasks], indent=2))
        else:
            print(store.get_status_report(TaskFilter(args.task_filter)))

    elif args.command == "edit":
        try:
            description = validate_description(args.description)
        except InvalidDescriptionError as e:
            print(f"❌ {e}")
            return 1
        task = store.update_task_description(args.task_id, description)
        if not task:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        print(f"✏️ Updated [{task.id}] {task.description}")

    elif args.command == "toggle":
        task = store.toggle_task_completion(args.task_id)
        if not task:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        print(f"{'✅ Completed' if task.completed else '⬜ Reopened'}: [{task.id}] {task.description}")

    elif args.command == "remove":
        if store.get_task(args.task_id) is None:
            print(f"❌ Task not found: {args.task_id}")
            return 1
        store.remove_task(args.task_id)
        print(f"🗑️ Removed task {args.task_id}")

    elif args.command == "toggle-all":
        store.toggle_all_tasks_completion(args.completed)
        state = "completed" if args.completed else "pending"
        print(f"Marked {len(store.tasks)} task(s) {state}")

    elif args.command == "clear-completed":
        removed = store.clear_completed_tasks()
        print(f"🧹 Cleared {removed} completed task(s)")

    elif args.command == "status":
        print(store.get_status_report())

    return 0


if __name__ == "__main__":
    sys.exit(main())
