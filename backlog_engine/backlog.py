"""Backlog ordering and filtering."""

from __future__ import annotations

from backlog_engine.schema import CATEGORIES, Task, priority_weight

SORT_KEYS = ("priority", "dueDate", "category")


def _category_rank(category) -> int:
    return CATEGORIES.index(category) if category in CATEGORIES else len(CATEGORIES)


def sort_tasks(tasks: list[Task], by: str = "priority") -> list[Task]:
    """Return tasks ordered by priority, due date or category."""

    if by == "priority":
        key = lambda task: (-priority_weight(task.priority), task.due_date)
    elif by == "dueDate":
        key = lambda task: task.due_date
    elif by == "category":
        key = lambda task: (_category_rank(task.category), -priority_weight(task.priority))
    else:
        raise ValueError(f"Unknown sort key '{by}', expected one of {SORT_KEYS}")
    return sorted(tasks, key=key)


def filter_tasks(tasks: list[Task], category: str = "all") -> list[Task]:
    if category == "all":
        return list(tasks)
    return [task for task in tasks if task.category == category]


def open_tasks(tasks: list[Task]) -> list[Task]:
    return [task for task in tasks if not task.completed]
