# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

from tasker.model.task import Task

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"
OVERDUE_TASK_COLOR = "red"


def format_tags(tags: list[str]) -> str:
    """Format tags as a sorted, comma-separated string without brackets or quotes."""
    if len(tags) == 0:
        return ""
    return ", ".join(sorted(tags))


def task_state(task: Task) -> str:
    """
    Get the state symbol for a task.

    Returns:
        "X" if completed, "R" if recurring, " " otherwise
    """
    if task.completed:
        return "X"
    if task.recurs:
        return "R"
    return " "


def task_color(task: Task, today: datetime.date) -> Optional[str]:
    if task.completed:
        return COMPLETED_TASK_COLOR
    if task.due is not None and task.due < today:
        return OVERDUE_TASK_COLOR
    return None


def sort_key(task: Task) -> tuple[bool, datetime.date, int]:
    # Undated tasks sort last
    due = task.due if task.due is not None else datetime.date.max
    return (task.due is None, due, task.id)
