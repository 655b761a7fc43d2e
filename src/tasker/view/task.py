# SPDX-License-Identifier: MIT

import datetime

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasker.model.task import Task
from tasker.time import date_to_display_str_optional
from tasker.view.header import header
from tasker.view.util import format_tags, sort_key, task_color, task_state


def tasks_view(
    report_name: str,
    tasks: list[Task],
    today: datetime.date,
    date_format: str,
) -> None:
    header(report_name)

    console = Console()
    if len(tasks) == 0:
        console.print("[yellow]No tasks found.[/yellow]")
        return

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id", justify="right")
    tasks_table.add_column("state")
    tasks_table.add_column("task")
    tasks_table.add_column("due")
    tasks_table.add_column("schedule")
    tasks_table.add_column("tags")

    for task in sorted(tasks, key=sort_key):
        row = [
            task.display_id,
            task_state(task),
            escape(task.name),
            date_to_display_str_optional(task.due, date_format) or "",
            escape(task.schedule or ""),
            escape(format_tags(task.tags)),
        ]

        color = task_color(task, today)
        if color is not None:
            row = [f"[{color}]{value}[/{color}]" for value in row]

        tasks_table.add_row(*row)

    console.print(tasks_table)


def single_task_view(task: Task, date_format: str) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", task.display_id)
    task_table.add_row("name", escape(task.name))
    task_table.add_row("due", date_to_display_str_optional(task.due, date_format))
    task_table.add_row("schedule", escape(task.schedule or ""))
    task_table.add_row("completed", "yes" if task.completed else "no")
    task_table.add_row("tags", escape(format_tags(task.tags)))

    console = Console()
    console.print(task_table)


def tags_view(tags: list[str]) -> None:
    header("tags")

    console = Console()
    if len(tags) == 0:
        console.print("[yellow]No tags found.[/yellow]")
        return

    for tag in tags:
        console.print(escape(tag))
