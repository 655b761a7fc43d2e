# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tasker import time
from tasker.service import date_spec
from tasker.terminal.parse import parse_task_id, parse_task_ids
from tasker.terminal.state import exit_on_error, get_state
from tasker.view import task as task_report


@exit_on_error
def add(
    ctx: typer.Context,
    name: str,
    due: Annotated[
        Optional[str],
        typer.Option(
            "--due",
            "-d",
            help="valid inputs: YYYY-MM-DD, today, tomorrow, a weekday name, or a day of the month like 15",
        ),
    ] = None,
    recurs: Annotated[
        Optional[str],
        typer.Option(
            "--recurs",
            "-r",
            help='requires --due. valid inputs: "<n> day(s)|week(s)|month(s)|year(s)" or weekdays like "monday,thursday"',
        ),
    ] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-t", help="accepts multiple tag options"),
    ] = None,
) -> None:
    """
    Add a task
    """
    state = get_state(ctx)
    registry = state["registry"]

    if recurs is not None and due is None:
        raise typer.BadParameter("a recurring task needs a due date", param_hint="--recurs")

    due_date = date_spec.resolve(due, time.today()) if due is not None else None
    task = registry.create(name, due=due_date, schedule=recurs, tags=tags)
    registry.flush()

    task_report.single_task_view(task, state["config"]["date_format"])


@exit_on_error
def complete(
    ctx: typer.Context,
    ids: Annotated[list[str], typer.Argument(help="base-36 task ids")],
) -> None:
    """
    Complete tasks. Recurring tasks move to their next due date instead.
    """
    state = get_state(ctx)
    registry = state["registry"]
    date_format = state["config"]["date_format"]

    tasks = [registry.get(id) for id in parse_task_ids(ids)]
    for task in tasks:
        task.complete()
        if task.recurs and task.due is not None:
            typer.echo(
                f"Task {task.display_id} ({task.name}) rescheduled for "
                f"{time.date_to_display_str(task.due, date_format)}."
            )
        else:
            typer.echo(f"Task {task.display_id} ({task.name}) completed.")

    registry.mark_dirty()
    registry.flush()


@exit_on_error
def delete(
    ctx: typer.Context,
    ids: Annotated[list[str], typer.Argument(help="base-36 task ids")],
) -> None:
    """
    Delete tasks
    """
    registry = get_state(ctx)["registry"]

    task_ids = parse_task_ids(ids)
    # Fail before removing anything if any id is unknown
    for id in task_ids:
        registry.get(id)

    for id in task_ids:
        task = registry.remove(id)
        typer.echo(f"Task {task.display_id} ({task.name}) deleted.")

    registry.flush()


@exit_on_error
def postpone(
    ctx: typer.Context,
    due: Annotated[str, typer.Argument(help="new due date")],
    ids: Annotated[list[str], typer.Argument(help="base-36 task ids")],
) -> None:
    """
    Set a new due date on tasks
    """
    state = get_state(ctx)
    registry = state["registry"]
    date_format = state["config"]["date_format"]

    tasks = [registry.get(id) for id in parse_task_ids(ids)]
    due_date = date_spec.resolve(due, time.today())
    for task in tasks:
        task.due = due_date
        typer.echo(
            f"Task {task.display_id} ({task.name}) postponed to "
            f"{time.date_to_display_str(due_date, date_format)}."
        )

    registry.mark_dirty()
    registry.flush()


@exit_on_error
def rename(
    ctx: typer.Context,
    id: Annotated[str, typer.Argument(help="base-36 task id")],
    name: str,
) -> None:
    """
    Rename a task
    """
    registry = get_state(ctx)["registry"]

    task = registry.get(parse_task_id(id))
    old_name = task.name
    task.name = name
    typer.echo(f"Task {task.display_id} renamed from {old_name} to {task.name}.")

    registry.mark_dirty()
    registry.flush()


@exit_on_error
def retag(
    ctx: typer.Context,
    id: Annotated[str, typer.Argument(help="base-36 task id")],
    tags: Annotated[
        Optional[list[str]], typer.Argument(help="new tags, none to clear")
    ] = None,
) -> None:
    """
    Replace the tags of a task
    """
    registry = get_state(ctx)["registry"]

    task = registry.get(parse_task_id(id))
    task.tags = tags or []
    registry.index_tags(task)
    if len(task.tags) > 0:
        typer.echo(
            f"Task {task.display_id} ({task.name}) tagged {', '.join(sorted(task.tags))}."
        )
    else:
        typer.echo(f"Task {task.display_id} ({task.name}) untagged.")

    registry.mark_dirty()
    registry.flush()


@exit_on_error
def list_tasks(
    ctx: typer.Context,
    search: Annotated[
        Optional[str], typer.Argument(help="case-insensitive name search")
    ] = None,
    tagged: Annotated[
        Optional[str], typer.Option("--tagged", help="only tasks with this tag")
    ] = None,
    dated: Annotated[
        Optional[str],
        typer.Option("--dated", help="only tasks due on this date"),
    ] = None,
    completed: Annotated[
        bool,
        typer.Option("--completed", "-c", help="include completed tasks"),
    ] = False,
    no_recurring: Annotated[
        bool,
        typer.Option("--no-recurring", "-n", help="hide recurring tasks"),
    ] = False,
) -> None:
    """
    List tasks
    """
    state = get_state(ctx)
    registry = state["registry"]
    today = time.today()

    tasks = list(registry.tasks)
    if not completed:
        tasks = [task for task in tasks if not task.completed]
    if no_recurring:
        tasks = [task for task in tasks if not task.recurs]
    if search is not None:
        lowered = search.lower()
        tasks = [task for task in tasks if lowered in task.name.lower()]
    if tagged is not None:
        tasks = [task for task in tasks if tagged in task.tags]
    if dated is not None:
        dated_date = date_spec.resolve(dated, today)
        tasks = [task for task in tasks if task.due == dated_date]

    task_report.tasks_view("tasks", tasks, today, state["config"]["date_format"])


@exit_on_error
def status(ctx: typer.Context) -> None:
    """
    Show incomplete tasks due today or earlier on one line
    """
    registry = get_state(ctx)["registry"]
    today = time.today()

    due_tasks = [
        task
        for task in registry.tasks
        if not task.completed and task.is_due_by(today)
    ]
    if len(due_tasks) == 0:
        return

    typer.echo(" ".join(f"[{task.display_id}] {task.name}" for task in due_tasks))


@exit_on_error
def purge(ctx: typer.Context) -> None:
    """
    Remove all completed tasks
    """
    registry = get_state(ctx)["registry"]

    removed = registry.purge_completed()
    registry.flush()

    typer.echo(f"Purged {removed} completed task(s).")


def tags(ctx: typer.Context) -> None:
    """
    Show every tag in use
    """
    task_report.tags_view(get_state(ctx)["registry"].tags)
