# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from tasker.initialize import initialize
from tasker.terminal import task
from tasker.terminal.custom_typer import AliasedTyperGroup
from tasker.terminal.state import AppState
from tasker.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="tasker - personal tasks with due dates and schedules",
    no_args_is_help=True,
)
app.command(name="add, a", no_args_is_help=True)(task.add)
app.command(name="complete, c", no_args_is_help=True)(task.complete)
app.command(name="delete, d", no_args_is_help=True)(task.delete)
app.command(name="postpone, p", no_args_is_help=True)(task.postpone)
app.command(name="rename, rn", no_args_is_help=True)(task.rename)
app.command(name="retag, rt", no_args_is_help=True)(task.retag)
app.command(name="list, ls")(task.list_tasks)
app.command(name="status, s")(task.status)
app.command(name="purge")(task.purge)
app.command(name="tags")(task.tags)


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--data-dir",
            help="Directory holding tasks.yaml (overrides TASKER_DATA_DIR and the config file)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    tasker - personal tasks with due dates and schedules

    Global options that apply to all commands.
    """
    config, registry = initialize(data_dir=data_dir, verbose=verbose)
    if no_header:
        view_state.set_show_header(False)

    state: AppState = {"config": config, "registry": registry}
    ctx.obj = state


def run() -> None:
    app()
