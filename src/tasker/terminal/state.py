# SPDX-License-Identifier: MIT

import logging
from functools import wraps
from typing import Any, Callable, TypedDict, TypeVar, cast

import typer
from rich.console import Console
from rich.markup import escape

from tasker.configuration import Configuration
from tasker.errors import TaskerError
from tasker.repository.task import TaskRegistry

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class AppState(TypedDict):
    """Per-invocation objects handed to every command through ctx.obj."""

    config: Configuration
    registry: TaskRegistry


def get_state(ctx: typer.Context) -> AppState:
    return cast(AppState, ctx.obj)


def exit_on_error(func: F) -> F:
    """
    Report user-facing errors and exit with status 1.

    The command never reaches its flush, so nothing from a failed operation
    is written to the store.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (TaskerError, ValueError) as e:
            logger.info("%s failed: %s", func.__name__, e)
            Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
