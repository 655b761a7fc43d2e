# SPDX-License-Identifier: MIT

import typer

from tasker.model.task_id import TaskId, from_base36


def parse_task_id(id_param: str) -> TaskId:
    try:
        return from_base36(id_param)
    except ValueError:
        raise typer.BadParameter(f"Invalid ID: '{id_param}' is not a base-36 task id")


def parse_task_ids(id_params: list[str]) -> list[TaskId]:
    """
    Parse task ids given as separate arguments or comma-separated lists.

    Args:
        id_params: Base-36 ids, e.g. ["1", "a,b"]

    Returns:
        Ids in the order given, without duplicates

    Raises:
        typer.BadParameter: If any id is not valid base-36 or none were given
    """
    ids: list[TaskId] = []
    for id_param in id_params:
        for id_str in id_param.split(","):
            id_str = id_str.strip()
            if not id_str:
                continue
            ids.append(parse_task_id(id_str))

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return list(dict.fromkeys(ids))
