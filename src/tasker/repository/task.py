# SPDX-License-Identifier: MIT

import datetime
import logging
from pathlib import Path
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tasker.errors import NotFound
from tasker.model.task import DueInput, Task, TaskRecord
from tasker.model.task_id import TaskId

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    Owns every task in one store file.

    Ids are the smallest non-negative integer not held by a task in the
    collection, so deleting a task frees its id for the next one created.
    Completed tasks keep their ids until they are removed or purged.

    The store is read by load() and written by save(). flush() writes only
    when something changed, which lets a command that failed part way leave
    the file untouched.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._tasks: Optional[list[Task]] = None
        self._tags: set[str] = set()
        self.is_dirty = False

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.load()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    @property
    def tags(self) -> list[str]:
        return sorted(self._tags)

    def load(self) -> None:
        self._tasks = []
        self._tags = set()
        self.is_dirty = False

        if not self.path.is_file():
            logger.debug("no task store at %s, starting empty", self.path)
            return

        raw_tasks = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        if raw_tasks is None:
            return
        if not isinstance(raw_tasks, list):
            raise ValueError(f"{self.path} must contain a list of tasks")

        seen_ids: set[TaskId] = set()
        for raw_task in raw_tasks:
            task = self.__convert_task_for_deserialization(raw_task)
            if task.id in seen_ids:
                raise ValueError(f"{self.path} contains task id {task.id} twice")
            seen_ids.add(task.id)
            self.__add(task)

        logger.debug("loaded %d task(s) from %s", len(self._tasks), self.path)

    def save(self) -> None:
        records = [
            self.__convert_task_for_serialization(task) for task in self.tasks
        ]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump(records, Dumper=Dumper), encoding="utf-8")
        self.is_dirty = False
        logger.debug("saved %d task(s) to %s", len(records), self.path)

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.save()
            return True
        return False

    def mark_dirty(self) -> None:
        """Record an in-place change to a task (rename, retag, postpone, complete)."""
        self.is_dirty = True

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        return cast(dict[str, Any], task.to_record())

    def __convert_task_for_deserialization(self, raw_task: dict[str, Any]) -> Task:
        # Hand-edited files may hold an unquoted YAML date
        due = raw_task.get("due")
        if isinstance(due, datetime.date):
            raw_task["due"] = due.isoformat()
        return Task.from_record(cast(TaskRecord, raw_task))

    def __add(self, task: Task) -> None:
        self.tasks.append(task)
        self.index_tags(task)

    def index_tags(self, task: Task) -> None:
        self._tags.update(task.tags)

    def __reindex_tags(self) -> None:
        self._tags = set()
        for task in self.tasks:
            self.index_tags(task)

    def next_id(self) -> TaskId:
        used_ids = {task.id for task in self.tasks}
        next_id = 0
        while next_id in used_ids:
            next_id += 1
        return next_id

    def create(
        self,
        name: str,
        due: DueInput = None,
        schedule: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Task:
        task = Task(
            id=self.next_id(),
            name=name,
            due=due,
            schedule=schedule,
            tags=tags,
        )
        self.__add(task)
        self.is_dirty = True
        logger.info("created task %s: %s", task.display_id, task.name)
        return task

    def remove(self, id: TaskId) -> Task:
        task = self.get(id)
        self.tasks.remove(task)
        self.__reindex_tags()
        self.is_dirty = True
        logger.info("removed task %s: %s", task.display_id, task.name)
        return task

    def get_by_id(self, id: TaskId) -> Optional[Task]:
        for task in self.tasks:
            if task.id == id:
                return task
        return None

    def get(self, id: TaskId) -> Task:
        task = self.get_by_id(id)
        if task is None:
            raise NotFound(id)
        return task

    def purge_completed(self) -> int:
        kept = [task for task in self.tasks if not task.completed]
        removed = len(self.tasks) - len(kept)
        if removed > 0:
            self._tasks = kept
            self.__reindex_tags()
            self.is_dirty = True
        logger.info("purged %d completed task(s)", removed)
        return removed
