# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import NotRequired, Optional, TypeAlias, TypedDict

import pendulum

from tasker import time
from tasker.model.task_id import TaskId, to_base36
from tasker.service import date_spec, recurrence

logger = logging.getLogger(__name__)

DueInput: TypeAlias = Optional[datetime.date | str]


class TaskRecord(TypedDict):
    """Serialized form of a task as stored in tasks.yaml."""

    id: int
    name: str
    recurs: bool
    completed: bool
    due: NotRequired[str]
    schedule: NotRequired[str]
    tags: NotRequired[list[str]]


class Task:
    def __init__(
        self,
        id: TaskId,
        name: str,
        due: DueInput = None,
        schedule: Optional[str] = None,
        completed: bool = False,
        tags: Optional[list[str]] = None,
    ) -> None:
        self.id = id
        self.name = name
        self.due = due
        # Set after due so the schedule is validated against it
        self.schedule = schedule
        self.completed = completed
        self.tags = tags or []

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        value = value.strip()
        if not value:
            raise ValueError("task name must not be empty")
        self._name = value

    @property
    def due(self) -> Optional[pendulum.Date]:
        return self._due

    @due.setter
    def due(self, value: DueInput) -> None:
        """
        Accepts a date, a datetime or a date expression.

        Datetimes are reduced to their local calendar day. Text goes through
        the date expression resolver against today, so stored ISO dates and
        user input such as "friday" end up as the same kind of value.
        """
        if value is None:
            self._due = None
        elif isinstance(value, str):
            self._due = date_spec.resolve(value, time.today())
        else:
            self._due = time.to_local_date(value)

    @property
    def schedule(self) -> Optional[str]:
        return self._schedule

    @schedule.setter
    def schedule(self, value: Optional[str]) -> None:
        if value is not None:
            recurrence.validate(value, self._due or time.today())
        self._schedule = value

    @property
    def recurs(self) -> bool:
        return self._schedule is not None

    @property
    def tags(self) -> list[str]:
        return self._tags

    @tags.setter
    def tags(self, value: list[str]) -> None:
        # Deduplicate, keeping first-seen order
        self._tags = list(dict.fromkeys(value))

    @property
    def display_id(self) -> str:
        return to_base36(self.id)

    def complete(self) -> None:
        """
        Complete the task.

        A recurring task is never marked completed. Its due date moves to the
        next date of its schedule, counted from the current due date rather
        than from today so that finishing late or early does not shift the
        schedule.
        """
        if self._schedule is not None:
            anchor = self._due if self._due is not None else time.today()
            self._due = recurrence.resolve(self._schedule, anchor)
            logger.debug("task %s rescheduled to %s", self.id, self._due)
        else:
            self.completed = True

    def is_due_by(self, date: datetime.date) -> bool:
        return self._due is not None and self._due <= date

    def to_record(self) -> TaskRecord:
        record: TaskRecord = {
            "id": self.id,
            "name": self.name,
            "recurs": self.recurs,
            "completed": self.completed,
        }
        due = time.date_to_str_optional(self._due)
        if due is not None:
            record["due"] = due
        if self._schedule is not None:
            record["schedule"] = self._schedule
        if len(self._tags) > 0:
            record["tags"] = list(self._tags)
        return record

    @classmethod
    def from_record(cls, record: TaskRecord) -> "Task":
        return cls(
            id=int(record["id"]),
            name=str(record["name"]),
            due=record.get("due"),
            schedule=record.get("schedule"),
            completed=bool(record.get("completed", False)),
            tags=[str(tag) for tag in record.get("tags") or []],
        )

    def __repr__(self) -> str:
        return (
            f"Task(id={self.id!r}, name={self.name!r}, due={self._due!r}, "
            f"schedule={self._schedule!r}, completed={self.completed!r}, "
            f"tags={self._tags!r})"
        )
