# SPDX-License-Identifier: MIT

from tasker.model.task_id import to_base36


class TaskerError(Exception):
    """Base class for errors surfaced to the user for a single operation."""

    pass


class InvalidDateSpec(TaskerError):
    """Raised when a date expression cannot be resolved to a calendar date."""

    def __init__(self, spec: str) -> None:
        self.spec = spec
        super().__init__(f"{spec} is not a valid date.")


class InvalidRecurrenceSpec(TaskerError):
    """Raised when a recurrence expression cannot be resolved to a next date."""

    def __init__(self, spec: str) -> None:
        self.spec = spec
        super().__init__(f"{spec} is not a valid schedule.")


class NotFound(TaskerError):
    """Raised by registry lookups on ids that are not in the collection."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"No task with id {to_base36(task_id)}.")
